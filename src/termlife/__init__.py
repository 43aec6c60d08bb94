"""
termlife: Conway's Game of Life rendered in the terminal.

Runs a randomly seeded toroidal board until the population dies out,
settles into a still life, or starts blinking between two states.
"""

from .core import Board, Generator, InvalidDimension, Termination

__version__ = "0.1.0"

__all__ = [
    'Board',
    'Generator',
    'InvalidDimension',
    'Termination',
]
