"""
termlife core: board model, Conway rules and the generation sequence.

Everything here is pure computation; terminal I/O lives in
``termlife.terminal`` and the driving loop in ``termlife.cli``.
"""

from .board import Board, InvalidDimension, random_seed_fn
from .conway_rules import BIRTH_SET, SURVIVAL_SET, update_cell
from .generator import Generator, GeneratorState, Termination, generations

__all__ = [
    'Board',
    'InvalidDimension',
    'random_seed_fn',
    'BIRTH_SET',
    'SURVIVAL_SET',
    'update_cell',
    'Generator',
    'GeneratorState',
    'Termination',
    'generations',
]
