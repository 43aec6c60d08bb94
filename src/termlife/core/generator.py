"""Generation sequence with stabilization detection.

The Generator lazily produces successive Boards and stops on its own once the
population dies out, reaches a fixed point, or starts alternating between two
states.
"""

from enum import Enum
from typing import Iterator, Optional
import logging

from .board import Board

logger = logging.getLogger(__name__)


class GeneratorState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class Termination(Enum):
    """Why a generation sequence stopped."""
    EXTINCT = "extinct"          # every cell is dead
    OSCILLATING = "oscillating"  # board equals the one two generations back
    STATIC = "static"            # board equals its predecessor


class Generator:
    """Iterator over the generations following an initial Board.

    The initial board itself is not emitted. Each ``next()`` computes one new
    generation, emits it, and then checks the termination conditions; the
    board that triggers termination is still emitted, after which the
    iterator is exhausted for good.

    Only period-2 oscillations are detected. Longer cycles run indefinitely.

    Attributes:
        current: Most recently emitted board (the initial board before the first step)
        state: RUNNING or TERMINATED
        reason: Termination reason once TERMINATED, else None
    """

    def __init__(self, initial: Board):
        self.current = initial
        self.previous: Optional[Board] = None
        self.state = GeneratorState.RUNNING
        self.reason: Optional[Termination] = None

    def __iter__(self) -> Iterator[Board]:
        return self

    def __next__(self) -> Board:
        if self.state is GeneratorState.TERMINATED:
            raise StopIteration

        current = self.current
        nxt = current.next_generation()

        if nxt.is_empty():
            self._terminate(Termination.EXTINCT, nxt)
        elif self.previous is not None and nxt.equals(self.previous):
            self._terminate(Termination.OSCILLATING, nxt)
        elif nxt.equals(current):
            self._terminate(Termination.STATIC, nxt)

        self.previous = current
        self.current = nxt
        return nxt

    @property
    def terminated(self) -> bool:
        return self.state is GeneratorState.TERMINATED

    def _terminate(self, reason: Termination, board: Board) -> None:
        self.state = GeneratorState.TERMINATED
        self.reason = reason
        logger.debug(f"Generation sequence stopped at generation {board.generation}: {reason.value}")


def generations(initial: Board) -> Iterator[Board]:
    """Yield the boards following ``initial`` until the sequence terminates."""
    yield from Generator(initial)
