"""Board state for the terminal Game of Life.

A Board is one generation of the simulation: a fixed-size toroidal grid of
boolean cells plus its generation counter. Boards are immutable once built;
the next generation is always a new Board.
"""

import numpy as np
from typing import Callable, Iterable, Optional
import logging

from .conway_rules import update_cell

logger = logging.getLogger(__name__)

DEFAULT_DENSITY = 0.3

# Offsets of the 8 Moore neighbors as (dr, dc)
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

SeedFn = Callable[[int, int], bool]


class InvalidDimension(ValueError):
    """Raised when a board is requested with non-positive rows or columns."""


def random_seed_fn(rng: Optional[np.random.Generator] = None,
                   density: float = DEFAULT_DENSITY) -> SeedFn:
    """Build a seed function drawing an independent Bernoulli sample per cell.

    Args:
        rng: Random source; a fresh unseeded generator is used when omitted
        density: Probability of a cell starting alive (0.0 to 1.0)

    Returns:
        Callable taking (row, col) and returning the initial cell state
    """
    if rng is None:
        rng = np.random.default_rng()

    def seed(r: int, c: int) -> bool:
        return bool(rng.random() < density)

    return seed


class Board:
    """One generation of a toroidal Game of Life grid.

    Attributes:
        rows: Number of rows (positive)
        cols: Number of columns (positive)
        cells: Read-only 2D numpy boolean array of shape (rows, cols)
        generation: Generation index, 0 for the seeded board
    """

    def __init__(self, cells: np.ndarray, generation: int = 0):
        """Wrap a prepared boolean array.

        Prefer the ``create``/``random``/``from_cells`` constructors; this
        takes ownership of ``cells`` and freezes it.

        Raises:
            InvalidDimension: If the array is not 2D with positive dimensions
        """
        if cells.ndim != 2 or cells.shape[0] <= 0 or cells.shape[1] <= 0:
            raise InvalidDimension(f"Board dimensions must be positive, got shape {cells.shape}")
        if generation < 0:
            raise ValueError(f"Generation must be non-negative, got {generation}")

        self.rows, self.cols = cells.shape
        self.cells = cells.astype(bool, copy=False)
        self.cells.flags.writeable = False
        self.generation = generation

    @classmethod
    def create(cls, rows: int, cols: int, seed_fn: SeedFn, generation: int = 0) -> 'Board':
        """Allocate a rows x cols board, asking seed_fn for every cell.

        Cells are visited in row-major order, so a seed function backed by a
        seeded random source produces the same board every time.

        Args:
            rows: Number of rows
            cols: Number of columns
            seed_fn: Callable (row, col) -> initial state
            generation: Generation index of the new board

        Raises:
            InvalidDimension: If rows or cols is not positive
        """
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(f"Board dimensions must be positive, got {rows}x{cols}")

        cells = np.zeros((rows, cols), dtype=bool)
        for r in range(rows):
            for c in range(cols):
                cells[r, c] = bool(seed_fn(r, c))

        return cls(cells, generation)

    @classmethod
    def random(cls, rows: int, cols: int,
               rng: Optional[np.random.Generator] = None,
               density: float = DEFAULT_DENSITY) -> 'Board':
        """Create a randomly seeded generation-0 board."""
        board = cls.create(rows, cols, random_seed_fn(rng, density))
        logger.debug(f"Seeded {rows}x{cols} board with density {density}: {board.population()} alive")
        return board

    @classmethod
    def empty(cls, rows: int, cols: int) -> 'Board':
        return cls.create(rows, cols, lambda r, c: False)

    @classmethod
    def from_cells(cls, cells, generation: int = 0) -> 'Board':
        """Create a board from any 2D array-like of truthy values (copied)."""
        array = np.array(cells, dtype=bool)
        if array.ndim != 2 or array.size == 0:
            raise InvalidDimension(f"Cells must form a non-empty 2D grid, got shape {array.shape}")
        return cls(array, generation)

    @classmethod
    def from_strings(cls, lines: Iterable[str], alive: str = '#') -> 'Board':
        """Create a board from text rows, e.g. ``["....", ".##.", ".##.", "...."]``.

        Raises:
            InvalidDimension: If the rows are missing or have unequal lengths
        """
        lines = list(lines)
        if not lines or len({len(line) for line in lines}) != 1:
            raise InvalidDimension("Pattern rows must be non-empty and of equal length")
        return cls.from_cells([[ch == alive for ch in line] for line in lines])

    def with_cell(self, r: int, c: int, alive: bool) -> 'Board':
        """Return a copy of this board with one cell set."""
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"Coordinates ({r}, {c}) out of bounds for {self.rows}x{self.cols} board")
        cells = self.cells.copy()
        cells[r, c] = alive
        return Board(cells, self.generation)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.cells)

    def population(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.cells))

    def equals(self, other: object) -> bool:
        """Check that dimensions and every cell match.

        Boards of different sizes are simply unequal. The generation counter
        is not compared.
        """
        if not isinstance(other, Board):
            return False
        return (self.rows == other.rows and
                self.cols == other.cols and
                np.array_equal(self.cells, other.cells))

    def neighbor_value(self, r: int, c: int) -> int:
        """Return 1 if the cell at the wrapped coordinates is alive, else 0.

        Coordinates may lie one step outside the grid in either direction;
        they are wrapped by adding or subtracting the dimension once.

        Raises:
            IndexError: If a coordinate is more than one step out of range
        """
        if r < 0:
            r += self.rows
        elif r >= self.rows:
            r -= self.rows
        if c < 0:
            c += self.cols
        elif c >= self.cols:
            c -= self.cols

        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"Coordinates ({r}, {c}) out of wrap range for {self.rows}x{self.cols} board")
        return 1 if self.cells[r, c] else 0

    def live_neighbors(self, r: int, c: int) -> int:
        """Count living Moore neighbors of (r, c) with toroidal wraparound."""
        return sum(self.neighbor_value(r + dr, c + dc) for dr, dc in NEIGHBOR_OFFSETS)

    def next_cell_state(self, r: int, c: int) -> bool:
        """Apply Conway's rules to cell (r, c) of this board."""
        return update_cell(bool(self.cells[r, c]), self.live_neighbors(r, c))

    def next_generation(self) -> 'Board':
        """Compute the successor board (generation + 1)."""
        return Board.create(self.rows, self.cols, self.next_cell_state, self.generation + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        """String representation showing live cells as #."""
        return "\n".join(
            "".join("#" if alive else "." for alive in row)
            for row in self.cells
        )

    def __repr__(self) -> str:
        return (f"Board({self.rows}x{self.cols}, generation={self.generation}, "
                f"alive={self.population()})")
