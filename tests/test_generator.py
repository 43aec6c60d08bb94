"""Tests for the generation sequence and its termination conditions."""

import itertools

import pytest
import numpy as np
from termlife.core.board import Board
from termlife.core.generator import Generator, GeneratorState, Termination, generations


def board_with(rows, cols, alive_cells):
    alive_cells = set(alive_cells)
    return Board.create(rows, cols, lambda r, c: (r, c) in alive_cells)


GLIDER_8X8 = [
    ".#......",
    "..#.....",
    "###.....",
    "........",
    "........",
    "........",
    "........",
    "........",
]


class TestTermination:
    """Test the three stopping conditions."""

    def test_empty_board_stops_after_one(self):
        """All-dead seed emits one empty board then stops."""
        gen = Generator(Board.empty(5, 5))
        emitted = list(gen)

        assert len(emitted) == 1
        assert emitted[0].is_empty()
        assert emitted[0].generation == 1
        assert gen.reason is Termination.EXTINCT

    def test_lone_cell_goes_extinct(self):
        """Board one generation away from empty stops on the empty board."""
        gen = Generator(board_with(5, 5, [(2, 2)]))
        emitted = list(gen)

        assert len(emitted) == 1
        assert emitted[-1].is_empty()
        assert gen.reason is Termination.EXTINCT

    def test_block_is_static(self):
        """Still life stops after emitting a board equal to its predecessor."""
        block = board_with(6, 6, [(1, 1), (1, 2), (2, 1), (2, 2)])
        gen = Generator(block)
        emitted = list(gen)

        assert len(emitted) == 1
        assert emitted[0] == block
        assert emitted[0].generation == 1
        assert gen.reason is Termination.STATIC

    def test_blinker_detected_as_oscillating(self):
        """Blinker stops once a board matches the one two generations back."""
        vertical = board_with(5, 5, [(1, 2), (2, 2), (3, 2)])
        horizontal = board_with(5, 5, [(2, 1), (2, 2), (2, 3)])
        gen = Generator(vertical)
        emitted = list(gen)

        assert emitted == [horizontal, vertical]
        assert [b.generation for b in emitted] == [1, 2]
        assert gen.reason is Termination.OSCILLATING

    def test_decays_to_still_life(self):
        """Three cells in an L become a block on the next step and then hold."""
        gen = Generator(board_with(6, 6, [(1, 1), (1, 2), (2, 1)]))
        emitted = list(gen)
        block = board_with(6, 6, [(1, 1), (1, 2), (2, 1), (2, 2)])

        assert emitted == [block, block]
        assert gen.reason is Termination.STATIC


class TestGeneratorState:
    """Test the running/terminated state machine."""

    def test_initial_state(self):
        initial = Board.empty(3, 3)
        gen = Generator(initial)

        assert gen.state is GeneratorState.RUNNING
        assert gen.reason is None
        assert gen.current is initial
        assert not gen.terminated

    def test_terminated_is_absorbing(self):
        """After the final board, every call raises StopIteration."""
        gen = Generator(Board.empty(3, 3))
        next(gen)

        assert gen.terminated
        with pytest.raises(StopIteration):
            next(gen)
        with pytest.raises(StopIteration):
            next(gen)

    def test_glider_keeps_running(self):
        """Moving patterns are never mistaken for stable ones."""
        gen = Generator(Board.from_strings(GLIDER_8X8))
        emitted = list(itertools.islice(gen, 20))

        assert len(emitted) == 20
        assert gen.state is GeneratorState.RUNNING
        assert [b.generation for b in emitted] == list(range(1, 21))
        assert all(b.population() == 5 for b in emitted)

    def test_current_tracks_last_emitted(self):
        gen = Generator(Board.from_strings(GLIDER_8X8))
        board = next(gen)
        assert gen.current is board


class TestDeterminism:
    """Test reproducibility of generation sequences."""

    def test_same_initial_board_same_sequence(self):
        initial = Board.random(12, 12, rng=np.random.default_rng(11))

        first = list(itertools.islice(Generator(initial), 30))
        second = list(itertools.islice(Generator(initial), 30))

        assert len(first) == len(second)
        for a, b in zip(first, second):
            assert a == b
            assert a.generation == b.generation

    def test_generations_helper_matches_generator(self):
        initial = board_with(5, 5, [(1, 2), (2, 2), (3, 2)])
        assert list(generations(initial)) == list(Generator(initial))
