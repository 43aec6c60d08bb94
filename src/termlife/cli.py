#!/usr/bin/env python3
"""
Terminal Game of Life

Seeds a board sized to the terminal and renders generation after generation
until the population dies out, stands still, or blinks between two states.
Ctrl+C (or SIGTERM) stops the run at the next frame boundary.
"""

import sys
import signal
import argparse
import threading
import logging
from contextlib import contextmanager, nullcontext
from enum import Enum
from typing import Callable, Iterator, List, Optional, TextIO, Tuple

import numpy as np

from . import __version__
from .config import LOG_LEVELS, LifeConfig
from .core.board import Board, InvalidDimension
from .core.generator import Generator
from .terminal import FrameWriter, TerminalSizeError, board_dimensions, hidden_cursor, terminal_size

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class RunOutcome(Enum):
    STABILIZED = "stabilized"
    INTERRUPTED = "interrupted"
    LIMIT_REACHED = "limit_reached"


EXIT_MESSAGES = {
    RunOutcome.STABILIZED: "Game stabilized. Exiting...",
    RunOutcome.INTERRUPTED: "Game interrupted. Exiting...",
    RunOutcome.LIMIT_REACHED: "Generation limit reached. Exiting...",
}


@contextmanager
def interrupt_token(signals=(signal.SIGINT, signal.SIGTERM)) -> Iterator[threading.Event]:
    """Route the given signals to an Event for the duration of the block.

    Previous handlers are put back on exit.
    """
    stop = threading.Event()
    previous = {}

    def handler(signum, frame):
        logger.info(f"Received signal {signum}, stopping")
        stop.set()

    for sig in signals:
        previous[sig] = signal.signal(sig, handler)
    try:
        yield stop
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)


def simulate(initial: Board, writer: FrameWriter, stop: threading.Event,
             frame_delay: float, max_generations: Optional[int] = None) -> RunOutcome:
    """Render each generation after ``initial`` until the sequence stops.

    The stop event is checked before every frame and interrupts the frame
    delay as soon as it is set.
    """
    generator = Generator(initial)
    for board in generator:
        if stop.is_set():
            return RunOutcome.INTERRUPTED

        writer.write(board)

        if (max_generations is not None and board.generation >= max_generations
                and not generator.terminated):
            return RunOutcome.LIMIT_REACHED
        if stop.wait(frame_delay):
            return RunOutcome.INTERRUPTED

    logger.info(f"Stopped after generation {generator.current.generation}: {generator.reason.value}")
    return RunOutcome.STABILIZED


def run(config: LifeConfig, stream: Optional[TextIO] = None,
        size_fn: Optional[Callable[[], Tuple[int, int]]] = None,
        stop: Optional[threading.Event] = None) -> RunOutcome:
    """Seed a terminal-sized board and animate it on ``stream``.

    Raises:
        TerminalSizeError: If the terminal size cannot be read
        InvalidDimension: If the terminal is too small for a board
    """
    stream = stream if stream is not None else sys.stdout
    rows, cols = board_dimensions(*(size_fn or terminal_size)())

    rng = np.random.default_rng(config.seed)
    initial = Board.random(rows, cols, rng=rng, density=config.density)
    logger.info(f"Starting {rows}x{cols} board, seed={config.seed}, alive={initial.population()}")

    token_scope = interrupt_token() if stop is None else nullcontext(stop)
    with hidden_cursor(stream), token_scope as token:
        outcome = simulate(initial, FrameWriter(stream), token,
                           config.frame_delay, config.max_generations)

    stream.write("\n" + EXIT_MESSAGES[outcome] + "\n")
    stream.flush()
    return outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termlife", description="Conway's Game of Life in the terminal")
    parser.add_argument("--delay", type=float, dest="frame_delay", help="Seconds between frames (default 0.06)")
    parser.add_argument("--density", type=float, help="Initial live cell probability (default 0.3)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible board")
    parser.add_argument("--max-generations", type=int, help="Stop after this many generations")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="Logging level (default WARNING)")
    parser.add_argument("--log-file", help="Write log records to this file instead of stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(config: LifeConfig) -> None:
    """Send log records to the log file, or stderr (stdout carries the frames)."""
    if config.log_file:
        logging.basicConfig(filename=config.log_file, level=config.log_level, format=LOG_FORMAT)
    else:
        logging.basicConfig(stream=sys.stderr, level=config.log_level, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = LifeConfig.from_env().merged(**vars(args)).validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(config)

    try:
        run(config)
    except TerminalSizeError as e:
        print(f"Error getting terminal size: {e}", file=sys.stderr)
        return 1
    except InvalidDimension as e:
        print(f"Terminal too small: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
