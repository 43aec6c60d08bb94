"""Terminal I/O for the Game of Life display.

Reads the terminal size, turns Boards into ANSI frames and keeps the cursor
hidden for the duration of a run.
"""

import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO, Tuple
import logging

from .core.board import Board

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[2J"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

ALIVE_GLYPH = "██"
DEAD_GLYPH = "  "
CELL_WIDTH = 2     # display columns per cell
STATUS_ROWS = 1    # rows reserved below the board


class TerminalSizeError(OSError):
    """Raised when the terminal dimensions cannot be determined."""


def terminal_size(fd: Optional[int] = None) -> Tuple[int, int]:
    """Get (display_rows, display_cols) of the terminal attached to fd.

    Args:
        fd: File descriptor to query (stdin when omitted)

    Raises:
        TerminalSizeError: If fd is not a terminal
    """
    try:
        if fd is None:
            fd = sys.stdin.fileno()
        size = os.get_terminal_size(fd)
    except (AttributeError, ValueError, OSError) as e:
        raise TerminalSizeError(str(e)) from e
    return size.lines, size.columns


def board_dimensions(display_rows: int, display_cols: int) -> Tuple[int, int]:
    """Convert display dimensions to board (rows, cols).

    One row is kept for the status line and each cell is two columns wide.
    The result may be non-positive for tiny terminals; Board creation rejects it.
    """
    return display_rows - STATUS_ROWS, display_cols // CELL_WIDTH


def render_frame(board: Board) -> str:
    """Render a full frame: clear screen, board rows, then the status line."""
    parts = [CLEAR_SCREEN]
    for row in board.cells:
        parts.append("".join(ALIVE_GLYPH if alive else DEAD_GLYPH for alive in row))
        parts.append("\n")
    parts.append(f"generation: {board.generation}")
    return "".join(parts)


class FrameWriter:
    """Writes rendered frames to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.frames_written = 0

    def write(self, board: Board) -> None:
        self.stream.write(render_frame(board))
        self.stream.flush()
        self.frames_written += 1


@contextmanager
def hidden_cursor(stream: Optional[TextIO] = None) -> Iterator[None]:
    """Hide the cursor while the block runs; always show it again on exit."""
    stream = stream if stream is not None else sys.stdout
    stream.write(HIDE_CURSOR)
    stream.flush()
    try:
        yield
    finally:
        stream.write(SHOW_CURSOR)
        stream.flush()
        logger.debug("Cursor restored")
