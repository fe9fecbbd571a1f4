"""
Terminal escape sequences and width lookup.

The match/render core never reads the live terminal; hosts call
get_terminal_width() and pass the result down explicitly.
"""
from __future__ import annotations

import os
import sys
from typing import Protocol, runtime_checkable

ERASE_LINE = "\x1b[2K"
ERASE_DOWN = "\x1b[J"
CURSOR_LEFT = "\x1b[G"
CURSOR_HIDE = "\x1b[?25l"
CURSOR_SHOW = "\x1b[?25h"
CURSOR_SAVE_POSITION = "\x1b7"
CURSOR_RESTORE_POSITION = "\x1b8"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

DEFAULT_COLUMNS = 80


@runtime_checkable
class Pipe(Protocol):
    """Anything output can be written to (a stream, a terminal, a test buffer)."""

    def write(self, data: str) -> object:
        ...


def cursor_to(x: int, y: int | None = None) -> str:
    """Move the cursor to column ``x`` (and row ``y`` when given), zero-based."""
    if y is None:
        return f"\x1b[{x + 1}G"
    return f"\x1b[{y + 1};{x + 1}H"


def get_terminal_width(pipe: object | None = None) -> int:
    """
    Columns of the terminal behind ``pipe`` (stdout when omitted).

    Uses a ``columns`` attribute when the pipe has one, then the OS query,
    then ``$COLUMNS``, then 80.
    """
    columns = getattr(pipe, "columns", None)
    if isinstance(columns, int) and columns > 0:
        return columns

    stream = pipe if pipe is not None else sys.stdout
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        pass
    try:
        return int(os.environ.get("COLUMNS", DEFAULT_COLUMNS))
    except ValueError:
        return DEFAULT_COLUMNS
