"""
SGR styling helpers and the path theme.

Themes are plain dataclasses of ``str -> str`` callables, so hosts can swap
in their own palette (or identity functions for plain output).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

_CSI = "\x1b["


def _sgr(open_code: str, close_code: str) -> Callable[[str], str]:
    def apply(text: str) -> str:
        if not text:
            return ""
        return f"{_CSI}{open_code}m{text}{_CSI}{close_code}m"
    return apply


dim = _sgr("2", "22")
bold = _sgr("1", "22")
reset = _sgr("0", "0")
gray = _sgr("90", "39")
italic_yellow = _sgr("3;33", "23;39")
selected = _sgr("30;43", "39;49")


def plain(text: str) -> str:
    return text


@dataclass
class PathTheme:
    """Styles used when formatting and highlighting a path row."""
    directory: Callable[[str], str] = field(default=dim)
    basename: Callable[[str], str] = field(default=bold)
    matched: Callable[[str], str] = field(default=reset)
    unmatched: Callable[[str], str] = field(default=gray)
    faded: Callable[[str], str] = field(default=dim)


DEFAULT_PATH_THEME = PathTheme()

PLAIN_PATH_THEME = PathTheme(
    directory=plain,
    basename=plain,
    matched=plain,
    unmatched=plain,
    faded=plain,
)
