"""
Terminal text utilities.

Provides:
- strip_ansi(): remove escape sequences so offsets address visible characters
- visible_width(): terminal column width of a prompt fragment
- to_single_line(): inline line breaks with a visible marker
"""
from __future__ import annotations

import re

from wcwidth import wcwidth

_ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;]*[mGKHJA-Z]")
_ANSI_OSC_RE = re.compile(r"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")
_ANSI_APC_RE = re.compile(r"\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)")

_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")
ENTER_MARKER = "⏎"


def strip_ansi(s: str) -> str:
    """Remove SGR, OSC and APC escape sequences from ``s``."""
    if "\x1b" not in s:
        return s
    s = _ANSI_SGR_RE.sub("", s)
    s = _ANSI_OSC_RE.sub("", s)
    return _ANSI_APC_RE.sub("", s)


def visible_width(s: str) -> int:
    """
    Columns ``s`` occupies once printed.

    Escape sequences take no room, combining marks and control characters
    count as zero, wide (East Asian) characters count as two.
    """
    clean = strip_ansi(s)
    if clean.isascii() and clean.isprintable():
        return len(clean)
    return sum(max(wcwidth(ch), 0) for ch in clean)


def to_single_line(text: str) -> str:
    """Replace every line break with ``⏎`` so the text fits one row."""
    return _LINE_BREAK_RE.sub(ENTER_MARKER, text)
