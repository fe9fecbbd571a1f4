"""Scroll window bookkeeping for the typeahead list."""
from __future__ import annotations

from .types import ScrollOptions, ScrollWindow


def scroll(size: int, options: ScrollOptions) -> ScrollWindow:
    """
    Pick the slice of ``size`` results to show so the selected row stays
    near the middle of a ``options.max`` row window.

    ``index`` is the selected row relative to ``start`` (-1 when nothing is
    selected).
    """
    start = 0
    index = min(options.offset, size)
    half_screen = options.max / 2

    if index > half_screen:
        if size >= options.max:
            start = int(min(index - half_screen - 1, size - options.max))
        index = min(index - start, size)

    return ScrollWindow(start=start, end=min(size, start + options.max), index=index)
