"""
Path rendering for the typeahead list.

Provides:
- trim_and_format_path(): relativize a path and fit it into a column budget
- highlight_fuzzy(): re-style a formatted path with fuzzy match offsets
- highlight(): regex-based highlighting kept for pattern prompts
- format_test_name_by_pattern(): one-line test name with the regex match lit
- render_path(): trim + highlight in one call

Match offsets always address the raw, untruncated path. Formatting strips the
project directory and may cut the front of the path, so offsets are shifted
into the coordinates of the visible string before highlighting. Escape
sequences are stripped before any length or index arithmetic.
"""
from __future__ import annotations

import logging
import os
import re
from itertools import groupby
from typing import Iterable, NamedTuple

from .style import DEFAULT_PATH_THEME, PathTheme
from .types import ProjectConfig
from .utils import strip_ansi, to_single_line

logger = logging.getLogger(__name__)

ELLIPSIS = "..."
RELATIVE_PATH_HEAD = "./"
SEPARATOR = "/"
# Room reserved for "..." plus the separator in front of a kept basename
TRIM_ALLOWANCE = len(ELLIPSIS) + len(SEPARATOR)


class Span(NamedTuple):
    text: str
    is_match: bool


def _slash(path: str) -> str:
    return path.replace("\\", SEPARATOR)


def _relative_path(config: ProjectConfig, test_path: str) -> tuple[str, str]:
    if os.path.isabs(test_path):
        relative = os.path.relpath(test_path, config.base_dir)
    else:
        relative = os.path.normpath(test_path)
    return os.path.dirname(relative) or ".", os.path.basename(relative)


# ─────────────────────────────────────────────────────────────────────────────
# Truncation
# ─────────────────────────────────────────────────────────────────────────────

def trim_and_format_path(
    pad: int,
    config: ProjectConfig,
    test_path: str,
    columns: int,
    theme: PathTheme | None = None,
) -> str:
    """
    Format ``test_path`` relative to the project so it fits ``columns - pad``.

    Degrades from the full path, to ``...`` + the tail of the directory + the
    whole basename, to ``...`` + the tail of the basename. The visible length
    never exceeds the budget.
    """
    theme = theme or DEFAULT_PATH_THEME
    max_length = columns - pad
    dirname, basename = _relative_path(config, test_path)

    if len(dirname + SEPARATOR + basename) <= max_length:
        return theme.directory(_slash(dirname + SEPARATOR)) + theme.basename(_slash(basename))

    # Trimmed dirname, whole basename
    if len(basename) + TRIM_ALLOWANCE < max_length:
        dirname_length = max_length - TRIM_ALLOWANCE - len(basename)
        dirname = ELLIPSIS + dirname[-dirname_length:]
        return theme.directory(_slash(dirname + SEPARATOR)) + theme.basename(_slash(basename))

    if len(basename) + TRIM_ALLOWANCE == max_length:
        return theme.directory(ELLIPSIS + SEPARATOR) + theme.basename(_slash(basename))

    # No room for any directory: keep the tail of the basename
    keep = max_length - len(ELLIPSIS)
    if keep <= 0:
        return theme.basename(ELLIPSIS[:max(0, max_length)])
    return theme.basename(_slash(ELLIPSIS + basename[-keep:]))


# ─────────────────────────────────────────────────────────────────────────────
# Highlighting
# ─────────────────────────────────────────────────────────────────────────────

def _display_offset(raw_path: str, file_path: str, root_dir: str) -> tuple[int, int]:
    """
    Return ``(offset, trim_length)``: characters cut from the front of
    ``raw_path`` to obtain ``file_path``, and the length of the marker that
    replaced them.
    """
    if file_path.startswith(ELLIPSIS):
        return len(raw_path) - len(file_path), len(ELLIPSIS)
    if file_path.startswith(RELATIVE_PATH_HEAD):
        return len(raw_path) - len(file_path), len(RELATIVE_PATH_HEAD)
    root = root_dir.rstrip("/\\")
    if raw_path == root or raw_path.startswith((root + "/", root + "\\")):
        return len(root) + len(SEPARATOR), 0
    # Project-relative candidates and siblings of the base directory
    return len(raw_path) - len(file_path), 0


def split_matches(text: str, matches: Iterable[int]) -> list[Span]:
    """Partition ``text`` into maximal runs of matched / unmatched characters."""
    matched = set(matches)
    return [
        Span("".join(ch for _, ch in run), is_match)
        for is_match, run in groupby(enumerate(text), key=lambda pair: pair[0] in matched)
    ]


def colorize(text: str, start: int, end: int, theme: PathTheme | None = None) -> str:
    theme = theme or DEFAULT_PATH_THEME
    return theme.faded(text[:start]) + theme.matched(text[start:end]) + theme.faded(text[end:])


def highlight_fuzzy(
    raw_path: str,
    file_path: str,
    root_dir: str,
    matches: Iterable[int],
    theme: PathTheme | None = None,
) -> str:
    """
    Style ``file_path`` (output of trim_and_format_path) with fuzzy ``matches``
    computed against ``raw_path``.

    Offsets hidden behind the ``...`` / ``./`` marker or outside the visible
    string are dropped.
    """
    theme = theme or DEFAULT_PATH_THEME
    raw = strip_ansi(raw_path)
    display = strip_ansi(file_path)
    offset, trim_length = _display_offset(raw, display, root_dir)
    visible = [m - offset for m in matches if trim_length <= m - offset < len(display)]
    return "".join(
        theme.matched(span.text) if span.is_match else theme.unmatched(span.text)
        for span in split_matches(display, visible)
    )


def highlight(
    raw_path: str,
    file_path: str,
    pattern: str,
    root_dir: str,
    theme: PathTheme | None = None,
) -> str:
    """
    Highlight the first case-insensitive regex match of ``pattern``.

    Invalid patterns and misses render the whole path faded.
    """
    theme = theme or DEFAULT_PATH_THEME
    try:
        regexp = re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        logger.debug("Pattern %r is not a valid regex: %s", pattern, exc)
        return theme.faded(strip_ansi(file_path))

    raw = strip_ansi(raw_path)
    display = strip_ansi(file_path)
    found = regexp.search(raw)
    if not found:
        return theme.faded(display)

    offset, trim_length = _display_offset(raw, display, root_dir)
    start = found.start() - offset
    end = start + len(found.group(0))
    return colorize(display, max(start, 0), max(end, trim_length), theme)


def format_test_name_by_pattern(
    test_name: str,
    pattern: str,
    width: int,
    theme: PathTheme | None = None,
) -> str:
    """Render ``test_name`` on one line of ``width`` with the match highlighted."""
    theme = theme or DEFAULT_PATH_THEME
    inline = to_single_line(test_name)

    try:
        regexp = re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        logger.debug("Pattern %r is not a valid regex: %s", pattern, exc)
        return theme.faded(inline)

    found = regexp.search(inline)
    if not found:
        return theme.faded(inline)

    start = found.start()
    end = start + len(found.group(0))

    if len(inline) <= width:
        return colorize(inline, start, end, theme)

    sliced = inline[:max(0, width - len(ELLIPSIS))]

    if start < len(sliced):
        if end > len(sliced):
            return colorize(sliced + ELLIPSIS, start, len(sliced) + len(ELLIPSIS), theme)
        return colorize(sliced + ELLIPSIS, start, end, theme)

    return theme.faded(sliced) + theme.matched(ELLIPSIS)


def render_path(
    budget: int,
    root_dir: str,
    absolute_path: str,
    matches: Iterable[int],
    cwd: str | None = None,
    theme: PathTheme | None = None,
) -> str:
    """Trim ``absolute_path`` to ``budget`` columns and highlight ``matches``."""
    config = ProjectConfig(root_dir=root_dir, cwd=cwd)
    file_path = trim_and_format_path(0, config, absolute_path, budget, theme)
    return highlight_fuzzy(absolute_path, file_path, config.base_dir, matches, theme)
