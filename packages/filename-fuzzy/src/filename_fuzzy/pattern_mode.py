"""Shared output helpers for pattern-mode typeahead screens."""
from __future__ import annotations

from .prompt import Prompt
from .style import dim, italic_yellow, selected
from .terminal import CURSOR_RESTORE_POSITION, CURSOR_SAVE_POSITION, ERASE_DOWN, Pipe, cursor_to
from .utils import strip_ansi, visible_width

PROMPT_GLYPH = "›"
PATTERN_LABEL = f" pattern {PROMPT_GLYPH}"


def pluralize(word: str, count: int) -> str:
    return word if count == 1 else f"{word}s"


def print_pattern_caret(pattern: str, pipe: Pipe) -> None:
    pipe.write(ERASE_DOWN)
    pipe.write(f"{dim(PATTERN_LABEL)} {pattern}")
    pipe.write(CURSOR_SAVE_POSITION)


def print_restored_pattern_caret(pattern: str, current_usage_rows: int, pipe: Pipe) -> None:
    input_text = f"{PATTERN_LABEL} {pattern}"
    pipe.write(cursor_to(visible_width(input_text), current_usage_rows - 1))
    pipe.write(CURSOR_RESTORE_POSITION)


def print_pattern_matches(count: int, entity: str, pipe: Pipe, extra_text: str = "") -> None:
    pluralized = pluralize(entity, count)
    if count:
        result = f"\n\n Pattern matches {count} {pluralized}"
    else:
        result = f"\n\n Pattern matches no {pluralized}"
    pipe.write(result + extra_text)


def print_start_typing(entity: str, pipe: Pipe) -> None:
    pipe.write(f"\n\n {italic_yellow(f'Start typing to filter by a {entity} regex pattern.')}")


def print_more(entity: str, pipe: Pipe, more: int) -> None:
    pipe.write(f"\n   {dim(f'...and {more} more {pluralize(entity, more)}')}")


def print_typeahead_item(item: str, pipe: Pipe) -> None:
    pipe.write(f"\n {dim(PROMPT_GLYPH)} {item}")


def format_typeahead_selection(item: str, index: int, active_index: int, prompt: Prompt) -> str:
    """Invert the active row and record its plain text as the prompt selection."""
    if index == active_index:
        plain = strip_ansi(item)
        prompt.set_prompt_selection(plain)
        return selected(plain)
    return item
