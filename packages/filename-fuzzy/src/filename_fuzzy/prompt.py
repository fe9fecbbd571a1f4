"""
Pattern input loop.

Provides:
- Prompt: owns the typed pattern and the selection offset, emits change events
- PatternPrompt: draws the pattern-mode screen and hands every change to an
  injected render callback
"""
from __future__ import annotations

import logging
from typing import Callable

from .config import DEFAULT_MAX_VISIBLE
from .style import bold, dim
from .terminal import CLEAR_SCREEN, CURSOR_HIDE, CURSOR_LEFT, CURSOR_SHOW, ERASE_LINE, Pipe
from .types import ScrollOptions

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Key sequences
# ─────────────────────────────────────────────────────────────────────────────

KEY_ENTER = "\r"
KEY_ESCAPE = "\x1b"
KEY_ARROW_UP = "\x1b[A"
KEY_ARROW_DOWN = "\x1b[B"
KEY_ARROW_RIGHT = "\x1b[C"
KEY_ARROW_LEFT = "\x1b[D"
BACKSPACE_KEYS = ("\x7f", "\x08")

OnChange = Callable[[str, ScrollOptions], None]
OnSuccess = Callable[[str], None]
OnCancel = Callable[[str], None]
RenderCallback = Callable[[str, ScrollOptions], None]


def _noop(_: str) -> None:
    return None


class Prompt:
    """
    Single-line pattern buffer with an optional selected result.

    Up/Down move the selection between -1 (none) and ``prompt_length - 1``;
    any edit clears it.
    """

    def __init__(self, max_visible: int = DEFAULT_MAX_VISIBLE) -> None:
        self._entering = False
        self._value = ""
        self._offset = -1
        self._prompt_length = 0
        self._selection: str | None = None
        self._max_visible = max_visible
        self._on_change: OnChange | None = None
        self._on_success: OnSuccess = _noop
        self._on_cancel: OnCancel = _noop

    @property
    def value(self) -> str:
        return self._value

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def selection(self) -> str | None:
        return self._selection

    def enter(self, on_change: OnChange, on_success: OnSuccess, on_cancel: OnCancel) -> None:
        self._entering = True
        self._value = ""
        self._on_change = on_change
        self._on_success = on_success
        self._on_cancel = on_cancel
        self._selection = None
        self._offset = -1
        self._prompt_length = 0
        self._emit_change()

    def set_prompt_length(self, length: int) -> None:
        self._prompt_length = length

    def set_prompt_selection(self, selected: str) -> None:
        self._selection = selected

    def put(self, key: str) -> None:
        if key == KEY_ENTER:
            self._entering = False
            self._on_success(self._selection or self._value)
            self.abort()
        elif key == KEY_ESCAPE:
            self._entering = False
            self._on_cancel(self._value)
            self.abort()
        elif key == KEY_ARROW_DOWN:
            self._offset = min(self._offset + 1, self._prompt_length - 1)
            self._emit_change()
        elif key == KEY_ARROW_UP:
            self._offset = max(self._offset - 1, -1)
            self._emit_change()
        elif key in (KEY_ARROW_LEFT, KEY_ARROW_RIGHT):
            pass
        else:
            if key in BACKSPACE_KEYS:
                self._value = self._value[:-1]
            else:
                self._value += key
            self._offset = -1
            self._selection = None
            self._emit_change()

    def abort(self) -> None:
        self._entering = False
        self._value = ""

    def is_entering(self) -> bool:
        return self._entering

    def _emit_change(self) -> None:
        if self._on_change is not None:
            self._on_change(self._value, ScrollOptions(offset=self._offset, max=self._max_visible))


# ─────────────────────────────────────────────────────────────────────────────
# Pattern mode screen
# ─────────────────────────────────────────────────────────────────────────────

def usage(entity: str) -> str:
    return (
        f"\n{bold('Pattern Mode Usage')}\n"
        f" {dim('› Press')} Esc {dim('to exit pattern mode.')}\n"
        f" {dim('› Press')} Enter {dim(f'to filter by a {entity} regex pattern.')}\n"
        "\n"
    )


USAGE_ROWS = len(usage("").split("\n"))


class PatternPrompt:
    """
    Generic pattern-mode screen.

    Writes the usage header, clears the input line on every change and then
    calls ``on_render(pattern, options)`` so the owner can print its own
    typeahead below the caret.
    """

    def __init__(
        self,
        pipe: Pipe,
        prompt: Prompt,
        entity_name: str,
        on_render: RenderCallback | None = None,
    ) -> None:
        self._pipe = pipe
        self._prompt = prompt
        self._entity_name = entity_name
        self._on_render = on_render
        self._current_usage_rows = USAGE_ROWS

    @property
    def pipe(self) -> Pipe:
        return self._pipe

    @property
    def prompt(self) -> Prompt:
        return self._prompt

    @property
    def current_usage_rows(self) -> int:
        return self._current_usage_rows

    def run(self, on_success: OnSuccess, on_cancel: OnCancel, header: str | None = None) -> None:
        self._pipe.write(CURSOR_HIDE)
        self._pipe.write(CLEAR_SCREEN)

        if header:
            self._pipe.write(header + "\n")
            self._current_usage_rows = USAGE_ROWS + len(header.split("\n"))
        else:
            self._current_usage_rows = USAGE_ROWS

        self._pipe.write(usage(self._entity_name))
        self._pipe.write(CURSOR_SHOW)
        logger.debug("Entering %s pattern mode", self._entity_name)
        self._prompt.enter(self._on_change, on_success, on_cancel)

    def _on_change(self, pattern: str, options: ScrollOptions) -> None:
        self._pipe.write(ERASE_LINE)
        self._pipe.write(CURSOR_LEFT)
        if self._on_render is not None:
            self._on_render(pattern, options)
