"""
Fuzzy filename typeahead.

Decorates a PatternPrompt with a render callback that matches the typed
pattern against every search source and prints the ranked, highlighted
paths that fit in the scroll window.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable

from . import fuzzy
from .pattern_mode import (
    PROMPT_GLYPH,
    format_typeahead_selection,
    print_more,
    print_pattern_caret,
    print_pattern_matches,
    print_restored_pattern_caret,
    print_start_typing,
    print_typeahead_item,
)
from .prompt import OnCancel, OnSuccess, PatternPrompt, Prompt
from .render import highlight_fuzzy, trim_and_format_path
from .scroll import scroll
from .style import dim
from .terminal import Pipe, get_terminal_width
from .types import ScrollOptions, SearchSource, SourcedMatch
from .utils import visible_width

logger = logging.getLogger(__name__)

ENTITY_NAME = "filenames_fuzzy"

ROW_PREFIX = f"  {dim(PROMPT_GLYPH)} "
ROW_PADDING = visible_width(ROW_PREFIX) + 2


class FileNameFuzzyPrompt:
    """
    Pattern prompt that filters project files by a fuzzy filename pattern.

    ``columns`` pins the terminal width; when omitted it is looked up from
    ``pipe`` on every render.
    """

    def __init__(self, pipe: Pipe, prompt: Prompt, columns: int | None = None) -> None:
        self._pattern_prompt = PatternPrompt(pipe, prompt, ENTITY_NAME, on_render=self.print_typeahead)
        self._search_sources: list[SearchSource] = []
        self._columns = columns

    def update_search_sources(self, search_sources: Iterable[SearchSource]) -> None:
        self._search_sources = list(search_sources)

    def run(self, on_success: OnSuccess, on_cancel: OnCancel, header: str | None = None) -> None:
        self._pattern_prompt.run(on_success, on_cancel, header)

    def get_matched_tests(self, pattern: str) -> list[SourcedMatch]:
        return fuzzy.match_sources(self._search_sources, pattern)

    def print_typeahead(self, pattern: str, options: ScrollOptions) -> None:
        pipe = self._pattern_prompt.pipe
        prompt = self._pattern_prompt.prompt

        print_pattern_caret(pattern, pipe)

        if pattern:
            matched = self.get_matched_tests(pattern)
            total = len(matched)
            print_pattern_matches(total, "file", pipe)

            width = self._columns if self._columns is not None else get_terminal_width(pipe)
            window = scroll(total, options)
            prompt.set_prompt_length(total)

            for i, item in enumerate(matched[window.start:window.end]):
                file_path = trim_and_format_path(ROW_PADDING, item.config, item.path, width)
                row = highlight_fuzzy(item.path, file_path, item.config.base_dir, item.matches)
                row = format_typeahead_selection(row, i, window.index, prompt)
                if i == window.index:
                    # Select the whole path, not its truncated rendering
                    prompt.set_prompt_selection(re.escape(item.path))
                print_typeahead_item(row, pipe)

            if total > window.end:
                print_more("file", pipe, total - window.end)
            logger.debug("Rendered rows %d-%d of %d for %r", window.start, window.end, total, pattern)
        else:
            print_start_typing("filename", pipe)

        print_restored_pattern_caret(pattern, self._pattern_prompt.current_usage_rows, pipe)
