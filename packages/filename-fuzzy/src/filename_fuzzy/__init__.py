"""
filename_fuzzy: fuzzy filename typeahead for test-watch hosts.

Ranks project file paths against a fuzzy pattern and renders them, truncated
and highlighted, for a fixed-width terminal.
"""
from .config import APP_NAME, VERSION, PluginConfig, load_plugin_config
from .errors import ConfigError, FilenameFuzzyError
from .filename_prompt import FileNameFuzzyPrompt
from .fuzzy import match, match_offsets, match_sources, score
from .pattern_mode import (
    format_typeahead_selection,
    pluralize,
    print_more,
    print_pattern_caret,
    print_pattern_matches,
    print_restored_pattern_caret,
    print_start_typing,
    print_typeahead_item,
)
from .plugin import FileNamePlugin
from .prompt import PatternPrompt, Prompt
from .render import (
    colorize,
    format_test_name_by_pattern,
    highlight,
    highlight_fuzzy,
    render_path,
    split_matches,
    trim_and_format_path,
)
from .scroll import scroll
from .style import DEFAULT_PATH_THEME, PLAIN_PATH_THEME, PathTheme
from .terminal import get_terminal_width
from .types import MatchResult, ProjectConfig, ScrollOptions, ScrollWindow, SearchSource, SourcedMatch
from .utils import strip_ansi, visible_width

__version__ = VERSION

__all__ = [
    # config
    "APP_NAME",
    "VERSION",
    "PluginConfig",
    "load_plugin_config",
    # errors
    "ConfigError",
    "FilenameFuzzyError",
    # matcher
    "match",
    "match_offsets",
    "match_sources",
    "score",
    # renderer
    "colorize",
    "format_test_name_by_pattern",
    "highlight",
    "highlight_fuzzy",
    "render_path",
    "split_matches",
    "trim_and_format_path",
    # theme
    "DEFAULT_PATH_THEME",
    "PLAIN_PATH_THEME",
    "PathTheme",
    # prompt
    "FileNameFuzzyPrompt",
    "PatternPrompt",
    "Prompt",
    "format_typeahead_selection",
    "pluralize",
    "print_more",
    "print_pattern_caret",
    "print_pattern_matches",
    "print_restored_pattern_caret",
    "print_start_typing",
    "print_typeahead_item",
    "scroll",
    # plugin
    "FileNamePlugin",
    # terminal
    "get_terminal_width",
    "strip_ansi",
    "visible_width",
    # types
    "MatchResult",
    "ProjectConfig",
    "ScrollOptions",
    "ScrollWindow",
    "SearchSource",
    "SourcedMatch",
]
