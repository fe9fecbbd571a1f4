"""Tests for filename_fuzzy.filename_prompt and the typeahead helpers"""
import io
import re

import pytest

from filename_fuzzy.filename_prompt import ROW_PADDING, FileNameFuzzyPrompt
from filename_fuzzy.pattern_mode import (
    format_typeahead_selection,
    pluralize,
    print_more,
    print_pattern_matches,
    print_start_typing,
)
from filename_fuzzy.prompt import KEY_ARROW_DOWN, KEY_ENTER, Prompt
from filename_fuzzy.style import selected
from filename_fuzzy.types import ProjectConfig, SearchSource
from filename_fuzzy.utils import strip_ansi


class _Columns(io.StringIO):
    columns = 60


def _start(sources, columns=80):
    pipe = io.StringIO()
    prompt = Prompt()
    fuzzy_prompt = FileNameFuzzyPrompt(pipe, prompt, columns=columns)
    fuzzy_prompt.update_search_sources(sources)
    results = {"success": [], "cancel": []}
    fuzzy_prompt.run(results["success"].append, results["cancel"].append)
    return pipe, prompt, results


def _type(prompt, text):
    for ch in text:
        prompt.put(ch)


class TestFileNameFuzzyPrompt:
    def test_start_typing_on_empty_pattern(self, repo_source):
        pipe, _, _ = _start([repo_source])
        assert "Start typing to filter by a filename regex pattern." in strip_ansi(pipe.getvalue())

    def test_lists_matches(self, repo_source):
        pipe, prompt, _ = _start([repo_source])
        _type(prompt, "ba")
        pipe.truncate(0)
        pipe.seek(0)
        prompt.put("z")
        out = strip_ansi(pipe.getvalue())
        assert "Pattern matches 1 file" in out
        assert "src/baz.js" in out
        assert "bar.js" not in out

    def test_no_matches(self, repo_source):
        pipe, prompt, _ = _start([repo_source])
        _type(prompt, "qqq")
        assert "Pattern matches no files" in strip_ansi(pipe.getvalue())

    def test_rows_fit_terminal_width(self):
        source = SearchSource(
            config=ProjectConfig(root_dir="/repo"),
            test_paths=["/repo/some/deeply/nested/directory/structure/target_file.js"],
        )
        pipe, prompt, _ = _start([source], columns=30)
        pipe.truncate(0)
        pipe.seek(0)
        _type(prompt, "target")
        rows = [line for line in strip_ansi(pipe.getvalue()).split("\n") if "target" in line]
        assert rows
        for row in rows:
            path = row.split("› ", 1)[1]
            assert len(path) <= 30 - ROW_PADDING

    def test_more_message(self):
        paths = [f"/repo/src/file{i:02d}.js" for i in range(15)]
        source = SearchSource(config=ProjectConfig(root_dir="/repo"), test_paths=paths)
        pipe, prompt, _ = _start([source])
        _type(prompt, "file")
        out = strip_ansi(pipe.getvalue())
        assert "Pattern matches 15 files" in out
        assert "...and 5 more files" in out

    def test_selecting_row_submits_full_path(self, repo_source):
        _, prompt, results = _start([repo_source])
        _type(prompt, "baz")
        prompt.put(KEY_ARROW_DOWN)
        prompt.put(KEY_ENTER)
        assert results["success"] == [re.escape("/repo/src/baz.js")]

    def test_submit_without_selection_uses_pattern(self, repo_source):
        _, prompt, results = _start([repo_source])
        _type(prompt, "baz")
        prompt.put(KEY_ENTER)
        assert results["success"] == ["baz"]

    def test_width_from_pipe(self, repo_source):
        pipe = _Columns()
        prompt = Prompt()
        fuzzy_prompt = FileNameFuzzyPrompt(pipe, prompt)
        fuzzy_prompt.update_search_sources([repo_source])
        fuzzy_prompt.run(lambda v: None, lambda v: None)
        _type(prompt, "bar")
        assert "src/foo/bar.js" in strip_ansi(pipe.getvalue())

    def test_matches_across_sources(self):
        one = SearchSource(config=ProjectConfig(root_dir="/one"), test_paths=["/one/bar.js"])
        two = SearchSource(config=ProjectConfig(root_dir="/two"), test_paths=["/two/x/bar.js"])
        prompt = FileNameFuzzyPrompt(io.StringIO(), Prompt(), columns=80)
        prompt.update_search_sources([one, two])
        assert [m.path for m in prompt.get_matched_tests("bar")] == ["/one/bar.js", "/two/x/bar.js"]


class TestPatternModeHelpers:
    def test_pluralize(self):
        assert pluralize("file", 1) == "file"
        assert pluralize("file", 0) == "files"
        assert pluralize("file", 2) == "files"

    def test_print_pattern_matches(self):
        pipe = io.StringIO()
        print_pattern_matches(2, "file", pipe, " (extra)")
        assert pipe.getvalue() == "\n\n Pattern matches 2 files (extra)"

    def test_print_start_typing(self):
        pipe = io.StringIO()
        print_start_typing("filename", pipe)
        assert strip_ansi(pipe.getvalue()) == "\n\n Start typing to filter by a filename regex pattern."

    def test_print_more(self):
        pipe = io.StringIO()
        print_more("file", pipe, 1)
        assert strip_ansi(pipe.getvalue()) == "\n   ...and 1 more file"

    def test_format_selection_active_row(self):
        prompt = Prompt()
        out = format_typeahead_selection("\x1b[2msrc/a.js\x1b[22m", 2, 2, prompt)
        assert out == selected("src/a.js")
        assert prompt.selection == "src/a.js"

    def test_format_selection_other_row(self):
        prompt = Prompt()
        assert format_typeahead_selection("src/a.js", 1, 2, prompt) == "src/a.js"
        assert prompt.selection is None
