"""Tests for filename_fuzzy.fuzzy"""
import pytest

from filename_fuzzy.fuzzy import match, match_offsets, match_sources, score
from filename_fuzzy.types import MatchResult, ProjectConfig, SearchSource


class TestMatch:
    def test_contiguous_basename_match(self):
        result = match(["src/foo/bar.js", "src/baz.js"], "bar")
        assert result == [MatchResult("src/foo/bar.js", (8, 9, 10))]

    def test_empty_pattern_returns_nothing(self):
        assert match(["src/foo/bar.js"], "") == []

    def test_empty_candidates(self):
        assert match([], "bar") == []

    def test_non_subsequence_excluded(self):
        assert match(["src/baz.js", "lib/qux.py"], "bar") == []

    def test_pattern_longer_than_candidate(self):
        assert match(["a.js"], "abcdef") == []

    def test_case_insensitive(self):
        result = match(["SRC/Foo.JS"], "foo")
        assert result == [MatchResult("SRC/Foo.JS", (4, 5, 6))]

    def test_uppercase_pattern(self):
        result = match(["src/foo.js"], "FOO")
        assert [r.item for r in result] == ["src/foo.js"]

    def test_substring_outranks_scattered(self):
        scattered = "one/bar/apple.js"
        contiguous = "lib/foobar.js"
        assert [r.item for r in match([scattered, contiguous], "oba")] == [contiguous, scattered]
        assert [r.item for r in match([contiguous, scattered], "oba")] == [contiguous, scattered]

    def test_contiguous_occurrence_is_highlighted(self):
        result = match(["b/a/r/xbar.js"], "bar")
        assert result[0].matches == (7, 8, 9)

    def test_equal_scores_keep_input_order(self):
        items = ["a/x.js", "b/x.js", "c/x.js"]
        assert [r.item for r in match(items, "x")] == items
        assert [r.item for r in match(list(reversed(items)), "x")] == list(reversed(items))

    def test_deterministic(self):
        items = ["src/foo/bar.js", "src/foobar.js", "lib/f/o/o.js", "foo.js"]
        assert match(items, "foo") == match(items, "foo")

    def test_offsets_strictly_increasing_and_in_range(self):
        items = [
            "src/components/Button/index.tsx",
            "packages/core/src/utils/string.ts",
            "test/unit/parser_spec.rb",
            "a/b/c/d/e/f.py",
        ]
        for pattern in ("s", "src", "tsx", "cps", "ab", "ut/s", "index"):
            for result in match(items, pattern):
                offsets = result.matches
                assert len(offsets) == len(pattern)
                assert all(0 <= i < len(result.item) for i in offsets)
                assert all(a < b for a, b in zip(offsets, offsets[1:]))

    def test_matched_characters_equal_pattern(self):
        for result in match(["Src/Components/Button.tsx"], "cbt"):
            chars = "".join(result.item[i] for i in result.matches)
            assert chars.lower() == "cbt"

    def test_max_results(self):
        items = [f"dir/file{i}.js" for i in range(20)]
        assert len(match(items, "file", max_results=5)) == 5

    def test_max_results_zero(self):
        assert match(["file.js"], "file", max_results=0) == []

    def test_accepts_generator(self):
        result = match((p for p in ["a.js", "b.js"]), "b")
        assert [r.item for r in result] == ["b.js"]


class TestMatchOffsets:
    def test_prefers_segment_start(self):
        assert match_offsets("src/abc/b.js", "b") == [8]

    def test_prefers_contiguous_run(self):
        assert match_offsets("xaxbab", "ab") == [4, 5]

    def test_separator_in_pattern(self):
        assert match_offsets("src/foo/bar.js", "foo/b") == [4, 5, 6, 7, 8]

    def test_no_match_is_empty(self):
        assert match_offsets("src/baz.js", "bar") == []

    def test_empty_pattern_is_empty(self):
        assert match_offsets("src/baz.js", "") == []


class TestScore:
    def test_none_when_not_matching(self):
        assert score("src/baz.js", "bar") is None

    def test_boundary_beats_mid_word(self):
        assert score("lib/cache.py", "c") > score("lib/abc.py", "c")

    def test_contiguous_beats_spread(self):
        assert score("ab_cd", "ab") > score("a___b", "ab")

    def test_basename_beats_directory(self):
        assert score("bar/x.js", "bar") < score("x/bar.js", "bar")


class TestMatchSources:
    def test_concatenates_in_source_order(self):
        first = SearchSource(config=ProjectConfig(root_dir="/one"), test_paths=["/one/zzz_bar.js"])
        second = SearchSource(config=ProjectConfig(root_dir="/two"), test_paths=["/two/bar.js"])
        result = match_sources([first, second], "bar")
        assert [m.path for m in result] == ["/one/zzz_bar.js", "/two/bar.js"]
        assert result[0].config.root_dir == "/one"
        assert result[1].config.root_dir == "/two"

    def test_carries_offsets(self, repo_source):
        result = match_sources([repo_source], "baz")
        assert len(result) == 1
        assert result[0].path == "/repo/src/baz.js"
        assert result[0].matches == (10, 11, 12)

    def test_empty_pattern(self, repo_source):
        assert match_sources([repo_source], "") == []

    def test_no_sources(self):
        assert match_sources([], "bar") == []
