"""
Fuzzy path matching.

A candidate matches when every pattern character appears in it, in order,
case-insensitively. Among all such alignments the best-scoring one is kept;
its character offsets drive highlighting, so the search is exhaustive
(dynamic programming) and tie-breaking is fixed.

Higher score = better match. Scores reward:
- matches at the start of the string or right after a path separator
- matches after ``_``, ``-``, ``.`` or a space, and on camelCase humps
- contiguous runs
- matches inside the basename
and penalise gaps between matched characters. Candidates containing the
pattern as a contiguous substring get a bonus that outranks any scattered
match.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .types import MatchResult, SearchSource, SourcedMatch

logger = logging.getLogger(__name__)

PATH_SEPARATORS = "/\\"
WORD_SEPARATORS = "_-. "

SCORE_MATCH = 16
BONUS_SEGMENT_START = 24
BONUS_WORD_START = 16
BONUS_CAMEL_CASE = 12
BONUS_CONSECUTIVE = 12
BONUS_BASENAME = 6
PENALTY_GAP_START = 6
PENALTY_GAP_EXTENSION = 1

# Upper bound of what a single matched character can contribute
_MAX_CHAR_SCORE = SCORE_MATCH + BONUS_SEGMENT_START + BONUS_CONSECUTIVE + BONUS_BASENAME

_UNREACHABLE = -(1 << 30)


def _basename_start(text: str) -> int:
    return max(text.rfind(sep) for sep in PATH_SEPARATORS) + 1


def _position_bonus(text: str, j: int, basename_start: int) -> int:
    if j == 0:
        bonus = BONUS_SEGMENT_START
    else:
        prev = text[j - 1]
        if prev in PATH_SEPARATORS:
            bonus = BONUS_SEGMENT_START
        elif prev in WORD_SEPARATORS:
            bonus = BONUS_WORD_START
        elif prev.islower() and text[j].isupper():
            bonus = BONUS_CAMEL_CASE
        else:
            bonus = 0
    if j >= basename_start:
        bonus += BONUS_BASENAME
    return bonus


def _is_subsequence(needle: Sequence[str], haystack: Sequence[str]) -> bool:
    it = iter(haystack)
    return all(ch in it for ch in needle)


def _align(candidate: str, pattern: str) -> tuple[int, list[int]] | None:
    """
    Best alignment of ``pattern`` inside ``candidate``.

    Returns ``(score, offsets)`` or None when the pattern is not a
    case-insensitive subsequence of the candidate.

    Row ``i`` of the table holds, for every position ``j``, the best score of
    matching ``pattern[:i + 1]`` with ``pattern[i]`` landing exactly on
    ``candidate[j]``. Gaps use an affine penalty tracked with a running max.
    """
    # Lower per character so indices stay aligned with the raw string
    text_chars = [ch.lower() for ch in candidate]
    pattern_chars = [ch.lower() for ch in pattern]
    if not pattern_chars or not _is_subsequence(pattern_chars, text_chars):
        return None

    n = len(text_chars)
    basename_start = _basename_start(candidate)
    bonuses = [_position_bonus(candidate, j, basename_start) for j in range(n)]

    links: list[list[int]] = []
    prev_row: list[int] = []
    for i, needle in enumerate(pattern_chars):
        row = [_UNREACHABLE] * n
        row_links = [-1] * n
        gap_score = _UNREACHABLE
        gap_index = -1
        for j in range(n):
            if i > 0 and j >= 2:
                # Fold prev_row[j - 2] into the best non-adjacent predecessor
                if gap_score > _UNREACHABLE:
                    gap_score -= PENALTY_GAP_EXTENSION
                k = j - 2
                if prev_row[k] > _UNREACHABLE and prev_row[k] >= gap_score:
                    gap_score = prev_row[k]
                    gap_index = k
            if text_chars[j] != needle:
                continue
            base = SCORE_MATCH + bonuses[j]
            if i == 0:
                row[j] = base
                continue
            best = _UNREACHABLE
            link = -1
            if j >= 1 and prev_row[j - 1] > _UNREACHABLE:
                best = prev_row[j - 1] + BONUS_CONSECUTIVE
                link = j - 1
            if gap_score > _UNREACHABLE and gap_score - PENALTY_GAP_START > best:
                best = gap_score - PENALTY_GAP_START
                link = gap_index
            if best > _UNREACHABLE:
                row[j] = base + best
                row_links[j] = link
        links.append(row_links)
        prev_row = row

    end = -1
    total = _UNREACHABLE
    for j, value in enumerate(prev_row):
        if value > total:
            total = value
            end = j
    if end < 0:
        return None

    offsets: list[int] = []
    j = end
    for row_links in reversed(links):
        offsets.append(j)
        j = row_links[j]
    offsets.reverse()

    contiguous = _best_occurrence(text_chars, pattern_chars, bonuses)
    if contiguous is not None:
        # Any whole-pattern occurrence outranks the scattered alignment
        total, start = contiguous
        total += _MAX_CHAR_SCORE * len(pattern_chars)
        offsets = list(range(start, start + len(pattern_chars)))
    return total, offsets


def _best_occurrence(
    text_chars: Sequence[str],
    pattern_chars: Sequence[str],
    bonuses: Sequence[int],
) -> tuple[int, int] | None:
    """``(score, start)`` of the best contiguous occurrence of the pattern, or None."""
    m = len(pattern_chars)
    run_score = SCORE_MATCH * m + BONUS_CONSECUTIVE * (m - 1)
    best: tuple[int, int] | None = None
    for start in range(len(text_chars) - m + 1):
        if text_chars[start:start + m] != pattern_chars:
            continue
        total = run_score + sum(bonuses[start:start + m])
        if best is None or total > best[0]:
            best = (total, start)
    return best


def score(candidate: str, pattern: str) -> int | None:
    """Score of the best alignment, or None if ``pattern`` does not match."""
    aligned = _align(candidate, pattern)
    return aligned[0] if aligned else None


def match_offsets(candidate: str, pattern: str) -> list[int]:
    """Ascending offsets into ``candidate`` of the best alignment."""
    aligned = _align(candidate, pattern)
    return aligned[1] if aligned else []


def match(
    candidates: Iterable[str],
    pattern: str,
    max_results: int | None = None,
) -> list[MatchResult]:
    """
    Filter ``candidates`` by ``pattern`` and order them best-first.

    An empty pattern yields no results. Equal scores keep input order.
    """
    if not pattern:
        return []

    scored: list[tuple[int, MatchResult]] = []
    total = 0
    for item in candidates:
        total += 1
        aligned = _align(item, pattern)
        if aligned is None:
            continue
        scored.append((aligned[0], MatchResult(item, tuple(aligned[1]))))

    scored.sort(key=lambda entry: entry[0], reverse=True)
    results = [entry[1] for entry in scored]
    if max_results is not None:
        results = results[:max(0, max_results)]
    logger.debug("Pattern %r matched %d of %d candidates", pattern, len(results), total)
    return results


def match_sources(sources: Iterable[SearchSource], pattern: str) -> list[SourcedMatch]:
    """Match every source in turn and concatenate the results in source order."""
    matched: list[SourcedMatch] = []
    for source in sources:
        for result in match(source.test_paths, pattern):
            matched.append(SourcedMatch(result.item, result.matches, source.config))
    return matched
