"""
Core type definitions shared by the matcher, renderer and prompt.
"""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

# ─── Project / search sources ────────────────────────────────────────────────


class ProjectConfig(BaseModel):
    """Per-project directories used to relativize candidate paths."""
    root_dir: str
    cwd: str | None = None

    @property
    def base_dir(self) -> str:
        return self.cwd or self.root_dir


class SearchSource(BaseModel):
    """One project's searchable file list, refreshed on file-system changes."""
    config: ProjectConfig
    test_paths: list[str] = Field(default_factory=list)


# ─── Match results ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MatchResult:
    item: str
    matches: tuple[int, ...]


@dataclass(frozen=True)
class SourcedMatch:
    """A match tagged with the project it was found in."""
    path: str
    matches: tuple[int, ...]
    config: ProjectConfig


# ─── Scrolling ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScrollOptions:
    offset: int = -1   # selected row; -1 means nothing selected
    max: int = 10      # rows visible at once


@dataclass(frozen=True)
class ScrollWindow:
    start: int
    end: int
    index: int
