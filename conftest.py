"""
Root conftest.py: shared fixtures and custom markers.

Markers:
  @pytest.mark.cli   drives the typer app end to end
"""
from __future__ import annotations

import pytest

from filename_fuzzy.style import PathTheme, plain
from filename_fuzzy.types import ProjectConfig, SearchSource


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "cli: mark test as invoking the command-line app",
    )


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------

@pytest.fixture
def marked_theme() -> PathTheme:
    """Theme that brackets matched runs and leaves everything else plain."""
    return PathTheme(
        directory=plain,
        basename=plain,
        matched=lambda s: f"[{s}]",
        unmatched=plain,
        faded=plain,
    )


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

@pytest.fixture
def repo_config() -> ProjectConfig:
    return ProjectConfig(root_dir="/repo")


@pytest.fixture
def repo_source(repo_config: ProjectConfig) -> SearchSource:
    return SearchSource(
        config=repo_config,
        test_paths=[
            "/repo/src/foo/bar.js",
            "/repo/src/baz.js",
            "/repo/lib/bar_test.js",
        ],
    )
