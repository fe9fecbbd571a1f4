"""
Watch-mode plugin wiring.

The host calls apply() once with its hooks, forwards key presses to
on_key() while the plugin is active, and calls run() when the user presses
the plugin's key.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Protocol

from .config import PluginConfig, load_plugin_config
from .filename_prompt import FileNameFuzzyPrompt
from .prompt import Prompt
from .terminal import Pipe
from .types import SearchSource

logger = logging.getLogger(__name__)

FileChangeListener = Callable[[Iterable[SearchSource | Mapping[str, Any]]], None]
UpdateConfigAndRun = Callable[[dict[str, Any]], None]


class WatchHooks(Protocol):
    def on_file_change(self, listener: FileChangeListener) -> None:
        ...


class FileNamePlugin:
    def __init__(
        self,
        stdin: object,
        stdout: Pipe,
        config: PluginConfig | Mapping[str, Any] | None = None,
        columns: int | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._prompt = Prompt()
        self._projects: list[SearchSource] = []
        self._columns = columns
        if isinstance(config, PluginConfig):
            self._config = config
        else:
            self._config = load_plugin_config(dict(config or {}))

    @property
    def projects(self) -> list[SearchSource]:
        return self._projects

    def apply(self, hooks: WatchHooks) -> None:
        hooks.on_file_change(self._on_file_change)

    def _on_file_change(self, projects: Iterable[SearchSource | Mapping[str, Any]]) -> None:
        self._projects = [
            project if isinstance(project, SearchSource) else SearchSource.model_validate(project)
            for project in projects
        ]
        logger.debug("Search sources updated: %d project(s)", len(self._projects))

    def on_key(self, key: str) -> None:
        self._prompt.put(key)

    def run(
        self,
        update_config_and_run: UpdateConfigAndRun,
        on_cancel: Callable[[str], None] | None = None,
    ) -> None:
        """
        Open the fuzzy prompt. On Enter the chosen pattern is handed to
        ``update_config_and_run``; on Escape ``on_cancel`` receives the
        abandoned pattern.
        """
        fuzzy_prompt = FileNameFuzzyPrompt(self._stdout, self._prompt, columns=self._columns)
        fuzzy_prompt.update_search_sources(self._projects)

        def on_success(value: str) -> None:
            logger.debug("Filtering by test path pattern %r", value)
            update_config_and_run({"mode": "watch", "test_path_pattern": value})

        def cancelled(value: str) -> None:
            if on_cancel is not None:
                on_cancel(value)

        fuzzy_prompt.run(on_success, cancelled)

    def get_usage_info(self) -> dict[str, str]:
        return {"key": self._config.key, "prompt": self._config.prompt}
