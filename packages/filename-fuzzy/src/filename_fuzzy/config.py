"""
Plugin configuration and application metadata.

Values are resolved in order: explicit overrides, environment variables,
built-in defaults.
"""
from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME: str = "filename-fuzzy"
VERSION: str = "0.1.0"

ENV_PREFIX: str = "FILENAME_FUZZY"
ENV_KEY: str = f"{ENV_PREFIX}_KEY"
ENV_PROMPT: str = f"{ENV_PREFIX}_PROMPT"

DEFAULT_KEY: str = "z"
DEFAULT_PROMPT: str = "filter by a filename fuzzy pattern"

# Rows of typeahead results shown at once
DEFAULT_MAX_VISIBLE: int = 10


class PluginConfig(BaseModel):
    key: str = DEFAULT_KEY
    prompt: str = DEFAULT_PROMPT

    @field_validator("key")
    @classmethod
    def _single_key(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("key must be a single character")
        return value

    @field_validator("prompt")
    @classmethod
    def _non_empty_prompt(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be empty")
        return value


def load_plugin_config(overrides: dict[str, Any] | None = None) -> PluginConfig:
    """Build a PluginConfig from overrides, then env vars, then defaults."""
    values: dict[str, Any] = {}
    env_key = os.environ.get(ENV_KEY)
    if env_key:
        values["key"] = env_key
    env_prompt = os.environ.get(ENV_PROMPT)
    if env_prompt:
        values["prompt"] = env_prompt
    # Empty overrides fall back to env vars and defaults
    values.update({k: v for k, v in (overrides or {}).items() if v})

    try:
        config = PluginConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid plugin configuration: {exc}") from exc
    logger.debug("Loaded plugin config key=%r prompt=%r", config.key, config.prompt)
    return config
