"""Exception hierarchy for filename_fuzzy."""
from __future__ import annotations


class FilenameFuzzyError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(FilenameFuzzyError):
    """Raised when plugin configuration fails validation."""
