"""Configuration errors."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """An environment variable holds a value recordsync cannot use."""
