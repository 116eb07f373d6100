"""Domain error definitions."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised before any store interaction when required inputs are missing or blank."""


class RecordNotFoundError(LookupError):
    """Raised when a record addressed by its system key does not exist."""
