"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import AccountResolver, RecordStore
from .unit_of_work import RecordRepositories, RecordUnitOfWork

__all__ = [
    "AccountResolver",
    "RecordRepositories",
    "RecordStore",
    "RecordUnitOfWork",
]
