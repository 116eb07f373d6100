"""SQLAlchemy adapter package for recordsync."""

from __future__ import annotations

from .mappings import (
    TABLE_BY_RECORD_TYPE,
    mapper_registry,
    start_mappers,
)
from .repositories import SqlAlchemyRecordStore

__all__ = [
    "TABLE_BY_RECORD_TYPE",
    "SqlAlchemyRecordStore",
    "mapper_registry",
    "start_mappers",
]
