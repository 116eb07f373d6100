"""Public domain model surface."""

from __future__ import annotations

from recordsync.domain.model.base import Record, new_id
from recordsync.domain.model.enums import RecordType
from recordsync.domain.model.records import (
    RECORD_CLASSES,
    Account,
    Case,
    Contact,
    Lead,
    Opportunity,
    record_class_for,
)

__all__ = [
    "RECORD_CLASSES",
    "Account",
    "Case",
    "Contact",
    "Lead",
    "Opportunity",
    "Record",
    "RecordType",
    "new_id",
    "record_class_for",
]
