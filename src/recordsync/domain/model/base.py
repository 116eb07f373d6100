"""
Base building block:
store-assigned identity and the record type contract.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, ClassVar
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from recordsync.domain.model.enums import RecordType


def new_id() -> UUID:
    return uuid4()


@dataclass(eq=False, kw_only=True)
class Record:
    """A stored record. The system key stays ``None`` until a store assigns it."""

    id: UUID | None = None

    # class-level discriminator; subclasses must override
    RECORD_TYPE: ClassVar[RecordType]

    @property
    def record_type(self) -> RecordType:
        return self.RECORD_TYPE

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    def assign_id(self, value: UUID) -> None:
        """Set the system key once. Reassigning a different key is an error."""
        if self.id is not None and self.id != value:
            raise ValueError(f"{self.RECORD_TYPE} already has system key {self.id}")
        self.id = value
