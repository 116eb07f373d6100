"""The five CRM record schemas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from recordsync.domain.model.base import Record
from recordsync.domain.model.enums import RecordType

if TYPE_CHECKING:
    from datetime import date
    from decimal import Decimal
    from uuid import UUID


@dataclass(eq=False, kw_only=True)
class Account(Record):
    """Parent record; ``name`` is the natural key."""

    RECORD_TYPE: ClassVar[RecordType] = RecordType.ACCOUNT

    name: str
    description: str | None = None
    industry: str | None = None


@dataclass(eq=False, kw_only=True)
class Contact(Record):
    """Child record linked to an account.

    ``last_name`` doubles as the name of the account the contact belongs to
    when contacts are reconciled against accounts.
    """

    RECORD_TYPE: ClassVar[RecordType] = RecordType.CONTACT

    last_name: str
    first_name: str | None = None
    email: str | None = None
    account_id: UUID | None = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@dataclass(eq=False, kw_only=True)
class Opportunity(Record):
    RECORD_TYPE: ClassVar[RecordType] = RecordType.OPPORTUNITY

    name: str
    stage_name: str
    close_date: date
    amount: Decimal | None = None
    account_id: UUID | None = None


@dataclass(eq=False, kw_only=True)
class Lead(Record):
    RECORD_TYPE: ClassVar[RecordType] = RecordType.LEAD

    last_name: str
    company: str
    first_name: str | None = None
    status: str = "Open - Not Contacted"


@dataclass(eq=False, kw_only=True)
class Case(Record):
    RECORD_TYPE: ClassVar[RecordType] = RecordType.CASE

    subject: str
    status: str = "New"
    origin: str | None = None
    account_id: UUID | None = None


RECORD_CLASSES: dict[RecordType, type[Record]] = {
    RecordType.ACCOUNT: Account,
    RecordType.CONTACT: Contact,
    RecordType.OPPORTUNITY: Opportunity,
    RecordType.LEAD: Lead,
    RecordType.CASE: Case,
}


def record_class_for(record_type: RecordType | str) -> type[Record]:
    return RECORD_CLASSES[RecordType(record_type)]
