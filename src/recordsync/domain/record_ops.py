"""Single-purpose record operations: batch create, update by id, delete."""

from __future__ import annotations

from dataclasses import fields
from datetime import date
from decimal import Decimal, InvalidOperation
from logging import getLogger
from typing import TYPE_CHECKING
from uuid import UUID

from recordsync.domain.errors import InvalidArgumentError, RecordNotFoundError
from recordsync.domain.reconciliation.resolve import assign_fields

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from recordsync.domain.model import Record
    from recordsync.domain.ports.persistence import RecordStore

log = getLogger(__name__)

# keyed by the annotation text of the record dataclasses
_TEXT_PARSERS: dict[str, Callable[[str], object]] = {
    "str": str,
    "date": date.fromisoformat,
    "Decimal": Decimal,
    "UUID": UUID,
}


def create_records[TRecord: Record](
    store: RecordStore,
    records: Sequence[TRecord],
) -> list[TRecord]:
    """Insert ``records`` in one batch and return them with system keys assigned."""

    if any(record.is_persisted for record in records):
        raise InvalidArgumentError("Records passed for creation must not have a system key")
    created = store.batch_insert(records)
    log.info("Created %s record(s)", len(created))
    return created


def update_record[TRecord: Record](
    store: RecordStore,
    record_type: type[TRecord],
    record_id: UUID,
    **changes: object,
) -> TRecord:
    """Load the record with ``record_id``, assign ``changes`` and write it back."""

    matches = store.find(record_type, id=record_id, limit=1)
    if not matches:
        raise RecordNotFoundError(f"No {record_type.RECORD_TYPE} record with id {record_id}")
    record = matches[0]
    assign_fields(record, changes)
    return store.upsert(record)


def delete_records(store: RecordStore, records: Sequence[Record]) -> None:
    if any(not record.is_persisted for record in records):
        raise InvalidArgumentError("Only stored records can be deleted")
    store.batch_delete(records)
    log.info("Deleted %s record(s)", len(records))


def insert_then_delete(store: RecordStore, records: Sequence[Record]) -> list[UUID]:
    """Insert ``records`` and immediately delete them again.

    Returns the system keys the records held while they existed.
    """

    created = create_records(store, records)
    ids = [record.id for record in created if record.id is not None]
    delete_records(store, created)
    return ids


def parse_field_text(record_type: type[Record], values: Mapping[str, str]) -> dict[str, object]:
    """Convert text assignments to the types declared on ``record_type``.

    An empty string clears an optional field. Names that are not fields of the
    record pass through unchanged for ``assign_fields`` to reject.
    """

    declared = {f.name: str(f.type) for f in fields(record_type)}
    parsed: dict[str, object] = {}
    for name, text in values.items():
        annotation = declared.get(name)
        if annotation is None:
            parsed[name] = text
            continue
        base, _, rest = annotation.partition(" | ")
        optional = rest == "None"
        parser = _TEXT_PARSERS.get(base)
        if parser is None:
            raise InvalidArgumentError(
                f"Field {name} of {record_type.RECORD_TYPE} cannot be set from text"
            )
        if not text.strip():
            if not optional:
                raise InvalidArgumentError(f"Field {name} of {record_type.RECORD_TYPE} is required")
            parsed[name] = None
            continue
        try:
            value = parser(text if base == "str" else text.strip())
            if isinstance(value, Decimal) and not value.is_finite():
                raise ValueError("not a finite number")  # noqa: TRY301
            parsed[name] = value
        except (ValueError, InvalidOperation) as exc:
            raise InvalidArgumentError(
                f"Invalid value {text!r} for {record_type.RECORD_TYPE} field {name} ({base})"
            ) from exc
    return parsed
