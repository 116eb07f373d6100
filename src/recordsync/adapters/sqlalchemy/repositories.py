"""Record store backed by a SQLAlchemy session."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import inspect, select

from recordsync.domain.errors import RecordNotFoundError
from recordsync.domain.model import Record, new_id

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import InstanceState, Session


class SqlAlchemyRecordStore:
    """Stage records on the session and flush after every call.

    Flushing makes writes visible to later lookups in the same transaction;
    committing stays with the unit of work.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find[TRecord: Record](
        self,
        record_type: type[TRecord],
        *,
        limit: int | None = None,
        **criteria: object,
    ) -> list[TRecord]:
        stmt = select(record_type).filter_by(**criteria)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt).all())

    def upsert[TRecord: Record](self, record: TRecord) -> TRecord:
        stored = self._stage(record)
        self.session.flush()
        return stored

    def batch_upsert[TRecord: Record](self, records: Sequence[TRecord]) -> list[TRecord]:
        stored = [self._stage(record) for record in records]
        self.session.flush()
        return stored

    def batch_insert[TRecord: Record](self, records: Sequence[TRecord]) -> list[TRecord]:
        for record in records:
            if record.id is None:
                record.assign_id(new_id())
        self.session.add_all(records)
        self.session.flush()
        return list(records)

    def batch_delete(self, records: Sequence[Record]) -> None:
        for record in records:
            existing = self.session.get(type(record), record.id)
            if existing is None:
                raise RecordNotFoundError(f"No {record.record_type} record with id {record.id}")
            self.session.delete(existing)
        self.session.flush()

    def _stage[TRecord: Record](self, record: TRecord) -> TRecord:
        if record.id is None:
            record.assign_id(new_id())
            self.session.add(record)
            return record
        state = cast("InstanceState[TRecord]", inspect(record))
        if state.transient or state.detached:
            return self.session.merge(record)
        self.session.add(record)
        return record


if TYPE_CHECKING:
    from recordsync.domain.ports.persistence import RecordStore

    _session_stub = cast("Session", object())
    _store_check: RecordStore = SqlAlchemyRecordStore(_session_stub)
