"""Ports for persisting records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from recordsync.domain.model import Account, Record


@runtime_checkable
class RecordStore(Protocol):
    """Generic record store: lookup by equality criteria plus single and batch writes.

    ``upsert`` inserts when the record's system key is unset and updates otherwise,
    assigning the key on insert. Failures raised by an implementation propagate
    unchanged to the caller.
    """

    def find[TRecord: Record](
        self,
        record_type: type[TRecord],
        *,
        limit: int | None = None,
        **criteria: object,
    ) -> list[TRecord]: ...

    def upsert[TRecord: Record](self, record: TRecord) -> TRecord: ...

    def batch_upsert[TRecord: Record](self, records: Sequence[TRecord]) -> list[TRecord]: ...

    def batch_insert[TRecord: Record](self, records: Sequence[TRecord]) -> list[TRecord]: ...

    def batch_delete(self, records: Sequence[Record]) -> None: ...


@runtime_checkable
class AccountResolver(Protocol):
    """Find-or-create capability for accounts keyed by name.

    ``defaults`` apply only when a new account is created; ``updates`` apply only
    to an existing match, and a match is written back only when ``updates`` is given.
    """

    def find_or_create(
        self,
        name: str,
        *,
        defaults: Mapping[str, object] | None = None,
        updates: Mapping[str, object] | None = None,
    ) -> Account: ...
