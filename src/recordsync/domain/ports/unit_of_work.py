"""Transaction boundary around the record store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from recordsync.domain.ports.persistence import RecordStore


@dataclass(slots=True)
class RecordRepositories:
    records: RecordStore


@runtime_checkable
class RecordUnitOfWork(Protocol):
    """Context manager owning one transaction.

    Nothing is persisted until ``commit()``; leaving the block with an exception
    rolls back whatever was staged.
    """

    @property
    def repositories(self) -> RecordRepositories: ...

    def __enter__(self) -> RecordUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
