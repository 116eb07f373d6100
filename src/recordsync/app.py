"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from recordsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from recordsync.config import get_reconcile_config
from recordsync.domain import record_ops
from recordsync.domain.model import record_class_for
from recordsync.domain.ports.unit_of_work import RecordUnitOfWork
from recordsync.domain.reconciliation import Reconciler

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from uuid import UUID

    from recordsync.config import ReconcileConfig
    from recordsync.domain.model import Account, Contact, Record, RecordType
    from recordsync.domain.reconciliation import OpportunitySyncResult

UnitOfWorkFactory = Callable[[], RecordUnitOfWork]


log = getLogger(__name__)


def _resolve_unit_of_work(unit_of_work_factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if unit_of_work_factory is not None:
        return unit_of_work_factory
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork


def upsert_account(
    name: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: ReconcileConfig | None = None,
) -> Account:
    """Create or update the account called ``name`` and commit."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    with effective_uow() as uow:
        reconciler = Reconciler(
            store=uow.repositories.records,
            config=config or get_reconcile_config(),
        )
        account = reconciler.upsert_account(name)
        uow.commit()

    log.info(
        f"Upserted account {account.name!r}: id={account.id}, "
        f"description={account.description!r}"
    )
    return account


def link_contacts(
    contacts: Sequence[Contact],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: ReconcileConfig | None = None,
) -> list[Contact]:
    """Link ``contacts`` to accounts named by their last names and commit."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    with effective_uow() as uow:
        reconciler = Reconciler(
            store=uow.repositories.records,
            config=config or get_reconcile_config(),
        )
        linked = reconciler.link_contacts(contacts)
        uow.commit()
    return linked


def sync_opportunities(
    account_name: str,
    opportunity_names: Sequence[str],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: ReconcileConfig | None = None,
) -> OpportunitySyncResult:
    """Ensure one opportunity per name under ``account_name`` and commit."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    log.info(
        "Starting opportunity sync: account=%r, names=%s",
        account_name,
        list(opportunity_names),
    )
    with effective_uow() as uow:
        reconciler = Reconciler(
            store=uow.repositories.records,
            config=config or get_reconcile_config(),
        )
        result = reconciler.sync_opportunities(account_name, opportunity_names)
        uow.commit()
    return result


def update_record(
    record_type: RecordType | str,
    record_id: UUID,
    changes: Mapping[str, object],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Record:
    """Assign ``changes`` to the stored record ``record_id`` and commit."""

    record_cls = record_class_for(record_type)
    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    with effective_uow() as uow:
        record = record_ops.update_record(
            uow.repositories.records, record_cls, record_id, **changes
        )
        uow.commit()
    log.info("Updated %s %s: %s", record.record_type, record_id, ", ".join(sorted(changes)))
    return record
