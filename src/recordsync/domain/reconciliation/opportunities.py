"""Reconcile a named list of opportunities under one account."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from logging import getLogger
from typing import TYPE_CHECKING

from recordsync.config.reconcile import ReconcileConfig
from recordsync.domain.errors import InvalidArgumentError
from recordsync.domain.model import Opportunity

from .resolve import ReadThenWriteAccountResolver

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from recordsync.domain.model import Account
    from recordsync.domain.ports.persistence import AccountResolver, RecordStore

log = getLogger(__name__)

MISSING_INPUT_MESSAGE = "Account name and opportunity names are required"


@dataclass(slots=True)
class OpportunitySyncResult:
    """Outcome of an opportunity reconciliation."""

    account: Account
    opportunities: list[Opportunity]
    created: list[Opportunity] = field(default_factory=list["Opportunity"])
    matched: list[Opportunity] = field(default_factory=list["Opportunity"])


def sync_opportunities(
    account_name: str,
    opportunity_names: Sequence[str] | None,
    *,
    store: RecordStore,
    resolver: AccountResolver | None = None,
    config: ReconcileConfig | None = None,
    today: Callable[[], date] = date.today,
) -> OpportunitySyncResult:
    """Ensure one account called ``account_name`` with one opportunity per name.

    The account is created when absent and otherwise left untouched. Existing
    opportunities matched by name pass through unmodified; missing ones are created
    with the default stage and a close date offset from ``today``. Matched and new
    opportunities are written together in one batch upsert.
    """

    names = _validated_names(account_name, opportunity_names)
    cfg = config or ReconcileConfig()
    effective_resolver = resolver or ReadThenWriteAccountResolver(store)

    account = effective_resolver.find_or_create(account_name)
    existing_by_name: dict[str, Opportunity] = {}
    for opportunity in store.find(Opportunity, account_id=account.id):
        existing_by_name.setdefault(opportunity.name, opportunity)

    close_date = today() + timedelta(days=cfg.close_date_offset_days)
    created: list[Opportunity] = []
    matched: list[Opportunity] = []
    batch: list[Opportunity] = []
    for name in names:
        existing = existing_by_name.get(name)
        if existing is not None:
            # pass-through: no field synchronisation on match
            matched.append(existing)
            batch.append(existing)
            continue
        opportunity = Opportunity(
            name=name,
            stage_name=cfg.default_stage,
            close_date=close_date,
            account_id=account.id,
        )
        created.append(opportunity)
        batch.append(opportunity)

    stored = store.batch_upsert(batch)
    log.info(
        "Synced opportunities for account %r: created=%s, matched=%s",
        account_name,
        len(created),
        len(matched),
    )
    return OpportunitySyncResult(
        account=account,
        opportunities=stored,
        created=created,
        matched=matched,
    )


def _validated_names(account_name: str, opportunity_names: Sequence[str] | None) -> list[str]:
    if not account_name or not account_name.strip() or not opportunity_names:
        raise InvalidArgumentError(MISSING_INPUT_MESSAGE)
    if isinstance(opportunity_names, str):
        raise InvalidArgumentError("Opportunity names must be a list of names, not a string")
    if any(not name or not name.strip() for name in opportunity_names):
        raise InvalidArgumentError("Opportunity names must not be blank")
    # first occurrence wins
    return list(dict.fromkeys(opportunity_names))
