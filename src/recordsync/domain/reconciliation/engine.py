"""Reconciler facade bundling a record store with its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from recordsync.config.reconcile import ReconcileConfig

from .accounts import upsert_account_by_name
from .contacts import link_contacts_to_accounts
from .opportunities import OpportunitySyncResult, sync_opportunities
from .resolve import ReadThenWriteAccountResolver

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from recordsync.domain.model import Account, Contact
    from recordsync.domain.ports.persistence import AccountResolver, RecordStore


@dataclass(slots=True)
class Reconciler:
    """Run account, contact and opportunity reconciliation against one store.

    Holds no state between calls beyond its collaborators; the caller owns the
    transaction boundary around ``store``.
    """

    store: RecordStore
    resolver: AccountResolver | None = None
    config: ReconcileConfig = field(default_factory=ReconcileConfig)
    today: Callable[[], date] = date.today

    def __post_init__(self) -> None:
        if self.resolver is None:
            self.resolver = ReadThenWriteAccountResolver(self.store)

    @property
    def account_resolver(self) -> AccountResolver:
        if self.resolver is None:
            raise RuntimeError("Reconciler resolver not initialised")
        return self.resolver

    def upsert_account(self, name: str) -> Account:
        return upsert_account_by_name(name, resolver=self.account_resolver, config=self.config)

    def link_contacts(self, contacts: Sequence[Contact]) -> list[Contact]:
        return link_contacts_to_accounts(
            contacts,
            store=self.store,
            resolver=self.account_resolver,
            config=self.config,
        )

    def sync_opportunities(
        self,
        account_name: str,
        opportunity_names: Sequence[str] | None,
    ) -> OpportunitySyncResult:
        return sync_opportunities(
            account_name,
            opportunity_names,
            store=self.store,
            resolver=self.account_resolver,
            config=self.config,
            today=self.today,
        )
