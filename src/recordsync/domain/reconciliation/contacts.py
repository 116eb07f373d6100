"""Link contacts to the accounts named by their last names."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from recordsync.config.reconcile import ReconcileConfig
from recordsync.domain.errors import InvalidArgumentError

from .accounts import upsert_account_by_name
from .resolve import ReadThenWriteAccountResolver

if TYPE_CHECKING:
    from collections.abc import Sequence

    from recordsync.domain.model import Account, Contact
    from recordsync.domain.ports.persistence import AccountResolver, RecordStore

log = getLogger(__name__)


def link_contacts_to_accounts(
    contacts: Sequence[Contact],
    *,
    store: RecordStore,
    resolver: AccountResolver | None = None,
    config: ReconcileConfig | None = None,
) -> list[Contact]:
    """Point every contact at the account named by its ``last_name``.

    Accounts are upserted by name one contact at a time, in input order, then all
    contacts are written in a single batch upsert. With
    ``memoize_account_lookups`` enabled, each distinct name is upserted once per call.
    """

    cfg = config or ReconcileConfig()
    effective_resolver = resolver or ReadThenWriteAccountResolver(store)
    _require_last_names(contacts)
    if not contacts:
        log.debug("No contacts to link")
        return []

    accounts_by_name: dict[str, Account] | None = {} if cfg.memoize_account_lookups else None
    batch: list[Contact] = []
    for contact in contacts:
        account_name = contact.last_name
        account = accounts_by_name.get(account_name) if accounts_by_name is not None else None
        if account is None:
            account = upsert_account_by_name(account_name, resolver=effective_resolver, config=cfg)
            if accounts_by_name is not None:
                accounts_by_name[account_name] = account
        contact.account_id = account.id
        batch.append(contact)

    stored = store.batch_upsert(batch)
    log.info("Linked %s contact(s) to accounts", len(stored))
    return stored


def _require_last_names(contacts: Sequence[Contact]) -> None:
    for index, contact in enumerate(contacts):
        if not contact.last_name or not contact.last_name.strip():
            raise InvalidArgumentError(f"Contact at position {index} has no last name")
