"""Upsert of a single account by name."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from recordsync.config.reconcile import ReconcileConfig

if TYPE_CHECKING:
    from recordsync.domain.model import Account
    from recordsync.domain.ports.persistence import AccountResolver

log = getLogger(__name__)


def upsert_account_by_name(
    name: str,
    *,
    resolver: AccountResolver,
    config: ReconcileConfig | None = None,
) -> Account:
    """Return the single account called ``name``, creating or updating it.

    A new account gets the "created" marker as its description; an existing one
    is overwritten with the "updated" marker and written back. Calling this twice
    for the same name leaves one account whose description flips between markers.
    """

    cfg = config or ReconcileConfig()
    account = resolver.find_or_create(
        name,
        defaults={"description": cfg.created_marker},
        updates={"description": cfg.updated_marker},
    )
    log.debug("Upserted account %r as %s (%s)", name, account.id, account.description)
    return account
