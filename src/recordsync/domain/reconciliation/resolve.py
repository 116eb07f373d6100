"""Find-or-create resolution of accounts by name.

The read-then-write resolver queries before it writes so that at most one
account exists per name after a call. Two callers racing on the same name can
both observe "not found" and both create; stores offering an atomic
upsert-by-natural-key can provide their own ``AccountResolver`` instead.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from recordsync.domain.errors import InvalidArgumentError
from recordsync.domain.model import Account

if TYPE_CHECKING:
    from collections.abc import Mapping

    from recordsync.domain.model import Record
    from recordsync.domain.ports.persistence import RecordStore

log = getLogger(__name__)

_IDENTITY_FIELDS = frozenset({"id"})
_ACCOUNT_KEY_FIELDS = frozenset({"id", "name"})


def assign_fields(
    record: Record,
    values: Mapping[str, object],
    *,
    protected: frozenset[str] = _IDENTITY_FIELDS,
) -> None:
    """Assign ``values`` onto ``record``, refusing unknown or protected fields."""

    allowed = type(record).field_names() - protected
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise InvalidArgumentError(
            f"Cannot assign {', '.join(unknown)} on {record.record_type} records"
        )
    for key, value in values.items():
        setattr(record, key, value)


class ReadThenWriteAccountResolver:
    """Resolve accounts with a lookup followed by an upsert through the record store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def find_or_create(
        self,
        name: str,
        *,
        defaults: Mapping[str, object] | None = None,
        updates: Mapping[str, object] | None = None,
    ) -> Account:
        matches = self.store.find(Account, name=name, limit=1)
        if matches:
            account = matches[0]
            if updates is None:
                log.debug("Account %r exists (%s), leaving unmodified", name, account.id)
                return account
            log.debug("Account %r exists (%s), updating", name, account.id)
            assign_fields(account, updates, protected=_ACCOUNT_KEY_FIELDS)
        else:
            log.debug("Account %r not found, creating", name)
            account = Account(name=name)
            if defaults:
                assign_fields(account, defaults, protected=_ACCOUNT_KEY_FIELDS)
        return self.store.upsert(account)


if TYPE_CHECKING:
    from typing import cast

    from recordsync.domain.ports.persistence import AccountResolver

    _resolver_check: AccountResolver = ReadThenWriteAccountResolver(
        cast("RecordStore", object())
    )
