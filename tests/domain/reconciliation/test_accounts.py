from __future__ import annotations

from recordsync.config import ReconcileConfig
from recordsync.domain.model import Account
from recordsync.domain.reconciliation import ReadThenWriteAccountResolver, upsert_account_by_name
from tests.helpers.records import FakeRecordStore


def test_upsert_creates_account_with_created_marker() -> None:
    store = FakeRecordStore()

    account = upsert_account_by_name("Doe", resolver=ReadThenWriteAccountResolver(store))

    assert account.id is not None
    assert account.name == "Doe"
    assert account.description == "New Account"
    assert store.of_type(Account) == [account]


def test_upsert_twice_keeps_single_account_and_flips_marker() -> None:
    store = FakeRecordStore()
    resolver = ReadThenWriteAccountResolver(store)

    first = upsert_account_by_name("Doe", resolver=resolver)
    second = upsert_account_by_name("Doe", resolver=resolver)

    accounts = store.of_type(Account)
    assert len(accounts) == 1
    assert second.id == first.id
    assert accounts[0].description == "Updated Account"


def test_upsert_updates_existing_account_in_place() -> None:
    existing = Account(name="Acme", description="Original", industry="Retail")
    store = FakeRecordStore([existing])
    existing_id = existing.id

    account = upsert_account_by_name("Acme", resolver=ReadThenWriteAccountResolver(store))

    assert account is existing
    assert account.id == existing_id
    assert account.description == "Updated Account"
    assert account.industry == "Retail"
    assert ("upsert", 1) in store.write_calls


def test_upsert_uses_configured_markers() -> None:
    store = FakeRecordStore()
    resolver = ReadThenWriteAccountResolver(store)
    config = ReconcileConfig(created_marker="fresh", updated_marker="touched")

    created = upsert_account_by_name("Doe", resolver=resolver, config=config)
    assert created.description == "fresh"

    updated = upsert_account_by_name("Doe", resolver=resolver, config=config)
    assert updated.description == "touched"


def test_upsert_does_not_match_other_names() -> None:
    store = FakeRecordStore([Account(name="Smith", description="New Account")])

    upsert_account_by_name("Doe", resolver=ReadThenWriteAccountResolver(store))

    names = sorted(account.name for account in store.of_type(Account))
    assert names == ["Doe", "Smith"]
    smith = next(account for account in store.of_type(Account) if account.name == "Smith")
    assert smith.description == "New Account"
