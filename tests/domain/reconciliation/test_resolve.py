from __future__ import annotations

import pytest

from recordsync.domain.errors import InvalidArgumentError
from recordsync.domain.model import Account, Contact
from recordsync.domain.ports.persistence import AccountResolver
from recordsync.domain.reconciliation import ReadThenWriteAccountResolver, assign_fields
from tests.helpers.records import FakeRecordStore


def test_resolver_satisfies_protocol() -> None:
    assert isinstance(ReadThenWriteAccountResolver(FakeRecordStore()), AccountResolver)


def test_find_or_create_without_updates_leaves_match_unwritten() -> None:
    existing = Account(name="Acme", description="Keep me")
    store = FakeRecordStore([existing])
    store.calls.clear()

    account = ReadThenWriteAccountResolver(store).find_or_create("Acme")

    assert account is existing
    assert account.description == "Keep me"
    assert store.write_calls == []
    assert store.find_calls == 1


def test_find_or_create_creates_with_defaults() -> None:
    store = FakeRecordStore()

    account = ReadThenWriteAccountResolver(store).find_or_create(
        "Acme",
        defaults={"industry": "Manufacturing"},
        updates={"industry": "ignored on create"},
    )

    assert account.id is not None
    assert account.industry == "Manufacturing"
    assert store.write_calls == [("upsert", 1)]


def test_find_or_create_rejects_unknown_fields_before_writing() -> None:
    store = FakeRecordStore()

    with pytest.raises(InvalidArgumentError):
        ReadThenWriteAccountResolver(store).find_or_create("Acme", defaults={"colour": "red"})

    assert store.write_calls == []


def test_find_or_create_refuses_to_rename_match() -> None:
    store = FakeRecordStore([Account(name="Acme")])

    with pytest.raises(InvalidArgumentError):
        ReadThenWriteAccountResolver(store).find_or_create("Acme", updates={"name": "Other"})


def test_assign_fields_protects_system_key() -> None:
    contact = Contact(last_name="Doe")

    with pytest.raises(InvalidArgumentError):
        assign_fields(contact, {"id": None})

    assign_fields(contact, {"email": "doe@example.com", "last_name": "Roe"})
    assert contact.email == "doe@example.com"
    assert contact.last_name == "Roe"
