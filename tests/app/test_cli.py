from __future__ import annotations

from types import SimpleNamespace
from uuid import UUID

import pytest

from recordsync.domain.errors import InvalidArgumentError, RecordNotFoundError
from recordsync.domain.model import Account, Contact
from recordsync.ui import cli as cli_module


def test_cli_account_upsert(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[str] = []

    def fake_upsert(name: str) -> Account:
        captured.append(name)
        return Account(id=UUID(int=1), name=name, description="New Account")

    monkeypatch.setattr(cli_module, "upsert_account", fake_upsert)

    cli_module.main(["account", "upsert", "Doe"])

    assert captured == ["Doe"]


def test_cli_contacts_link_parses_contacts(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[Contact] = []

    def fake_link(contacts: list[Contact]) -> list[Contact]:
        captured.extend(contacts)
        return contacts

    monkeypatch.setattr(cli_module, "link_contacts", fake_link)

    cli_module.main(["contacts", "link", "--contact", "Jane:Doe", "--contact", "Roe"])

    assert [(c.first_name, c.last_name) for c in captured] == [("Jane", "Doe"), (None, "Roe")]


def test_cli_opportunities_sync(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_sync(account_name: str, names: list[str]) -> SimpleNamespace:
        captured["account"] = account_name
        captured["names"] = names
        account = Account(id=UUID(int=2), name=account_name)
        return SimpleNamespace(account=account, created=[], matched=[])

    monkeypatch.setattr(cli_module, "sync_opportunities", fake_sync)

    cli_module.main(["opportunities", "sync", "Acme", "Widget", "Gadget"])

    assert captured == {"account": "Acme", "names": ["Widget", "Gadget"]}


def test_cli_rejects_contact_without_last_name(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_link(_contacts: list[Contact]) -> list[Contact]:
        raise AssertionError("should not be called")

    monkeypatch.setattr(cli_module, "link_contacts", fake_link)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["contacts", "link", "--contact", "Jane:"])

    assert excinfo.value.code == 2


def test_cli_invalid_arguments_exit_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_sync(*_: object, **__: object) -> None:
        raise InvalidArgumentError("Opportunity names must not be blank")

    monkeypatch.setattr(cli_module, "sync_opportunities", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["opportunities", "sync", "Acme", " "])

    assert excinfo.value.code == 2


def test_cli_store_failure_exits_with_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_upsert(*_: object, **__: object) -> None:
        raise RuntimeError("record store unavailable")

    monkeypatch.setattr(cli_module, "upsert_account", fake_upsert)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["account", "upsert", "Doe"])

    assert excinfo.value.code == 1


def test_cli_records_update(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_update(record_type: str, record_id: UUID, changes: dict[str, str]) -> Account:
        captured.update(record_type=record_type, record_id=record_id, changes=changes)
        return Account(id=record_id, name="Acme", description=changes["description"])

    monkeypatch.setattr(cli_module, "update_record", fake_update)
    record_id = UUID(int=3)

    cli_module.main(
        ["records", "update", "account", str(record_id), "description=Key account", "industry="]
    )

    assert captured == {
        "record_type": "account",
        "record_id": record_id,
        "changes": {"description": "Key account", "industry": None},
    }


def test_cli_records_update_rejects_bad_assignment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_module, "update_record", lambda *_: None)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["records", "update", "lead", str(UUID(int=4)), "status"])

    assert excinfo.value.code == 2


def test_cli_records_update_missing_record_exits_with_two(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def fake_update(*_: object) -> None:
        raise RecordNotFoundError("No lead record with id 0")

    monkeypatch.setattr(cli_module, "update_record", fake_update)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["records", "update", "lead", str(UUID(int=5)), "status=Working"])

    assert excinfo.value.code == 2
