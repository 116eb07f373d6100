from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING
from uuid import UUID

from dotenv import load_dotenv

from recordsync.app import link_contacts, sync_opportunities, update_record, upsert_account
from recordsync.config import configure_logging
from recordsync.domain.errors import InvalidArgumentError, RecordNotFoundError
from recordsync.domain.model import Contact, RecordType, record_class_for
from recordsync.domain.record_ops import parse_field_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile accounts and their child records")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    account = subparsers.add_parser("account", help="Account commands")
    account_sub = account.add_subparsers(dest="account_command", required=True)
    account_upsert = account_sub.add_parser("upsert", help="Create or update an account by name")
    account_upsert.add_argument("name", type=str, help="Account name")

    contacts = subparsers.add_parser("contacts", help="Contact commands")
    contacts_sub = contacts.add_subparsers(dest="contacts_command", required=True)
    contacts_link = contacts_sub.add_parser(
        "link",
        help="Store contacts and link each to the account named by its last name",
    )
    contacts_link.add_argument(
        "--contact",
        dest="contacts",
        action="append",
        required=True,
        metavar="[FIRST:]LAST",
        help="Contact to link; repeat for several contacts",
    )

    opportunities = subparsers.add_parser("opportunities", help="Opportunity commands")
    opportunities_sub = opportunities.add_subparsers(dest="opportunities_command", required=True)
    opportunities_sync = opportunities_sub.add_parser(
        "sync",
        help="Ensure one opportunity per name under an account",
    )
    opportunities_sync.add_argument("account", type=str, help="Account name")
    opportunities_sync.add_argument("names", nargs="+", help="Opportunity names")

    records = subparsers.add_parser("records", help="Generic record commands")
    records_sub = records.add_subparsers(dest="records_command", required=True)
    records_update = records_sub.add_parser("update", help="Update fields of a stored record")
    records_update.add_argument("record_type", choices=[t.value for t in RecordType])
    records_update.add_argument("record_id", type=UUID, help="System key of the record")
    records_update.add_argument("changes", nargs="+", metavar="FIELD=VALUE")

    return parser.parse_args(list(argv))


def _parse_changes(values: Sequence[str]) -> dict[str, str]:
    changes: dict[str, str] = {}
    for value in values:
        field, sep, text = value.partition("=")
        if not sep or not field.strip():
            raise ValueError(f"Invalid assignment {value!r}: expected FIELD=VALUE")
        changes[field.strip()] = text
    return changes


def _parse_contact(value: str) -> Contact:
    first, sep, last = value.partition(":")
    if not sep:
        first, last = "", first
    if not last.strip():
        raise ValueError(f"Invalid contact {value!r}: last name is required")
    return Contact(first_name=first.strip() or None, last_name=last.strip())


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    contacts: list[Contact] = []
    changes: dict[str, str] = {}
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.command == "contacts":
            contacts = [_parse_contact(value) for value in parsed_args.contacts]
        elif parsed_args.command == "records":
            changes = _parse_changes(parsed_args.changes)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "account":
            account = upsert_account(parsed_args.name)
            log.info("Account %s: %s", account.id, account.description)
        elif parsed_args.command == "contacts":
            linked = link_contacts(contacts)
            for contact in linked:
                log.info("Contact %s -> account %s", contact.full_name, contact.account_id)
        elif parsed_args.command == "opportunities":
            result = sync_opportunities(parsed_args.account, parsed_args.names)
            log.info(
                "Opportunity sync finished: account=%s, created=%s, matched=%s",
                result.account.id,
                len(result.created),
                len(result.matched),
            )
        elif parsed_args.command == "records":
            record_cls = record_class_for(parsed_args.record_type)
            record = update_record(
                parsed_args.record_type,
                parsed_args.record_id,
                parse_field_text(record_cls, changes),
            )
            log.info("Record %s %s updated", record.record_type, record.id)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except (InvalidArgumentError, RecordNotFoundError):
        log.exception("Invalid arguments")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env`` and install the SIGINT handler."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
