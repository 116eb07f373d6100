from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

from recordsync.domain.model import Account, Opportunity
from recordsync.ui import cli as cli_module

if TYPE_CHECKING:
    from collections.abc import Callable

    from recordsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork


def _stored_opportunity(unit_of_work: Callable[[], SqlAlchemyUnitOfWork]) -> Opportunity:
    with unit_of_work() as uow:
        records = uow.repositories.records
        account = records.upsert(Account(name="Acme"))
        opportunity = records.upsert(
            Opportunity(
                name="Widget",
                stage_name="Prospecting",
                close_date=date(2026, 11, 18),
                account_id=account.id,
            )
        )
        uow.commit()
    return opportunity


def _reload(
    unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
    opportunity: Opportunity,
) -> Opportunity:
    with unit_of_work() as uow:
        return uow.repositories.records.find(Opportunity, id=opportunity.id, limit=1)[0]


@pytest.mark.integration
def test_records_update_converts_typed_fields(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    opportunity = _stored_opportunity(sqlite_unit_of_work)

    cli_module.main(
        [
            "records",
            "update",
            "opportunity",
            str(opportunity.id),
            "close_date=2027-01-01",
            "amount=12.50",
            "stage_name=Negotiation",
        ]
    )

    stored = _reload(sqlite_unit_of_work, opportunity)
    assert stored.close_date == date(2027, 1, 1)
    assert stored.amount == Decimal("12.50")
    assert stored.stage_name == "Negotiation"


@pytest.mark.integration
@pytest.mark.parametrize(
    "assignment",
    [
        "close_date=next week",
        "amount=a lot",
        "account_id=acme",
        "id=00000000-0000-0000-0000-000000000001",
    ],
)
def test_records_update_with_unusable_value_exits_with_two(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
    assignment: str,
) -> None:
    opportunity = _stored_opportunity(sqlite_unit_of_work)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["records", "update", "opportunity", str(opportunity.id), assignment])

    assert excinfo.value.code == 2
    stored = _reload(sqlite_unit_of_work, opportunity)
    assert stored.close_date == date(2026, 11, 18)
    assert stored.amount is None
