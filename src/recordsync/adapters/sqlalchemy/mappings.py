"""SQLAlchemy mapping metadata for the record model."""

from __future__ import annotations

import logging
import uuid
from functools import cache

from sqlalchemy import Column, Date, ForeignKey, Numeric, String, Table, Uuid, orm
from sqlalchemy.orm import configure_mappers

from recordsync.domain.model import RECORD_CLASSES, RecordType

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _account_fk() -> Column[uuid.UUID]:
    return Column(
        "account_id",
        UUIDColumnType,
        ForeignKey("account.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )


# Record tables ----------------------------------------------------------------

# indexed, not unique
account_table = Table(
    "account",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("name", String, nullable=False, index=True),
    Column("description", String, nullable=True),
    Column("industry", String, nullable=True),
)

contact_table = Table(
    "contact",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("first_name", String, nullable=True),
    Column("last_name", String, nullable=False),
    Column("email", String, nullable=True),
    _account_fk(),
)

opportunity_table = Table(
    "opportunity",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("name", String, nullable=False),
    Column("stage_name", String, nullable=False),
    Column("close_date", Date, nullable=False),
    Column("amount", Numeric(18, 2), nullable=True),
    _account_fk(),
)

lead_table = Table(
    "lead",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("first_name", String, nullable=True),
    Column("last_name", String, nullable=False),
    Column("company", String, nullable=False),
    Column("status", String, nullable=False),
)

case_table = Table(
    "support_case",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True),
    Column("subject", String, nullable=False),
    Column("status", String, nullable=False),
    Column("origin", String, nullable=True),
    _account_fk(),
)

TABLE_BY_RECORD_TYPE: dict[RecordType, Table] = {
    RecordType.ACCOUNT: account_table,
    RecordType.CONTACT: contact_table,
    RecordType.OPPORTUNITY: opportunity_table,
    RecordType.LEAD: lead_table,
    RecordType.CASE: case_table,
}


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the record model."""

    log.info("Starting SQLAlchemy mappers")

    for record_type, record_cls in RECORD_CLASSES.items():
        mapper_registry.map_imperatively(record_cls, TABLE_BY_RECORD_TYPE[record_type])

    configure_mappers()
    return mapper_registry
