"""Alembic migrations for the record tables, applied programmatically."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config

from recordsync.config.storage import get_database_uri

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent


def _alembic_config() -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_PATH))
    return config


def upgrade_head(*, engine: Engine | None = None, database_uri: str | None = None) -> None:
    """Bring the schema to the latest revision.

    With ``engine`` the upgrade runs on one of its connections inside a single
    transaction, which keeps in-memory SQLite databases intact; otherwise
    ``database_uri`` (or the configured URI) is used.
    """

    config = _alembic_config()
    if engine is None:
        config.set_main_option("sqlalchemy.url", database_uri or get_database_uri())
        command.upgrade(config, "head")
        return
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
