"""Session-scoped unit of work over the SQLAlchemy record store.

``startup()`` binds one engine for the process, applies migrations and prepares
the session factory; every ``SqlAlchemyUnitOfWork`` then opens a fresh session
on entry and closes it on exit, rolling back if the block raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from recordsync.adapters.sqlalchemy.mappings import start_mappers
from recordsync.adapters.sqlalchemy.migrations import upgrade_head
from recordsync.adapters.sqlalchemy.repositories import SqlAlchemyRecordStore
from recordsync.config.storage import DatabaseConfig, get_database_config
from recordsync.domain.ports.unit_of_work import RecordRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the record store is used before ``startup()`` or outside a ``with`` block."""


@dataclass(slots=True)
class _Binding:
    engine: Engine | None = None
    session_factory: sessionmaker[Session] | None = None


_BINDING = _Binding()


def _create_engine(database_uri: str | None) -> Engine:
    config = get_database_config() if database_uri is None else DatabaseConfig(uri=database_uri)
    return create_engine(config.uri, echo=config.echo, future=True)


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the record store to ``engine`` (or a new one) and migrate its schema."""

    if _BINDING.engine is not None and not force:
        raise StartupError("Record store already started. Pass force=True to rebind it.")

    bound = engine or _create_engine(database_uri)
    start_mappers()
    upgrade_head(engine=bound)
    _BINDING.engine = bound
    _BINDING.session_factory = sessionmaker(bind=bound, expire_on_commit=False)
    log.info("Record store ready at %s", bound.url.render_as_string(hide_password=True))


def configured_engine() -> Engine | None:
    return _BINDING.engine


def is_started() -> bool:
    return _BINDING.engine is not None


def shutdown() -> None:
    """Dispose the bound engine, if any, and forget it."""

    if _BINDING.engine is not None:
        _BINDING.engine.dispose()
    _BINDING.engine = None
    _BINDING.session_factory = None


class SqlAlchemyUnitOfWork:
    """One session, one transaction: commit explicitly, roll back on error."""

    def __init__(self) -> None:
        if _BINDING.session_factory is None:
            raise StartupError(
                "Record store not started. Call "
                "recordsync.adapters.sqlalchemy.unit_of_work.startup() first."
            )
        self._session_factory = _BINDING.session_factory
        self._session: Session | None = None
        self._repositories: RecordRepositories | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work already entered")
        self._session = self._session_factory()
        self._repositories = RecordRepositories(records=SqlAlchemyRecordStore(self._session))
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                log.debug("Rolling back after %s", exc_type.__name__)
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work used outside its with block")
        return self._session

    @property
    def repositories(self) -> RecordRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work used outside its with block")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from recordsync.domain.ports.unit_of_work import RecordUnitOfWork

    _uow_check: RecordUnitOfWork = SqlAlchemyUnitOfWork()
