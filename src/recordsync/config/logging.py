"""Root logger setup for the command line."""

from __future__ import annotations

import logging

# chatty at INFO on every startup
_QUIET_LOGGERS = ("alembic.runtime.migration",)


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger via ``logging.basicConfig``.

    Migration chatter stays at WARNING unless ``level`` is DEBUG. ``force``
    replaces handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)
