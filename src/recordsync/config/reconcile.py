"""Reconciliation defaults: marker values, opportunity defaults, lookup caching."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, optional_env_var
from .errors import ConfigurationError

ACCOUNT_CREATED_MARKER = "New Account"
ACCOUNT_UPDATED_MARKER = "Updated Account"
DEFAULT_OPPORTUNITY_STAGE = "Prospecting"
DEFAULT_CLOSE_DATE_OFFSET_DAYS = 30


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    created_marker: str = ACCOUNT_CREATED_MARKER
    updated_marker: str = ACCOUNT_UPDATED_MARKER
    default_stage: str = DEFAULT_OPPORTUNITY_STAGE
    close_date_offset_days: int = DEFAULT_CLOSE_DATE_OFFSET_DAYS
    # one account round trip per contact unless enabled
    memoize_account_lookups: bool = False


def get_reconcile_config() -> ReconcileConfig:
    offset = env_int("RECORDSYNC_CLOSE_DATE_OFFSET_DAYS", DEFAULT_CLOSE_DATE_OFFSET_DAYS)
    if offset < 0:
        raise ConfigurationError("RECORDSYNC_CLOSE_DATE_OFFSET_DAYS must be non-negative")
    return ReconcileConfig(
        default_stage=optional_env_var("RECORDSYNC_DEFAULT_STAGE") or DEFAULT_OPPORTUNITY_STAGE,
        close_date_offset_days=offset,
        memoize_account_lookups=env_bool("RECORDSYNC_MEMOIZE_ACCOUNT_LOOKUPS", False),
    )
