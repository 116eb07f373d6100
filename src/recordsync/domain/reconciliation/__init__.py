"""Upsert reconciliation of accounts and their named child records.

Three operations share one find-or-create resolver:
1) upsert an account by name, flipping its description marker on repeat calls
2) link contacts to the accounts named by their last names, in one batch write
3) ensure one opportunity per desired name under an account, in one batch write
"""

from __future__ import annotations

from .accounts import upsert_account_by_name
from .contacts import link_contacts_to_accounts
from .engine import Reconciler
from .opportunities import MISSING_INPUT_MESSAGE, OpportunitySyncResult, sync_opportunities
from .resolve import ReadThenWriteAccountResolver, assign_fields

__all__ = [
    "MISSING_INPUT_MESSAGE",
    "OpportunitySyncResult",
    "ReadThenWriteAccountResolver",
    "Reconciler",
    "assign_fields",
    "link_contacts_to_accounts",
    "sync_opportunities",
    "upsert_account_by_name",
]
