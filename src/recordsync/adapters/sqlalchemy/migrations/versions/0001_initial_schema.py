"""Create the record tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _account_fk(table_name: str) -> sa.Column[object]:
    return sa.Column(
        "account_id",
        sa.Uuid(),
        sa.ForeignKey(
            "account.id",
            name=f"fk_{table_name}_account_id_account",
            ondelete="SET NULL",
        ),
        nullable=True,
    )


def upgrade() -> None:
    op.create_table(
        "account",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("industry", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_account"),
    )
    op.create_index("ix_account_name", "account", ["name"])

    for table_name, columns in (
        (
            "contact",
            [
                sa.Column("first_name", sa.String(), nullable=True),
                sa.Column("last_name", sa.String(), nullable=False),
                sa.Column("email", sa.String(), nullable=True),
            ],
        ),
        (
            "opportunity",
            [
                sa.Column("name", sa.String(), nullable=False),
                sa.Column("stage_name", sa.String(), nullable=False),
                sa.Column("close_date", sa.Date(), nullable=False),
                sa.Column("amount", sa.Numeric(18, 2), nullable=True),
            ],
        ),
        (
            "support_case",
            [
                sa.Column("subject", sa.String(), nullable=False),
                sa.Column("status", sa.String(), nullable=False),
                sa.Column("origin", sa.String(), nullable=True),
            ],
        ),
    ):
        op.create_table(
            table_name,
            sa.Column("id", sa.Uuid(), nullable=False),
            *columns,
            _account_fk(table_name),
            sa.PrimaryKeyConstraint("id", name=f"pk_{table_name}"),
        )
        op.create_index(f"ix_{table_name}_account_id", table_name, ["account_id"])

    op.create_table(
        "lead",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=True),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("company", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_lead"),
    )


def downgrade() -> None:
    op.drop_table("lead")
    for table_name in ("support_case", "opportunity", "contact"):
        op.drop_index(f"ix_{table_name}_account_id", table_name=table_name)
        op.drop_table(table_name)
    op.drop_index("ix_account_name", table_name="account")
    op.drop_table("account")
