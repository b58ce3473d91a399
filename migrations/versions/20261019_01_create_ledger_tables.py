"""create ledger tables

Revision ID: 3f9c2a7d1b40
Revises: 
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

from zercoin.db.types import LedgerAmount


# revision identifiers, used by Alembic.
revision = "3f9c2a7d1b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=100), unique=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "wallets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("address", sa.String(length=100), nullable=False, unique=True),
        sa.Column("balance", LedgerAmount(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.CheckConstraint("balance >= 0", name="ck_wallets_balance_non_negative"),
    )
    op.create_index("ix_wallets_user_id", "wallets", ["user_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("from_wallet_id", sa.Integer(), sa.ForeignKey("wallets.id")),
        sa.Column("to_wallet_id", sa.Integer(), sa.ForeignKey("wallets.id")),
        sa.Column("amount", LedgerAmount(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        sa.Column("type", sa.String(length=20), nullable=False, server_default="transfer"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        sa.CheckConstraint(
            "(type = 'transfer' AND from_wallet_id IS NOT NULL AND to_wallet_id IS NOT NULL"
            " AND from_wallet_id <> to_wallet_id)"
            " OR (type = 'deposit' AND from_wallet_id IS NULL AND to_wallet_id IS NOT NULL)"
            " OR (type = 'withdraw' AND from_wallet_id IS NOT NULL AND to_wallet_id IS NULL)",
            name="ck_transactions_wallet_shape",
        ),
    )
    op.create_index(
        "ix_transactions_from_wallet_created", "transactions", ["from_wallet_id", "created_at"]
    )
    op.create_index("ix_transactions_to_wallet_created", "transactions", ["to_wallet_id", "created_at"])

    op.create_table(
        "audit_log",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("action", sa.String(length=100), nullable=False),
        sa.Column("info", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_audit_log_action", "audit_log", ["action"])


def downgrade() -> None:
    op.drop_index("ix_audit_log_action", table_name="audit_log")
    op.drop_table("audit_log")

    op.drop_index("ix_transactions_to_wallet_created", table_name="transactions")
    op.drop_index("ix_transactions_from_wallet_created", table_name="transactions")
    op.drop_table("transactions")

    op.drop_index("ix_wallets_user_id", table_name="wallets")
    op.drop_table("wallets")

    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
