"""orchestrators

Revision ID: 0001_orchestrators
Revises: None
Create Date: 2026-10-19

Creates the `orchestrators` table mirroring on-chain registration state.

Notes:
- Local dev and tests rely on `Base.metadata.create_all()`; the online-mode upgrade
  skips the table and indexes when they already exist.
"""

from __future__ import annotations

from alembic import context, op
import sqlalchemy as sa


revision = "0001_orchestrators"
down_revision = None
branch_labels = None
depends_on = None


def _is_offline() -> bool:
    try:
        return bool(context.is_offline_mode())
    except Exception:
        return False


def _insp():
    return sa.inspect(op.get_bind())


def _has_table(name: str) -> bool:
    return _insp().has_table(name)


def _get_indexes(table: str) -> set[str]:
    idx = set()
    for i in _insp().get_indexes(table):
        idx.add(str(i.get("name") or ""))
    return idx


def _create_index(name: str, table: str, cols: list[str]) -> None:
    if _is_offline():
        op.create_index(name, table, cols)
        return
    if name in _get_indexes(table):
        return
    op.create_index(name, table, cols)


def upgrade() -> None:
    if _is_offline() or not _has_table("orchestrators"):
        op.create_table(
            "orchestrators",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("ethereum_addr", sa.String(length=42), nullable=False),
            sa.Column("activation_round", sa.BigInteger(), server_default="0", nullable=False),
            sa.Column("deactivation_round", sa.BigInteger(), server_default="0", nullable=False),
            sa.Column("service_uri", sa.String(length=512), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
            sa.UniqueConstraint("ethereum_addr", name="uq_orchestrators_ethereum_addr"),
        )
    _create_index("ix_orchestrators_ethereum_addr", "orchestrators", ["ethereum_addr"])


def downgrade() -> None:
    op.drop_table("orchestrators")
