"""Create the clients table.

Databases created by the earlier service already hold a ``clients`` table with the
same columns; they are adopted as-is and only gain the lane index. Downgrading
removes that index only: the table and its rows are kept, and upgrading again
adopts them.

Revision ID: 0001_create_clients
Revises:
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_create_clients"
down_revision = None
branch_labels = None
depends_on = None

INDEX_NAME = "ix_client_status_priority"


def upgrade() -> None:
    inspector = sa.inspect(op.get_bind())
    if not inspector.has_table("clients"):
        op.create_table(
            "clients",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column(
                "status",
                sa.Enum(
                    "backlog",
                    "in-progress",
                    "complete",
                    name="client_status",
                    native_enum=False,
                    length=32,
                ),
                nullable=False,
            ),
            sa.Column("priority", sa.Integer(), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_clients"),
        )
        existing_indexes: set[str] = set()
    else:
        existing_indexes = {index["name"] for index in inspector.get_indexes("clients")}

    if INDEX_NAME not in existing_indexes:
        op.create_index(INDEX_NAME, "clients", ["status", "priority"])


def downgrade() -> None:
    op.drop_index(INDEX_NAME, table_name="clients")
