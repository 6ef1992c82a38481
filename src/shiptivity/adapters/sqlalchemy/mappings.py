"""SQLAlchemy table metadata for the client board."""

from __future__ import annotations

from sqlalchemy import Column, Enum, Index, Integer, MetaData, String, Table, Text

from shiptivity.domain.model import ClientStatus

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# statuses are stored by value ("in-progress"), not by enum member name
client_status_type = Enum(
    ClientStatus,
    name="client_status",
    native_enum=False,
    length=32,
    values_callable=lambda statuses: [status.value for status in statuses],
    validate_strings=True,
)

client_table = Table(
    "clients",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("description", Text, nullable=True),
    Column("status", client_status_type, nullable=False),
    Column("priority", Integer, nullable=False),
    # not unique: rows are renumbered one statement at a time within a transaction
    Index("ix_client_status_priority", "status", "priority"),
)

