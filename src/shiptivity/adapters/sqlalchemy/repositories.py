"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import func, insert, select, update

from shiptivity.adapters.sqlalchemy.mappings import client_table
from shiptivity.domain.model import ClientRecord, ClientStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy import Row
    from sqlalchemy.orm import Session

    from shiptivity.domain.model import NewClient


class SqlAlchemyClientRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def query(self, status: ClientStatus | None = None) -> list[ClientRecord]:
        stmt = select(client_table).order_by(
            client_table.c.status,
            client_table.c.priority,
            client_table.c.id,
        )
        if status is not None:
            stmt = stmt.where(client_table.c.status == status)
        rows = self.session.execute(stmt).all()
        records = [self._to_record(row) for row in rows]
        # stored values sort alphabetically; present lanes in board order instead
        lane_order = {lane: index for index, lane in enumerate(ClientStatus)}
        return sorted(records, key=lambda record: lane_order[record.status])

    def get(self, client_id: int) -> ClientRecord | None:
        stmt = select(client_table).where(client_table.c.id == client_id).limit(1)
        row = self.session.execute(stmt).one_or_none()
        return None if row is None else self._to_record(row)

    def add(self, client: NewClient) -> ClientRecord:
        lane_size = self.session.execute(
            select(func.count())
            .select_from(client_table)
            .where(client_table.c.status == client.status)
        ).scalar_one()
        priority = lane_size + 1
        result = self.session.execute(
            insert(client_table).values(
                name=client.name,
                description=client.description,
                status=client.status,
                priority=priority,
            )
        )
        client_id = cast(int, result.inserted_primary_key[0])
        return ClientRecord(
            id=client_id,
            name=client.name,
            description=client.description,
            status=client.status,
            priority=priority,
        )

    def save_positions(self, records: Iterable[ClientRecord]) -> int:
        written = 0
        for record in records:
            self.session.execute(
                update(client_table)
                .where(client_table.c.id == record.id)
                .values(status=record.status, priority=record.priority)
            )
            written += 1
        return written

    @staticmethod
    def _to_record(row: Row[tuple[object, ...]]) -> ClientRecord:
        values = row._mapping  # noqa: SLF001
        return ClientRecord(
            id=cast(int, values["id"]),
            name=cast(str, values["name"]),
            description=cast("str | None", values["description"]),
            status=ClientStatus(values["status"]),
            priority=cast(int, values["priority"]),
        )


if TYPE_CHECKING:
    from shiptivity.domain.ports.persistence import ClientRepository

    _session_stub = cast("Session", object())
    _repo_check: ClientRepository = SqlAlchemyClientRepository(_session_stub)
