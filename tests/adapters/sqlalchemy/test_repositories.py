from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from shiptivity.adapters.sqlalchemy.mappings import client_table
from shiptivity.adapters.sqlalchemy.repositories import SqlAlchemyClientRepository
from shiptivity.domain.model import ClientStatus, NewClient
from tests.helpers.clients import layout_of, seed_board

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def test_add_appends_to_bottom_of_lane(sqlite_session: Session) -> None:
    repo = SqlAlchemyClientRepository(sqlite_session)

    first = repo.add(NewClient(name="Acme"))
    second = repo.add(NewClient(name="Globex", description="Rockets"))
    other_lane = repo.add(NewClient(name="Initech", status=ClientStatus.COMPLETE))

    assert (first.status, first.priority) == (ClientStatus.BACKLOG, 1)
    assert (second.status, second.priority) == (ClientStatus.BACKLOG, 2)
    assert (other_lane.status, other_lane.priority) == (ClientStatus.COMPLETE, 1)
    assert second.description == "Rockets"
    assert len({first.id, second.id, other_lane.id}) == 3


def test_status_is_stored_by_value(sqlite_session: Session) -> None:
    repo = SqlAlchemyClientRepository(sqlite_session)
    repo.add(NewClient(name="Acme", status=ClientStatus.IN_PROGRESS))

    stored = sqlite_session.execute(select(client_table.c.status)).scalar_one()

    assert stored == ClientStatus.IN_PROGRESS
    assert str(stored) == "in-progress"


def test_query_returns_lanes_in_board_order(sqlite_session: Session) -> None:
    repo = SqlAlchemyClientRepository(sqlite_session)
    seed_board(
        repo,
        {
            ClientStatus.COMPLETE: ["E"],
            ClientStatus.IN_PROGRESS: ["C", "D"],
            ClientStatus.BACKLOG: ["A", "B"],
        },
    )

    records = repo.query()

    assert [record.name for record in records] == ["A", "B", "C", "D", "E"]


def test_query_filters_by_status(sqlite_session: Session) -> None:
    repo = SqlAlchemyClientRepository(sqlite_session)
    seed_board(repo, {ClientStatus.BACKLOG: ["A"], ClientStatus.IN_PROGRESS: ["B", "C"]})

    records = repo.query(ClientStatus.IN_PROGRESS)

    assert [(record.name, record.priority) for record in records] == [("B", 1), ("C", 2)]
    assert repo.query(ClientStatus.COMPLETE) == []


def test_get_returns_record_or_none(sqlite_session: Session) -> None:
    repo = SqlAlchemyClientRepository(sqlite_session)
    stored = seed_board(repo, {ClientStatus.BACKLOG: ["A"]})

    assert repo.get(stored["A"].id) == stored["A"]
    assert repo.get(stored["A"].id + 100) is None


def test_save_positions_updates_only_given_rows(sqlite_session: Session) -> None:
    repo = SqlAlchemyClientRepository(sqlite_session)
    stored = seed_board(repo, {ClientStatus.BACKLOG: ["A", "B"], ClientStatus.COMPLETE: ["C"]})

    written = repo.save_positions(
        [
            stored["A"].moved_to(ClientStatus.COMPLETE, 2),
            stored["B"].moved_to(ClientStatus.BACKLOG, 1),
        ]
    )

    assert written == 2
    assert layout_of(repo.query()) == {
        ClientStatus.BACKLOG: ["B"],
        ClientStatus.COMPLETE: ["C", "A"],
    }
    reloaded = repo.get(stored["A"].id)
    assert reloaded is not None
    assert (reloaded.name, reloaded.description) == ("A", "A description")


def test_save_positions_with_no_rows_writes_nothing(sqlite_session: Session) -> None:
    repo = SqlAlchemyClientRepository(sqlite_session)

    assert repo.save_positions([]) == 0
