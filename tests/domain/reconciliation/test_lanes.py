from __future__ import annotations

from shiptivity.domain.model import ClientStatus
from shiptivity.domain.reconciliation import lane_violations, lanes_of, renumber, splice
from tests.helpers.clients import make_client


def test_lanes_of_lists_every_lane_in_priority_order() -> None:
    records = [
        make_client(1, ClientStatus.IN_PROGRESS, 2),
        make_client(2, ClientStatus.IN_PROGRESS, 1),
        make_client(3, ClientStatus.BACKLOG, 1),
    ]

    lanes = lanes_of(records)

    assert list(lanes) == [ClientStatus.BACKLOG, ClientStatus.IN_PROGRESS, ClientStatus.COMPLETE]
    assert [record.id for record in lanes[ClientStatus.IN_PROGRESS]] == [2, 1]
    assert lanes[ClientStatus.COMPLETE] == []


def test_splice_places_record_at_rank() -> None:
    members = [make_client(1), make_client(2), make_client(3)]
    newcomer = make_client(9)

    assert [r.id for r in splice(members, newcomer, 2)] == [1, 9, 2, 3]
    assert [r.id for r in splice(members, newcomer, 1)] == [9, 1, 2, 3]
    assert [r.id for r in splice(members, newcomer, 4)] == [1, 2, 3, 9]


def test_splice_clamps_out_of_range_ranks() -> None:
    members = [make_client(1), make_client(2)]
    newcomer = make_client(9)

    assert [r.id for r in splice(members, newcomer, None)] == [1, 2, 9]
    assert [r.id for r in splice(members, newcomer, 50)] == [1, 2, 9]
    assert [r.id for r in splice(members, newcomer, -3)] == [9, 1, 2]
    assert [r.id for r in members] == [1, 2]


def test_renumber_assigns_dense_positions() -> None:
    members = [make_client(4, priority=7), make_client(2, priority=9)]

    assert renumber(ClientStatus.COMPLETE, members) == {
        4: (ClientStatus.COMPLETE, 1),
        2: (ClientStatus.COMPLETE, 2),
    }


def test_lane_violations_detects_gaps_and_duplicates() -> None:
    records = [
        make_client(1, ClientStatus.BACKLOG, 1),
        make_client(2, ClientStatus.BACKLOG, 3),
        make_client(3, ClientStatus.IN_PROGRESS, 1),
        make_client(4, ClientStatus.IN_PROGRESS, 1),
        make_client(5, ClientStatus.COMPLETE, 1),
    ]

    assert lane_violations(records) == {
        ClientStatus.BACKLOG: [1, 3],
        ClientStatus.IN_PROGRESS: [1, 1],
    }


def test_lane_violations_accepts_empty_board() -> None:
    assert lane_violations([]) == {}
