"""Lane-level helpers: grouping, splicing, dense renumbering, invariant checks."""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING

from shiptivity.domain.model import ClientStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from shiptivity.domain.model import ClientRecord, Position

_by_priority = attrgetter("priority")


def lanes_of(records: Iterable[ClientRecord]) -> dict[ClientStatus, list[ClientRecord]]:
    """Group records by lane, each lane ordered by priority.

    Every lane is present in the result, empty lanes included. Ties keep input order.
    """

    lanes: dict[ClientStatus, list[ClientRecord]] = {lane: [] for lane in ClientStatus}
    for record in sorted(records, key=_by_priority):
        lanes[record.status].append(record)
    return lanes


def lane_members(
    records: Iterable[ClientRecord],
    lane: ClientStatus,
    *,
    exclude_id: int | None = None,
) -> list[ClientRecord]:
    return sorted(
        (record for record in records if record.status == lane and record.id != exclude_id),
        key=_by_priority,
    )


def splice(
    members: Sequence[ClientRecord],
    record: ClientRecord,
    rank: int | None,
) -> list[ClientRecord]:
    """Insert ``record`` so it ends up at 1-based ``rank`` among ``members``.

    ``None`` or a rank past the end appends; ranks below 1 land on top.
    """

    ordered = list(members)
    if rank is None:
        index = len(ordered)
    else:
        index = min(max(rank, 1), len(ordered) + 1) - 1
    ordered.insert(index, record)
    return ordered


def renumber(lane: ClientStatus, members: Iterable[ClientRecord]) -> dict[int, Position]:
    """Map each member id to its dense ``1..n`` position in ``lane``."""

    return {record.id: (lane, rank) for rank, record in enumerate(members, start=1)}


def lane_violations(records: Iterable[ClientRecord]) -> dict[ClientStatus, list[int]]:
    """Return the lanes whose priorities are not exactly ``1..n``.

    Values are the offending lane's priorities in ascending order.
    """

    violations: dict[ClientStatus, list[int]] = {}
    for lane, members in lanes_of(records).items():
        priorities = [member.priority for member in members]
        if priorities != list(range(1, len(priorities) + 1)):
            violations[lane] = priorities
    return violations
