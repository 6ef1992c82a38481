"""Priority reconciliation for client swimlanes.

Given a board snapshot and one requested position change, compute the board after
the change with every touched lane renumbered ``1..n``. The function is pure: the
input sequence and its records are never mutated and nothing is persisted.

The case is decided by comparing the request with the target's current position,
an omitted value meaning "unchanged":

- no-op: same lane, same priority
- reorder: same lane, different priority
- move: different lane; without a priority the client goes to the bottom

A move and a reorder are mutually exclusive. Supplying both a new lane and a new
priority is a move that inserts at that rank in the destination lane.
"""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from shiptivity.domain.model import ClientStatus

from .errors import InvalidStatusError, UnknownTargetError
from .lanes import lane_members, renumber, splice

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from shiptivity.domain.model import ClientRecord, Position


log = getLogger(__name__)


class ReconcileCase(StrEnum):
    NO_OP = "no-op"
    REORDER = "reorder"
    MOVE = "move"


def classify(
    target: ClientRecord,
    status: ClientStatus,
    priority: int | None,
) -> ReconcileCase:
    if status != target.status:
        return ReconcileCase.MOVE
    if priority is None or priority == target.priority:
        return ReconcileCase.NO_OP
    return ReconcileCase.REORDER


def reconcile(
    records: Sequence[ClientRecord],
    target_id: int,
    *,
    status: ClientStatus | str | None = None,
    priority: int | None = None,
) -> tuple[ClientRecord, ...]:
    """Return the board after moving ``target_id`` to the requested position.

    The result has one entry per input record, in input order. Records outside the
    affected lanes are returned as the same objects.

    Raises ``UnknownTargetError`` when ``target_id`` is not in ``records`` and
    ``InvalidStatusError`` when ``status`` is not a board lane.
    """

    target = find_target(records, target_id)
    requested_status = target.status if status is None else coerce_status(status)
    case = classify(target, requested_status, priority)
    log.debug(
        "Reconciling client %s: %s -> (%s, %s) as %s",
        target_id,
        target.position,
        requested_status,
        priority,
        case,
    )

    if case is ReconcileCase.NO_OP:
        return tuple(records)

    positions: dict[int, Position]
    if case is ReconcileCase.REORDER:
        peers = lane_members(records, target.status, exclude_id=target.id)
        positions = renumber(target.status, splice(peers, target, priority))
    else:
        remaining = lane_members(records, target.status, exclude_id=target.id)
        destination = lane_members(records, requested_status, exclude_id=target.id)
        positions = renumber(target.status, remaining)
        positions.update(renumber(requested_status, splice(destination, target, priority)))

    return tuple(
        record.moved_to(*positions[record.id]) if record.id in positions else record
        for record in records
    )


def changed_records(
    before: Iterable[ClientRecord],
    after: Iterable[ClientRecord],
) -> tuple[ClientRecord, ...]:
    """Records of ``after`` whose lane or priority differs from ``before``."""

    previous = {record.id: record.position for record in before}
    return tuple(record for record in after if previous.get(record.id) != record.position)


def find_target(records: Iterable[ClientRecord], target_id: int) -> ClientRecord:
    for record in records:
        if record.id == target_id:
            return record
    raise UnknownTargetError(target_id)


def coerce_status(status: ClientStatus | str) -> ClientStatus:
    if isinstance(status, ClientStatus):
        return status
    try:
        return ClientStatus(status)
    except ValueError:
        raise InvalidStatusError(status) from None
