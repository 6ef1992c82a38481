"""Application services for the client board."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from shiptivity.domain.model import ClientStatus, NewClient
from shiptivity.domain.reconciliation import changed_records, reconcile
from shiptivity.domain.validation import (
    InvalidClientIdError,
    parse_client_id,
    parse_client_name,
    parse_priority,
    parse_status,
    require_client,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from shiptivity.domain.model import ClientRecord
    from shiptivity.domain.ports import ClientUnitOfWork

    UnitOfWorkFactory = Callable[[], ClientUnitOfWork]


log = getLogger(__name__)

# load -> reconcile -> persist must not interleave between callers of this process
_BOARD_WRITE_LOCK = threading.Lock()


@dataclass(slots=True)
class UpdateClientResult:
    """Outcome of a client update."""

    client: ClientRecord
    clients: tuple[ClientRecord, ...]
    written: int


def list_clients(
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    status: object = None,
) -> list[ClientRecord]:
    """Return every client, or only the clients of one lane."""

    lane = parse_status(status)
    with unit_of_work_factory() as uow:
        return uow.repositories.clients.query(lane)


def get_client(
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    client_id: object,
) -> ClientRecord:
    parsed_id = parse_client_id(client_id)
    with unit_of_work_factory() as uow:
        record = uow.repositories.clients.get(parsed_id)
    if record is None:
        raise InvalidClientIdError.not_found()
    return record


def update_client(
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    client_id: object,
    status: object = None,
    priority: object = None,
) -> UpdateClientResult:
    """Move a client to a new lane and/or rank and renumber the affected lanes.

    Only rows whose position changed are written, in a single commit.
    """

    parsed_id = parse_client_id(client_id)
    lane = parse_status(status)
    rank = parse_priority(priority)

    with _BOARD_WRITE_LOCK, unit_of_work_factory() as uow:
        repository = uow.repositories.clients
        before = repository.query()
        require_client(before, parsed_id)

        after = reconcile(before, parsed_id, status=lane, priority=rank)
        changes = changed_records(before, after)
        written = 0
        if changes:
            written = repository.save_positions(changes)
            uow.commit()

    client = next(record for record in after if record.id == parsed_id)
    log.info(
        "Updated client %s to %s #%s (requested status=%s, priority=%s, rows written=%s)",
        client.id,
        client.status,
        client.priority,
        lane,
        rank,
        written,
    )
    return UpdateClientResult(client=client, clients=after, written=written)


def create_client(
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    name: object,
    description: str | None = None,
    status: object = None,
) -> ClientRecord:
    """Add a client at the bottom of its lane."""

    lane = parse_status(status) or ClientStatus.BACKLOG
    new_client = NewClient(name=parse_client_name(name), description=description, status=lane)
    with _BOARD_WRITE_LOCK, unit_of_work_factory() as uow:
        record = uow.repositories.clients.add(new_client)
        uow.commit()
    log.info("Created client %s in %s at #%s", record.id, record.status, record.priority)
    return record
