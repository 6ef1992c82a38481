"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from shiptivity.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyClientUnitOfWork,
    is_started,
    startup,
)
from shiptivity.domain import client_board
from shiptivity.domain.ports.unit_of_work import ClientUnitOfWork

if TYPE_CHECKING:
    from shiptivity.domain.client_board import UpdateClientResult
    from shiptivity.domain.model import ClientRecord

UnitOfWorkFactory = Callable[[], ClientUnitOfWork]


log = getLogger(__name__)


def _resolve_unit_of_work(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        log.debug("Starting SQLAlchemy adapter")
        startup()
    return SqlAlchemyClientUnitOfWork


def list_clients(
    *,
    status: object = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[ClientRecord]:
    """List clients, optionally restricted to one lane."""

    return client_board.list_clients(
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
        status=status,
    )


def get_client(
    *,
    client_id: object,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ClientRecord:
    return client_board.get_client(
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
        client_id=client_id,
    )


def update_client(
    *,
    client_id: object,
    status: object = None,
    priority: object = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> UpdateClientResult:
    """Change a client's lane and/or priority using the configured adapters."""

    log.debug(
        "Updating client %s: status=%s, priority=%s",
        client_id,
        status,
        priority,
    )
    return client_board.update_client(
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
        client_id=client_id,
        status=status,
        priority=priority,
    )


def create_client(
    *,
    name: str,
    description: str | None = None,
    status: object = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ClientRecord:
    return client_board.create_client(
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
        name=name,
        description=description,
        status=status,
    )
