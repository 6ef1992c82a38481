"""Ports for persisting client records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shiptivity.domain.model import ClientRecord, ClientStatus, NewClient


@runtime_checkable
class ClientRepository(Protocol):
    """Persistence contract for the client board.

    Reads must observe earlier writes made through the same store.
    """

    def query(self, status: ClientStatus | None = None) -> list[ClientRecord]:
        """Return clients ordered by lane, then priority, then id."""
        ...

    def get(self, client_id: int) -> ClientRecord | None: ...

    def add(self, client: NewClient) -> ClientRecord:
        """Insert ``client`` at the bottom of its lane and return the stored record."""
        ...

    def save_positions(self, records: Iterable[ClientRecord]) -> int:
        """Persist ``(id, status, priority)`` for each record; return rows written."""
        ...
