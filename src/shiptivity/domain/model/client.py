"""Client records as seen by the board.

Records are immutable values. Position changes produce new records through
``ClientRecord.moved_to``; the descriptive fields ride along untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shiptivity.domain.model.enums import ClientStatus

type Position = tuple[ClientStatus, int]


@dataclass(frozen=True, slots=True, kw_only=True)
class ClientRecord:
    id: int
    name: str
    status: ClientStatus
    priority: int
    description: str | None = None

    @property
    def position(self) -> Position:
        """Lane and rank, the only part of a record the board ever changes."""
        return (self.status, self.priority)

    def moved_to(self, status: ClientStatus, priority: int) -> ClientRecord:
        if (status, priority) == self.position:
            return self
        return replace(self, status=status, priority=priority)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class NewClient:
    """Creation request; the store assigns the id and the bottom-of-lane priority."""

    name: str
    description: str | None = None
    status: ClientStatus = ClientStatus.BACKLOG

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("client name must not be blank")
