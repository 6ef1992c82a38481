"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ClientStatus(StrEnum):
    """Swimlane a client sits in; declaration order is board order."""

    BACKLOG = "backlog"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"
