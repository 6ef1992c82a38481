"""Public domain model surface."""

from __future__ import annotations

from shiptivity.domain.model.client import ClientRecord, NewClient, Position
from shiptivity.domain.model.enums import ClientStatus

__all__ = [
    "ClientRecord",
    "ClientStatus",
    "NewClient",
    "Position",
]
