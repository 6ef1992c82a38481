"""Failures raised by the priority reconciler."""

from __future__ import annotations

from shiptivity.domain.model import ClientStatus


class ReconciliationError(ValueError):
    """Base class for reconciliation failures; nothing is applied when raised."""


class UnknownTargetError(ReconciliationError):
    """Raised when the target id is not part of the supplied records."""

    def __init__(self, target_id: int) -> None:
        self.target_id = target_id
        super().__init__(f"Client {target_id} is not part of the supplied records")


class InvalidStatusError(ReconciliationError):
    """Raised when a requested status is not one of the board lanes."""

    def __init__(self, status: object) -> None:
        self.status = status
        allowed = " | ".join(lane.value for lane in ClientStatus)
        super().__init__(f"Unknown status {status!r}; expected one of [{allowed}]")
