"""Request validation for board operations.

Raw values arrive from the command line as strings (or from callers as already
typed values). Each check either returns the parsed value or raises a
``RequestValidationError`` carrying a short ``message`` and an explanatory
``long_message`` suitable for showing to the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from shiptivity.domain.model import ClientStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shiptivity.domain.model import ClientRecord

_ALLOWED_STATUSES: Final[str] = " | ".join(status.value for status in ClientStatus)


class RequestValidationError(ValueError):
    """Raised when a request value is rejected before reaching the board."""

    message: str = "Invalid request."

    def __init__(self, long_message: str) -> None:
        self.long_message = long_message
        super().__init__(f"{self.message} {long_message}")

    def as_dict(self) -> dict[str, str]:
        return {"message": self.message, "long_message": self.long_message}


class InvalidClientIdError(RequestValidationError):
    message = "Invalid id provided."

    @classmethod
    def not_found(cls) -> InvalidClientIdError:
        return cls("Cannot find client with that id.")


class InvalidStatusValueError(RequestValidationError):
    message = "Invalid status provided."


class InvalidPriorityError(RequestValidationError):
    message = "Invalid priority provided."


class InvalidClientNameError(RequestValidationError):
    message = "Invalid name provided."


def parse_client_id(raw: object) -> int:
    value = _parse_int(raw)
    if value is None:
        raise InvalidClientIdError("Id can only be integer.")
    return value


def require_client(records: Iterable[ClientRecord], client_id: int) -> ClientRecord:
    """Return the record with ``client_id`` or reject the request."""

    for record in records:
        if record.id == client_id:
            return record
    raise InvalidClientIdError.not_found()


def parse_status(raw: object) -> ClientStatus | None:
    if raw is None:
        return None
    if isinstance(raw, ClientStatus):
        return raw
    if isinstance(raw, str):
        try:
            return ClientStatus(raw.strip())
        except ValueError:
            pass
    raise InvalidStatusValueError(
        f"Status can only be one of the following: [{_ALLOWED_STATUSES}]."
    )


def parse_priority(raw: object) -> int | None:
    if raw is None:
        return None
    value = _parse_int(raw)
    if value is None or value <= 0:
        raise InvalidPriorityError("Priority can only be positive integer.")
    return value


def parse_client_name(raw: object) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidClientNameError("Name can only be non-empty text.")
    return raw.strip()


def _parse_int(raw: object) -> int | None:
    # bool is an int subclass but never a meaningful id or rank
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 10)
        except ValueError:
            return None
    return None
