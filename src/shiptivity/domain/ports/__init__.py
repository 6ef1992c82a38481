"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import ClientRepository
from .unit_of_work import (
    ClientRepositories,
    ClientUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ClientRepositories",
    "ClientRepository",
    "ClientUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]
