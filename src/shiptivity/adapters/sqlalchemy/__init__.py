"""SQLAlchemy adapter package for Shiptivity."""

from __future__ import annotations

from .mappings import client_table, metadata
from .repositories import SqlAlchemyClientRepository
from .unit_of_work import (
    SqlAlchemyClientUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyClientRepository",
    "SqlAlchemyClientUnitOfWork",
    "StartupError",
    "client_table",
    "configured_engine",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
]
