"""Utilities for managing Alembic migrations within the SQLAlchemy adapter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext

from shiptivity.config import get_database_uri

MIGRATIONS_PATH: Final[Path] = Path(__file__).resolve().parent

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def _escape(value: str) -> str:
    # Config options go through ConfigParser interpolation
    return value.replace("%", "%%")


def build_config(*, database_uri: str | None = None) -> Config:
    """Return an Alembic Config pointing at the migrations bundled with the package."""

    config = Config()
    config.set_main_option("script_location", _escape(str(MIGRATIONS_PATH)))
    if database_uri is not None:
        config.set_main_option("sqlalchemy.url", _escape(database_uri))
    return config


def upgrade_head(*, engine: Engine | None = None, database_uri: str | None = None) -> None:
    """Upgrade the database schema to the latest revision."""

    if engine is not None:
        config = build_config()
        with engine.begin() as connection:
            config.attributes["connection"] = connection
            command.upgrade(config, "head")
        return
    command.upgrade(build_config(database_uri=database_uri or get_database_uri()), "head")


def current_revision(engine: Engine) -> str | None:
    """Return the revision the database is stamped with, if any."""

    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()
