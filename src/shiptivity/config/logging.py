"""Shared logging helpers for Shiptivity."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "SHIPTIVITY_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``SHIPTIVITY_LOG_LEVEL``, or ``default`` when unset."""

    raw = os.getenv(LOG_LEVEL_ENV_VAR)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {raw!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``SHIPTIVITY_LOG_LEVEL`` (INFO when unset) and the format is terse
    enough for CLI output. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=resolve_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
