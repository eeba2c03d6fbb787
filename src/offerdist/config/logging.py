"""Shared logging helpers for the distribution service."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value: str | None = None) -> int:
    """Translate a level name (``LOG_LEVEL`` by default) into a ``logging`` level."""

    name = (value or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``LOG_LEVEL`` (INFO when unset) and a terse format suitable for
    service logs. Pass ``force=True`` to reconfigure during tests or specialised
    entry points.
    """

    logging.basicConfig(
        level=level if level is not None else resolve_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
