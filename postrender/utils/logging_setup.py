from __future__ import annotations

import logging

from postrender.utils.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def resolve_level(name: str | None) -> int:
    """Map a level name ("debug", "WARNING", ...) to a logging constant, INFO if unknown."""
    level = logging.getLevelName((name or DEFAULT_LOG_LEVEL).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, force=True)
