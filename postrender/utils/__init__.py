"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_EXCLUSIONS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_ROOT_FILE,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "DEFAULT_ROOT_FILE",
    "DEFAULT_EXCLUSIONS",
    "DEFAULT_LOG_LEVEL",
]
