"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import IAppConfig, IConfigService, IFileService
from .models import Document

__all__ = [
    "IFileService",
    "IConfigService",
    "IAppConfig",
    "Document",
]
