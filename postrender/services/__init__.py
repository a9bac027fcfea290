"""Concrete service implementations."""

from .file_service import FileService
from .line_excluder import LineExcluder, exclude_lines

__all__ = ["FileService", "LineExcluder", "exclude_lines"]
