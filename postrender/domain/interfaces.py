from __future__ import annotations
from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Read/write whole text files without newline translation."""

    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Read-only sectioned key/value configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, section: str, key: str, default: list[str] | None = None) -> list[str] | None: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    """Config plus the typed settings the post-render run needs."""

    def get_version(self) -> str: ...
    def root_file(self) -> Path: ...
    def exclusions(self) -> list[str]: ...
    def log_level(self) -> str: ...
