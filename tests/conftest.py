from __future__ import annotations

from pathlib import Path

import pytest

from postrender.services.file_service import FileService
from postrender.services.line_excluder import LineExcluder


# --- Keep the real user config dir out of every test ---
@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path: Path) -> Path:
    user_dir = tmp_path / "usercfg"
    monkeypatch.setattr(
        "postrender.services.config.ini_config_service.user_config_dir",
        lambda appname: str(user_dir),
        raising=True,
    )
    return user_dir


# --- Other common fixtures ---


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def excluder(file_service: FileService) -> LineExcluder:
    return LineExcluder(file_service)


@pytest.fixture()
def book_file(tmp_path: Path) -> Path:
    p = tmp_path / "_book" / "book-asciidoc" / "R-Packages--2e-.adoc"
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(b"intro\n[appendix]\ninclude::R-CMD-check.adoc[]\nbody\n")
    return p
