from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QFile, QIODevice

from postrender.domain.interfaces import IFileService


class FileService(IFileService):
    """
    Whole-file text reads/writes.

    Line endings are passed through untouched in both directions, and writes
    truncate the target in place (no temp file, no rename, no backup).
    """

    def read_text(self, path: Path) -> str:
        with path.open("r", encoding="utf-8", newline="") as fh:
            try:
                return fh.read()
            except UnicodeDecodeError as e:
                raise OSError(f"Cannot decode as UTF-8: {path}") from e

    def write_text(self, path: Path, text: str) -> None:
        data = text.encode("utf-8")
        f = QFile(str(path))
        if not f.open(QIODevice.OpenModeFlag.WriteOnly | QIODevice.OpenModeFlag.Truncate):
            raise OSError(f"Cannot open for write: {path}")
        try:
            written = f.write(data)
        finally:
            f.close()
        if written != len(data):
            raise OSError(f"Short write for: {path} ({written} of {len(data)} bytes)")
