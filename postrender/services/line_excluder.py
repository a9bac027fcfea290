from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from postrender.domain.interfaces import IFileService
from postrender.domain.models import Document

logger = logging.getLogger(__name__)


def exclude_lines(text: str, exclusions: Iterable[str]) -> str:
    """
    Remove the first occurrence of ``line + "\\n"`` for each exclusion, in order.

    Literal, case-sensitive and non-repeating: a line listed once is removed at
    most once, and a line not followed by ``"\\n"`` is left alone.
    """
    for line in exclusions:
        text = text.replace(f"{line}\n", "", 1)
    return text


class LineExcluder:
    """Read-modify-write of one file through ``exclude_lines``."""

    def __init__(self, files: IFileService) -> None:
        self._files = files

    def load(self, path: Path) -> Document:
        return Document(path=path, text=self._files.read_text(path))

    def apply(self, doc: Document, exclusions: Iterable[str]) -> int:
        """Strip exclusions from ``doc`` in place, returning how many were removed."""
        removed = 0
        for line in exclusions:
            text = exclude_lines(doc.text, [line])
            if text != doc.text:
                removed += 1
                logger.debug("Removed %r", line)
            else:
                logger.debug("Not found, skipped %r", line)
            doc.text = text
        doc.modified = doc.modified or removed > 0
        return removed

    def exclude(self, path: Path, exclusions: Iterable[str]) -> None:
        exclusions = list(exclusions)
        doc = self.load(path)
        removed = self.apply(doc, exclusions)
        self._files.write_text(doc.path, doc.text)
        if doc.modified:
            logger.info("%s: removed %d of %d excluded line(s)", path, removed, len(exclusions))
        else:
            logger.info("%s: unchanged, none of %d excluded line(s) found", path, len(exclusions))
