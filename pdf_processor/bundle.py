"""Packaging of processed pages: unique names and ZIP archives."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import Iterable, List, Set, Tuple

from .types import PageOutput
from .utils import PathLike

LOGGER = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


class UniqueNameRegistry:
    """Hand out filenames that are unique within one batch.

    A repeated ``name.pdf`` becomes ``name_1.pdf``, ``name_2.pdf`` and so on,
    always counting from the original base name.
    """

    def __init__(self) -> None:
        self._used: Set[str] = set()

    def claim(self, filename: str) -> str:
        unique = filename
        counter = 1
        while unique in self._used:
            unique = f"{_strip_pdf_suffix(filename)}_{counter}{PDF_SUFFIX}"
            counter += 1
        self._used.add(unique)
        return unique


def _strip_pdf_suffix(filename: str) -> str:
    if filename.lower().endswith(PDF_SUFFIX):
        return filename[: -len(PDF_SUFFIX)]
    return filename


def dedupe_filenames(filenames: Iterable[str]) -> List[str]:
    registry = UniqueNameRegistry()
    return [registry.claim(name) for name in filenames]


def unique_entries(pages: Iterable[PageOutput]) -> List[Tuple[str, bytes]]:
    """Return ``(unique_name, buffer)`` pairs in page order."""

    registry = UniqueNameRegistry()
    return [(registry.claim(page.filename), page.buffer) for page in pages]


def bundle_pages(pages: Iterable[PageOutput]) -> bytes:
    """Pack ``pages`` into an in-memory ZIP archive."""

    buffer = io.BytesIO()
    count = 0
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, data in unique_entries(pages):
            archive.writestr(name, data)
            count += 1
    LOGGER.info("Bundled %d pages into %d byte archive", count, buffer.tell())
    return buffer.getvalue()


def write_zip(pages: Iterable[PageOutput], destination: PathLike) -> Path:
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(bundle_pages(pages))
    return path


def write_pages(pages: Iterable[PageOutput], directory: PathLike) -> List[Path]:
    """Write each page into ``directory`` under its unique name."""

    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)

    created: List[Path] = []
    for name, data in unique_entries(pages):
        target = output_dir / name
        target.write_bytes(data)
        created.append(target)
    return created


__all__ = [
    "UniqueNameRegistry",
    "bundle_pages",
    "dedupe_filenames",
    "unique_entries",
    "write_pages",
    "write_zip",
]
