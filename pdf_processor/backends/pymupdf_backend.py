"""PyMuPDF backend: renders protected pages into image-only PDFs."""

from __future__ import annotations

import logging
from typing import List, Optional

import fitz  # PyMuPDF

from ..config import RENDER_SCALE
from ..exceptions import (
    InvalidDocumentError,
    PasswordRequiredError,
    WrongPasswordError,
)
from ..types import PageProgressCallback

LOGGER = logging.getLogger(__name__)


def _open(data: bytes) -> "fitz.Document":
    if not data:
        raise InvalidDocumentError("PDF document is empty.")
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as exc:
        raise InvalidDocumentError(f"Corrupted or invalid PDF document. Error: {exc}") from exc
    # MuPDF may repair garbage input into an empty document
    if not doc.needs_pass and doc.page_count < 1:
        doc.close()
        raise InvalidDocumentError("PDF has no pages.")
    return doc


def _count_pages(doc: "fitz.Document") -> int:
    if doc.page_count < 1:
        raise InvalidDocumentError("PDF has no pages.")
    return doc.page_count


def _authenticate(doc: "fitz.Document", password: Optional[str]) -> None:
    if not doc.needs_pass:
        return
    if not password:
        raise PasswordRequiredError()
    if not doc.authenticate(password):
        raise WrongPasswordError()


class PyMuPDFRasterizer:
    """Raster capability: draw each page and embed the PNG in a new PDF.

    The output keeps the page's visual appearance but loses its text layer,
    so recipients cannot be parsed from rasterized pages.
    """

    name = "pymupdf-raster"

    def __init__(self, scale: float = RENDER_SCALE, enabled: bool = True) -> None:
        self.scale = scale
        self.enabled = enabled

    def is_available(self) -> bool:
        return self.enabled and hasattr(fitz.Page, "get_pixmap")

    def needs_password(self, data: bytes) -> bool:
        with _open(data) as doc:
            return bool(doc.needs_pass)

    def page_count(self, data: bytes, password: Optional[str] = None) -> int:
        with _open(data) as doc:
            _authenticate(doc, password)
            return _count_pages(doc)

    def rasterize(
        self,
        data: bytes,
        password: str,
        on_progress: Optional[PageProgressCallback] = None,
    ) -> List[bytes]:
        result: List[bytes] = []
        matrix = fitz.Matrix(self.scale, self.scale)

        with _open(data) as doc:
            _authenticate(doc, password)
            total = _count_pages(doc)
            for index in range(total):
                page = doc.load_page(index)
                pixmap = page.get_pixmap(matrix=matrix)
                png_bytes = pixmap.tobytes("png")

                with fitz.open() as single:
                    width = pixmap.width / self.scale
                    height = pixmap.height / self.scale
                    target = single.new_page(width=width, height=height)
                    target.insert_image(target.rect, stream=png_bytes)
                    result.append(single.tobytes(garbage=3, deflate=True))

                LOGGER.debug("Rendered page %d/%d at scale %.1f", index + 1, total, self.scale)
                if on_progress:
                    on_progress(index + 1, total)

        return result


__all__ = ["PyMuPDFRasterizer"]
