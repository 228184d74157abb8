"""Text extraction for single-page buffers."""

from __future__ import annotations

import logging
from typing import Optional

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .exceptions import PasswordError

LOGGER = logging.getLogger(__name__)


class TextExtractor:
    """Flatten the text runs of a page into one string.

    Runs are taken in the order the reader exposes them and joined with a
    single space; no layout information survives. Pages without a text layer
    (scans) and buffers that cannot be parsed yield an empty string.
    """

    def __init__(self, *, backend: Optional[PDFBackend] = None) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()

    def extract(self, data: bytes, password: Optional[str] = None) -> str:
        try:
            return self.backend.extract_text(data, password=password or None)
        except PasswordError:
            raise
        except Exception as exc:
            LOGGER.debug("No text extracted from %d byte buffer: %s", len(data), exc)
            return ""


def extract_text_from_pdf(data: bytes, password: Optional[str] = None) -> str:
    """Return the flattened text of ``data`` using the default backend."""

    return TextExtractor().extract(data, password=password)


__all__ = ["TextExtractor", "extract_text_from_pdf"]
