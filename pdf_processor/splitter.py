"""PDF splitting built around a pluggable :class:`PDFBackend`."""

from __future__ import annotations

import logging
from typing import List, Optional

from .backends import PypdfBackend
from .backends.base import BackendDocument, PDFBackend
from .exceptions import PDFProcessorError
from .types import PageProgressCallback
from .utils import time_block

LOGGER = logging.getLogger(__name__)


class PageSplitter:
    """Split whole-document bytes into standalone single-page PDFs."""

    def __init__(
        self,
        *,
        backend: Optional[PDFBackend] = None,
    ) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()

    def load(
        self,
        data: bytes,
        password: Optional[str] = None,
        *,
        ignore_encryption: bool = False,
    ) -> BackendDocument:
        return self.backend.load(data, password=password, ignore_encryption=ignore_encryption)

    def page_count(
        self,
        data: bytes,
        password: Optional[str] = None,
        *,
        ignore_encryption: bool = False,
    ) -> int:
        """Return the number of pages :meth:`split` would produce."""

        return self.load(data, password, ignore_encryption=ignore_encryption).num_pages

    def split(
        self,
        data: bytes,
        on_progress: Optional[PageProgressCallback] = None,
        *,
        password: Optional[str] = None,
        ignore_encryption: bool = False,
    ) -> List[bytes]:
        """Return one PDF per page of ``data``, in source order.

        ``on_progress(current, total)`` is called after each page has been
        serialized. ``ignore_encryption`` accepts documents that still carry
        an encryption dictionary but open with the empty password.
        """

        document = self.load(data, password, ignore_encryption=ignore_encryption)
        total = document.num_pages
        pages: List[bytes] = []

        with time_block(LOGGER, f"Splitting {total} pages"):
            for index in range(total):
                writer = self.backend.new_writer()
                writer.add_page(document.get_page(index))
                document.copy_metadata(writer, title_suffix=f" - Seite {index + 1}")
                pages.append(self._serialize(writer, index))

                if on_progress:
                    on_progress(index + 1, total)

        return pages

    def _serialize(self, writer: object, index: int) -> bytes:
        try:
            return self.backend.serialize(writer)
        except PDFProcessorError:
            raise
        except Exception as exc:  # pragma: no cover
            raise PDFProcessorError(
                f"Unexpected error writing page {index + 1}. Error: {exc}"
            ) from exc


__all__ = ["PageSplitter"]
