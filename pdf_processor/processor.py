"""Page-processing pipeline: unlock, split, read, name."""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import ProcessorConfig, resolve_config
from .password import PasswordGate
from .recipient import build_safe_filename, parse_recipient_from_text
from .splitter import PageSplitter
from .text import TextExtractor
from .types import (
    PROCESSING,
    SPLITTING,
    DocumentInfo,
    PageOutput,
    PageProgressCallback,
    ProgressCallback,
    ProgressEvent,
)
from .utils import time_block

LOGGER = logging.getLogger(__name__)


class PDFProcessor:
    """Turn one multi-page PDF into named single-page PDFs.

    Pages are handled one at a time in source order. Errors while unlocking
    or splitting abort the whole call; text and recipient problems only
    degrade a page's filename to ``Seite_NN.pdf``.
    """

    def __init__(
        self,
        *,
        config: Optional[ProcessorConfig] = None,
        gate: Optional[PasswordGate] = None,
        splitter: Optional[PageSplitter] = None,
        extractor: Optional[TextExtractor] = None,
    ) -> None:
        self.config = resolve_config(config)
        self.gate = gate or PasswordGate(config=self.config)
        self.splitter = splitter or PageSplitter()
        self.extractor = extractor or TextExtractor()

    def page_count(self, data: bytes, password: Optional[str] = None) -> int:
        return self.gate.page_count(data, password)

    def needs_password(self, data: bytes) -> bool:
        return self.gate.needs_password(data)

    def info(self, data: bytes, password: Optional[str] = None) -> DocumentInfo:
        encrypted = self.gate.is_encrypted(data)
        needs_password = encrypted and self.gate.needs_password(data)
        num_pages = None
        if password or not needs_password:
            num_pages = self.gate.page_count(data, password)
        return DocumentInfo(
            num_pages=num_pages,
            file_size=len(data),
            is_encrypted=encrypted,
            needs_password=needs_password,
        )

    def decrypt(self, data: bytes, password: str) -> bytes:
        """Return decrypted document bytes, without falling back to rendering."""

        return self.gate.decrypt(data, password)

    def split(
        self,
        data: bytes,
        password: Optional[str] = None,
        on_progress: Optional[PageProgressCallback] = None,
    ) -> List[bytes]:
        """Return one single-page PDF per page of ``data``."""

        unlocked = self.gate.resolve(data, password, on_progress)
        if unlocked.rasterized:
            return unlocked.pages
        return self.splitter.split(
            unlocked.document,
            on_progress,
            ignore_encryption=True,
        )

    def process(
        self,
        data: bytes,
        password: Optional[str] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[PageOutput]:
        def report(phase: str, current: int, total: int) -> None:
            if on_progress:
                on_progress(ProgressEvent(phase=phase, current=current, total=total))

        pages = self.split(
            data,
            password,
            on_progress=lambda current, total: report(SPLITTING, current, total),
        )
        total = len(pages)
        outputs: List[PageOutput] = []

        with time_block(LOGGER, f"Naming {total} pages"):
            for index, buffer in enumerate(pages):
                report(PROCESSING, index, total)
                text = self.extractor.extract(buffer)
                recipient = parse_recipient_from_text(text)
                filename = build_safe_filename(
                    recipient, index, max_length=self.config.max_filename_length
                )
                LOGGER.debug("Page %d -> %s", index + 1, filename)
                outputs.append(PageOutput(buffer=buffer, filename=filename, page_index=index))

        report(PROCESSING, total, total)
        return outputs


def process_pdf_to_pages(
    data: bytes,
    *,
    password: Optional[str] = None,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[ProcessorConfig] = None,
) -> List[PageOutput]:
    """Split ``data`` into named single-page PDFs, one :class:`PageOutput` per page."""

    return PDFProcessor(config=config).process(data, password=password, on_progress=on_progress)


def split_pdf_by_pages(
    data: bytes,
    *,
    password: Optional[str] = None,
    on_progress: Optional[PageProgressCallback] = None,
    config: Optional[ProcessorConfig] = None,
) -> List[bytes]:
    return PDFProcessor(config=config).split(data, password=password, on_progress=on_progress)


def get_pdf_page_count(
    data: bytes,
    *,
    password: Optional[str] = None,
    config: Optional[ProcessorConfig] = None,
) -> int:
    return PDFProcessor(config=config).page_count(data, password=password)


def check_pdf_needs_password(data: bytes, *, config: Optional[ProcessorConfig] = None) -> bool:
    return PDFProcessor(config=config).needs_password(data)


def get_decrypted_pdf_bytes(
    data: bytes,
    password: str,
    *,
    config: Optional[ProcessorConfig] = None,
) -> bytes:
    """Return ``data`` decrypted with ``password``.

    Raises :class:`UnsupportedDecryptionError` when decrypted bytes cannot be
    produced in this environment.
    """

    return PDFProcessor(config=config).decrypt(data, password)


__all__ = [
    "PDFProcessor",
    "check_pdf_needs_password",
    "get_decrypted_pdf_bytes",
    "get_pdf_page_count",
    "process_pdf_to_pages",
    "split_pdf_by_pages",
]
