"""pypdf backend implementation for the PDF processor."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pypdf import PdfReader, PdfWriter
from pypdf.errors import DependencyError, FileNotDecryptedError, PdfReadError

from ..exceptions import (
    CapabilityUnavailable,
    InvalidDocumentError,
    PasswordRequiredError,
    WrongPasswordError,
)
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger(__name__)

NOT_DECRYPTED = 0
PRODUCER = "pdf-processor"


def open_reader(data: bytes) -> PdfReader:
    """Parse ``data`` without unlocking it."""

    if not data:
        raise InvalidDocumentError("PDF document is empty.")
    try:
        return PdfReader(io.BytesIO(data))
    except DependencyError:
        raise
    except PdfReadError as exc:
        raise InvalidDocumentError(f"Corrupted or invalid PDF document. Error: {exc}") from exc
    except Exception as exc:
        raise InvalidDocumentError(f"Unexpected error reading PDF. Error: {exc}") from exc


def unlock_reader(reader: PdfReader, password: Optional[str]) -> None:
    """Decrypt ``reader`` in place, mapping failures to password errors.

    Documents that open with the empty password (owner-password only) are
    accepted whatever ``password`` says.
    """

    if not reader.is_encrypted:
        return
    if reader.decrypt("") != NOT_DECRYPTED:
        return
    if not password:
        raise PasswordRequiredError()
    if reader.decrypt(password) == NOT_DECRYPTED:
        raise WrongPasswordError()


def count_pages(reader: PdfReader) -> int:
    """Return the page count, rejecting documents without pages."""

    try:
        num_pages = len(reader.pages)
    except (DependencyError, FileNotDecryptedError):
        raise
    except PdfReadError as exc:
        raise InvalidDocumentError(f"Unable to read page tree. Error: {exc}") from exc
    except Exception as exc:
        raise InvalidDocumentError(f"Unexpected error reading page tree. Error: {exc}") from exc

    if num_pages == 0:
        raise InvalidDocumentError("PDF has no pages.")
    return num_pages


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader = field(default=None, repr=False)  # type: ignore[assignment]

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]

    def copy_metadata(self, writer: PdfWriter, *, title_suffix: str = "") -> None:
        metadata_dict = {}
        try:
            metadata = self.reader.metadata
        except Exception:  # pragma: no cover - damaged info dictionaries
            metadata = None

        if metadata and metadata.title:
            metadata_dict["/Title"] = f"{metadata.title}{title_suffix}"
        if metadata and metadata.author:
            metadata_dict["/Author"] = metadata.author
        if metadata and metadata.subject:
            metadata_dict["/Subject"] = metadata.subject
        metadata_dict["/Producer"] = PRODUCER

        writer.add_metadata(metadata_dict)


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(
        self,
        data: bytes,
        password: Optional[str] = None,
        *,
        ignore_encryption: bool = False,
    ) -> PypdfDocument:
        reader = open_reader(data)

        if reader.is_encrypted:
            if not (ignore_encryption or password):
                raise PasswordRequiredError()
            unlock_reader(reader, password)

        return PypdfDocument(num_pages=count_pages(reader), reader=reader)

    def new_writer(self) -> PdfWriter:
        return PdfWriter()

    def serialize(self, writer: PdfWriter) -> bytes:
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

    def extract_text(self, data: bytes, password: Optional[str] = None) -> str:
        reader = open_reader(data)
        unlock_reader(reader, password)

        parts: List[str] = []
        for page in reader.pages:
            runs: List[str] = []

            def visitor(text, cm, tm, font_dict, font_size, runs=runs):
                run = text.replace("\r", " ").replace("\n", " ").strip()
                if run:
                    runs.append(run)

            page.extract_text(visitor_text=visitor)
            parts.append(" ".join(runs))

        return "\n".join(parts)


class PypdfDecryptor:
    """Decrypted-bytes capability backed by pypdf.

    pypdf needs an optional crypto dependency for AES documents; when it is
    missing the capability reports itself unavailable for that document so
    the caller can fall back to rendering.
    """

    name = "pypdf-decrypt"

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def is_available(self) -> bool:
        return self.enabled

    def needs_password(self, data: bytes) -> bool:
        reader = self._open(data)
        if not reader.is_encrypted:
            count_pages(reader)
            return False
        return self._call(reader.decrypt, "") == NOT_DECRYPTED

    def page_count(self, data: bytes, password: Optional[str] = None) -> int:
        reader = self._open(data)
        self._call(unlock_reader, reader, password)
        return self._call(count_pages, reader)

    def decrypt(self, data: bytes, password: str) -> bytes:
        reader = self._open(data)
        self._call(unlock_reader, reader, password)

        def _clone() -> bytes:
            writer = PdfWriter(clone_from=reader)
            buffer = io.BytesIO()
            writer.write(buffer)
            return buffer.getvalue()

        decrypted = self._call(_clone)
        LOGGER.debug("Decrypted %d bytes into %d bytes", len(data), len(decrypted))
        return decrypted

    def _open(self, data: bytes) -> PdfReader:
        return self._call(open_reader, data)

    @staticmethod
    def _call(func, *args):
        try:
            return func(*args)
        except DependencyError as exc:
            raise CapabilityUnavailable(
                f"pypdf cannot decrypt this document here: {exc}"
            ) from exc


__all__ = [
    "PypdfBackend",
    "PypdfDecryptor",
    "PypdfDocument",
    "count_pages",
    "open_reader",
    "unlock_reader",
]
