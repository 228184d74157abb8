"""Capability protocols for PDF operations.

The pipeline needs two different things from its PDF libraries when a
document is password protected: genuinely decrypted document bytes, or the
ability to render pages. Which of them works depends on the installed
libraries, so each is modelled as its own capability and probed at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..types import PageProgressCallback


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers."""

    num_pages: int

    def get_page(self, index: int) -> object:
        raise NotImplementedError

    def copy_metadata(self, writer: object, *, title_suffix: str = "") -> None:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining backend operations for reading and writing PDFs."""

    def load(
        self,
        data: bytes,
        password: Optional[str] = None,
        *,
        ignore_encryption: bool = False,
    ) -> BackendDocument:
        """Parse ``data`` and return a backend document wrapper."""

    def new_writer(self) -> object:
        """Return a backend writer instance."""

    def serialize(self, writer: object) -> bytes:
        """Serialize a writer to PDF bytes."""

    def extract_text(self, data: bytes, password: Optional[str] = None) -> str:
        """Return the flattened text of every page in ``data``."""


class DecryptedBytesCapability(Protocol):
    """Produces decrypted full-document bytes for a protected PDF."""

    name: str

    def is_available(self) -> bool:
        """Return ``True`` when this capability may be attempted at all."""

    def needs_password(self, data: bytes) -> bool:
        """Return ``True`` when the empty password does not open ``data``."""

    def page_count(self, data: bytes, password: Optional[str] = None) -> int:
        """Return the number of pages after unlocking with ``password``."""

    def decrypt(self, data: bytes, password: str) -> bytes:
        """Return ``data`` re-serialized without encryption."""


class RasterCapability(Protocol):
    """Renders each page of a protected PDF into a fresh image-only PDF."""

    name: str

    def is_available(self) -> bool:
        """Return ``True`` when pages can be rendered in this environment."""

    def needs_password(self, data: bytes) -> bool:
        """Return ``True`` when the empty password does not open ``data``."""

    def page_count(self, data: bytes, password: Optional[str] = None) -> int:
        """Return the number of pages after unlocking with ``password``."""

    def rasterize(
        self,
        data: bytes,
        password: str,
        on_progress: Optional[PageProgressCallback] = None,
    ) -> List[bytes]:
        """Return one single-page PDF per rendered page, in page order."""
