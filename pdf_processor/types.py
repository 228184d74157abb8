"""
Type definitions and dataclasses for the PDF processor.

This module defines data structures used throughout the library.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

SPLITTING = "splitting"
PROCESSING = "processing"


@dataclass(frozen=True)
class Recipient:
    """
    Addressee of a single page, inferred from its text.

    Attributes:
        first_name: First name, empty when unknown
        last_name: Last name, empty when unknown
        locality: Postal code and city as written, empty when unknown
    """
    first_name: str = ""
    last_name: str = ""
    locality: str = ""


@dataclass
class PageOutput:
    """
    One processed page of the source document.

    Attributes:
        buffer: Standalone single-page PDF bytes
        filename: Safe filename derived from the page's recipient
        page_index: Zero-based position of the page in the source document
    """
    buffer: bytes
    filename: str
    page_index: int


@dataclass(frozen=True)
class ProgressEvent:
    """Progress notification emitted while a document is processed."""
    phase: str
    current: int
    total: int

    def __str__(self) -> str:
        return f"{self.phase} {self.current}/{self.total}"


@dataclass
class UnlockResult:
    """
    Outcome of unlocking a password-protected document.

    Exactly one of ``document`` (decrypted full-document bytes) or ``pages``
    (rasterized single-page PDFs) is set.
    """
    document: Optional[bytes] = None
    pages: List[bytes] = field(default_factory=list)
    strategy: str = ""

    @property
    def rasterized(self) -> bool:
        return self.document is None


@dataclass
class DocumentInfo:
    """
    Summary of a source document for the ``info`` command.

    Attributes:
        num_pages: Number of pages, ``None`` when a password is needed but missing
        file_size: Size of the source in bytes
        is_encrypted: Whether the document carries an encryption dictionary
        needs_password: Whether the empty password is rejected
    """
    num_pages: Optional[int]
    file_size: int
    is_encrypted: bool = False
    needs_password: bool = False


PageProgressCallback = Callable[[int, int], None]
ProgressCallback = Callable[[ProgressEvent], None]
