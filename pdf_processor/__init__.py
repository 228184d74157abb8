"""
PDF Processor - split multi-page PDFs into one named PDF per recipient page.

Each page of the source document becomes a standalone PDF whose filename is
derived from the recipient found in that page's text (``Nachname_Vorname_Ort``)
or falls back to ``Seite_NN.pdf``. Password-protected documents are unlocked
first; when decrypted bytes cannot be produced the pages are rendered instead.

Quick Start:
    >>> from pdf_processor import process_pdf_to_pages, bundle_pages
    >>> pages = process_pdf_to_pages(open('lohn.pdf', 'rb').read())
    >>> archive = bundle_pages(pages)

Main Classes:
    - PDFProcessor: Pipeline orchestrating the steps below
    - PasswordGate: Encryption probe and unlock strategies
    - PageSplitter: One PDF per page
    - TextExtractor: Flattened text of a page

Data Classes:
    - Recipient, PageOutput, ProgressEvent, DocumentInfo
    - ProcessorConfig: Settings threaded through the pipeline

Exceptions:
    - PDFProcessorError: Base exception
    - InvalidDocumentError: Input is not a parseable PDF
    - PasswordRequiredError / WrongPasswordError: Password problems
    - UnsupportedDecryptionError: No unlock strategy available

For CLI usage, use the 'pdf-processor' command after installation.
"""

from pdf_processor.bundle import UniqueNameRegistry, bundle_pages, dedupe_filenames, write_pages, write_zip
from pdf_processor.config import ProcessorConfig, get_default_config, set_default_config
from pdf_processor.exceptions import (
    CapabilityUnavailable,
    FileTooLargeError,
    InvalidDocumentError,
    PasswordError,
    PasswordRequiredError,
    PDFProcessorError,
    UnsupportedDecryptionError,
    WrongPasswordError,
)
from pdf_processor.password import PasswordGate
from pdf_processor.processor import (
    PDFProcessor,
    check_pdf_needs_password,
    get_decrypted_pdf_bytes,
    get_pdf_page_count,
    process_pdf_to_pages,
    split_pdf_by_pages,
)
from pdf_processor.recipient import build_safe_filename, parse_recipient_from_text
from pdf_processor.splitter import PageSplitter
from pdf_processor.text import TextExtractor, extract_text_from_pdf
from pdf_processor.types import DocumentInfo, PageOutput, ProgressEvent, Recipient

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Pipeline
    "PDFProcessor",
    "PasswordGate",
    "PageSplitter",
    "TextExtractor",
    "process_pdf_to_pages",
    "split_pdf_by_pages",
    "get_pdf_page_count",
    "check_pdf_needs_password",
    "get_decrypted_pdf_bytes",
    "extract_text_from_pdf",
    "parse_recipient_from_text",
    "build_safe_filename",
    # Packaging
    "UniqueNameRegistry",
    "bundle_pages",
    "dedupe_filenames",
    "write_pages",
    "write_zip",
    # Data types
    "DocumentInfo",
    "PageOutput",
    "ProgressEvent",
    "Recipient",
    "ProcessorConfig",
    "get_default_config",
    "set_default_config",
    # Exceptions
    "PDFProcessorError",
    "InvalidDocumentError",
    "PasswordError",
    "PasswordRequiredError",
    "WrongPasswordError",
    "UnsupportedDecryptionError",
    "CapabilityUnavailable",
    "FileTooLargeError",
    # Version info
    "__version__",
]
