"""Backend abstractions for the PDF processor."""

from .base import BackendDocument, DecryptedBytesCapability, PDFBackend, RasterCapability
from .pymupdf_backend import PyMuPDFRasterizer
from .pypdf_backend import PypdfBackend, PypdfDecryptor

__all__ = [
    "BackendDocument",
    "DecryptedBytesCapability",
    "PDFBackend",
    "PyMuPDFRasterizer",
    "PypdfBackend",
    "PypdfDecryptor",
    "RasterCapability",
]
