"""Password handling for protected source documents.

:class:`PasswordGate` answers three questions about a document: does it need
a password, how many pages does it have, and what should the splitter work
on once it is unlocked. Unlocking prefers genuinely decrypted bytes and falls
back to rendering every page when this environment cannot produce them.
"""

from __future__ import annotations

import logging
from typing import Optional

from pypdf.errors import DependencyError

from .backends import PyMuPDFRasterizer, PypdfDecryptor
from .backends.base import DecryptedBytesCapability, RasterCapability
from .backends.pypdf_backend import open_reader
from .config import ProcessorConfig, resolve_config
from .exceptions import (
    CapabilityUnavailable,
    PasswordRequiredError,
    UnsupportedDecryptionError,
)
from .types import PageProgressCallback, UnlockResult

LOGGER = logging.getLogger(__name__)

PLAIN = "plain"


class PasswordGate:
    """Detect, verify and resolve document encryption."""

    def __init__(
        self,
        *,
        decryptor: Optional[DecryptedBytesCapability] = None,
        rasterizer: Optional[RasterCapability] = None,
        config: Optional[ProcessorConfig] = None,
    ) -> None:
        config = resolve_config(config)
        self.decryptor = decryptor or PypdfDecryptor(enabled=config.allow_decrypted_bytes)
        self.rasterizer = rasterizer or PyMuPDFRasterizer(
            scale=config.render_scale,
            enabled=config.allow_raster_fallback,
        )

    def is_encrypted(self, data: bytes) -> bool:
        try:
            reader = open_reader(data)
        except DependencyError:
            # pypdf only needs its crypto extra for encrypted documents
            return True
        return bool(reader.is_encrypted)

    def needs_password(self, data: bytes) -> bool:
        """Return ``True`` when ``data`` cannot be opened without a password.

        Wrong passwords and structural corruption are not reported here:
        unparseable input raises :class:`InvalidDocumentError`.
        """

        return self._probe("needs_password", data)

    def page_count(self, data: bytes, password: Optional[str] = None) -> int:
        return self._probe("page_count", data, password or None)

    def resolve(
        self,
        data: bytes,
        password: Optional[str] = None,
        on_progress: Optional[PageProgressCallback] = None,
    ) -> UnlockResult:
        """Return what the splitter should work on for ``data``.

        Unencrypted documents pass through unchanged. Encrypted documents are
        unlocked with ``password`` (or the empty password when that is
        enough); ``on_progress`` only fires when pages are rendered.
        """

        if not self.is_encrypted(data):
            return UnlockResult(document=data, strategy=PLAIN)

        if self.needs_password(data) and not password:
            raise PasswordRequiredError()

        return self.unlock(data, password or "", on_progress)

    def unlock(
        self,
        data: bytes,
        password: str,
        on_progress: Optional[PageProgressCallback] = None,
    ) -> UnlockResult:
        try:
            document = self.decrypt(data, password)
        except UnsupportedDecryptionError as exc:
            if not self.rasterizer.is_available():
                raise
            LOGGER.warning("%s; rendering pages via %s instead", exc, self.rasterizer.name)
        else:
            LOGGER.info("Unlocked document via %s", self.decryptor.name)
            return UnlockResult(document=document, strategy=self.decryptor.name)

        pages = self.rasterizer.rasterize(data, password, on_progress)
        LOGGER.info("Rendered %d protected pages via %s", len(pages), self.rasterizer.name)
        return UnlockResult(pages=pages, strategy=self.rasterizer.name)

    def decrypt(self, data: bytes, password: str) -> bytes:
        """Return ``data`` without encryption, never rendering pages."""

        if not self.decryptor.is_available():
            raise UnsupportedDecryptionError(
                f"Decrypted bytes are disabled for {self.decryptor.name}"
            )
        try:
            return self.decryptor.decrypt(data, password)
        except CapabilityUnavailable as exc:
            raise UnsupportedDecryptionError(str(exc)) from exc

    def _probe(self, operation: str, *args):
        """Run a read-only query on the first capability able to answer it."""

        last_error: Optional[CapabilityUnavailable] = None
        for capability in (self.decryptor, self.rasterizer):
            try:
                return getattr(capability, operation)(*args)
            except CapabilityUnavailable as exc:
                LOGGER.debug("%s cannot answer %s: %s", capability.name, operation, exc)
                last_error = exc
        raise UnsupportedDecryptionError(str(last_error)) from last_error


__all__ = ["PasswordGate"]
