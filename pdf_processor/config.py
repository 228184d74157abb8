"""Processor configuration.

A :class:`ProcessorConfig` is passed explicitly to the gate, splitter,
extractor and orchestrator. Callers that want a single shared default may
register one with :func:`set_default_config` before the first call to
:func:`get_default_config`; after that the default is frozen.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

MAX_FILENAME_LENGTH = 120
RENDER_SCALE = 2.0
MAX_PDF_FILE_SIZE_MB = 50
MAX_PDF_FILE_SIZE_BYTES = MAX_PDF_FILE_SIZE_MB * 1024 * 1024


@dataclass(frozen=True)
class ProcessorConfig:
    """Settings for one processing pipeline.

    Attributes:
        render_scale: Raster scale factor used when pages must be rendered
        max_filename_length: Maximum length of a filename base before ``.pdf``
        allow_decrypted_bytes: Whether the decrypted-bytes strategy may be used
        allow_raster_fallback: Whether pages may be rendered as a last resort
        max_file_size_bytes: Upper bound for input files read from disk
        zip_name: Default archive name used by the CLI
    """

    render_scale: float = RENDER_SCALE
    max_filename_length: int = MAX_FILENAME_LENGTH
    allow_decrypted_bytes: bool = True
    allow_raster_fallback: bool = True
    max_file_size_bytes: int = MAX_PDF_FILE_SIZE_BYTES
    zip_name: str = "rechnungen.zip"

    def __post_init__(self) -> None:
        if self.render_scale <= 0:
            raise ValueError(f"render_scale must be > 0, got {self.render_scale}")
        if self.max_filename_length < 1:
            raise ValueError(
                f"max_filename_length must be >= 1, got {self.max_filename_length}"
            )


_lock = threading.Lock()
_default: Optional[ProcessorConfig] = None
_default_read = False


def set_default_config(config: ProcessorConfig) -> None:
    """Register the process-wide default. Must happen before first use."""

    global _default
    with _lock:
        if _default_read:
            raise RuntimeError("Default configuration is already in use and cannot be replaced")
        _default = config


def get_default_config() -> ProcessorConfig:
    """Return the process-wide default, freezing it on first read."""

    global _default, _default_read
    with _lock:
        if _default is None:
            _default = ProcessorConfig()
        _default_read = True
        return _default


def resolve_config(config: Optional[ProcessorConfig]) -> ProcessorConfig:
    return config if config is not None else get_default_config()


__all__ = [
    "MAX_FILENAME_LENGTH",
    "MAX_PDF_FILE_SIZE_BYTES",
    "MAX_PDF_FILE_SIZE_MB",
    "RENDER_SCALE",
    "ProcessorConfig",
    "get_default_config",
    "resolve_config",
    "set_default_config",
]
