"""Utility helpers for the PDF processor."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Union

from .exceptions import FileTooLargeError, InvalidDocumentError

PathLike = Union[str, os.PathLike]


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        end = datetime.now(tz=timezone.utc)
        elapsed = (end - start).total_seconds()
        logger.info("%s completed in %.2fs", message, elapsed)


def read_pdf_bytes(path: PathLike, max_size: int) -> bytes:
    """Read a PDF from disk, enforcing ``max_size`` bytes."""

    pdf_path = Path(path)
    if not pdf_path.is_file():
        raise InvalidDocumentError(f"PDF file not found: {pdf_path}")

    size = pdf_path.stat().st_size
    if size > max_size:
        raise FileTooLargeError(
            f"File too large: {format_file_size(size)}. "
            f"Maximum allowed is {format_file_size(max_size)}."
        )

    try:
        return pdf_path.read_bytes()
    except OSError as exc:
        raise InvalidDocumentError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
