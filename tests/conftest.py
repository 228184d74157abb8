from __future__ import annotations

import io
from typing import Callable, List, Optional, Sequence

import fitz  # PyMuPDF
import pytest
from pypdf import PdfReader, PdfWriter

import pdf_processor.config as config_module

PASSWORD = "kanbanery"


def blank_pdf_bytes(num_pages: int, title: Optional[str] = None) -> bytes:
    writer = PdfWriter()
    for _ in range(num_pages):
        writer.add_blank_page(width=200, height=200)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def text_pdf_bytes(pages: Sequence[Sequence[str]]) -> bytes:
    """Build a PDF with one page per entry, each line drawn as its own text run."""

    with fitz.open() as doc:
        for lines in pages:
            page = doc.new_page(width=595, height=842)
            for row, line in enumerate(lines):
                page.insert_text((50, 72 + row * 20), line, fontsize=12)
        return doc.tobytes()


def encrypt_pdf_bytes(data: bytes, user_password: str, owner_password: Optional[str] = None) -> bytes:
    reader = PdfReader(io.BytesIO(data))
    writer = PdfWriter(clone_from=reader)
    writer.encrypt(user_password=user_password, owner_password=owner_password or user_password or "owner")
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def page_count_of(data: bytes) -> int:
    return len(PdfReader(io.BytesIO(data)).pages)


@pytest.fixture()
def blank_pdf() -> Callable[[int], bytes]:
    return blank_pdf_bytes


@pytest.fixture()
def text_pdf() -> Callable[[Sequence[Sequence[str]]], bytes]:
    return text_pdf_bytes


@pytest.fixture()
def golden_pdf() -> bytes:
    return text_pdf_bytes(
        [
            ["Rechnung"],
            ["Name: Max Mustermann", "12345 Berlin"],
        ]
    )


@pytest.fixture()
def encrypted_pdf(golden_pdf: bytes) -> bytes:
    return encrypt_pdf_bytes(golden_pdf, PASSWORD)


@pytest.fixture()
def owner_only_pdf() -> bytes:
    return encrypt_pdf_bytes(blank_pdf_bytes(2), "", owner_password="owner-secret")


@pytest.fixture()
def corrupted_pdf() -> bytes:
    return b"this is definitely not a pdf document"


@pytest.fixture()
def fresh_default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "_default", None)
    monkeypatch.setattr(config_module, "_default_read", False)


@pytest.fixture()
def progress_log() -> List[tuple]:
    return []
