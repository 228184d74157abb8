"""
Test cases for the page splitter and its pypdf backend.
"""

import io
import unittest

from pypdf import PdfReader

from pdf_processor.exceptions import InvalidDocumentError, PasswordRequiredError, WrongPasswordError
from pdf_processor.splitter import PageSplitter

from conftest import blank_pdf_bytes, encrypt_pdf_bytes, text_pdf_bytes


class TestPageSplitter(unittest.TestCase):
    """Test cases for PageSplitter."""

    @classmethod
    def setUpClass(cls):
        """Create a 10 page test document."""
        cls.pdf_bytes = blank_pdf_bytes(10, title="Lohnabrechnung 2024")

    def setUp(self):
        self.splitter = PageSplitter()

    def test_page_count(self):
        self.assertEqual(self.splitter.page_count(self.pdf_bytes), 10)

    def test_split_returns_one_buffer_per_page(self):
        pages = self.splitter.split(self.pdf_bytes)

        self.assertEqual(len(pages), 10)
        for buffer in pages:
            self.assertTrue(buffer.startswith(b"%PDF-"))
            reader = PdfReader(io.BytesIO(buffer))
            self.assertEqual(len(reader.pages), 1)

    def test_split_matches_page_count(self):
        data = blank_pdf_bytes(3)
        self.assertEqual(len(self.splitter.split(data)), self.splitter.page_count(data))

    def test_split_single_page(self):
        pages = self.splitter.split(blank_pdf_bytes(1))
        self.assertEqual(len(pages), 1)
        self.assertGreater(len(pages[0]), 0)

    def test_split_reports_progress(self):
        calls = []
        self.splitter.split(blank_pdf_bytes(2), on_progress=lambda current, total: calls.append((current, total)))
        self.assertEqual(calls, [(1, 2), (2, 2)])

    def test_split_preserves_page_order(self):
        data = text_pdf_bytes([["Seite eins"], ["Seite zwei"], ["Seite drei"]])
        pages = self.splitter.split(data)

        texts = [PdfReader(io.BytesIO(buffer)).pages[0].extract_text() for buffer in pages]
        self.assertIn("eins", texts[0])
        self.assertIn("zwei", texts[1])
        self.assertIn("drei", texts[2])

    def test_split_copies_title_metadata(self):
        pages = self.splitter.split(self.pdf_bytes)
        metadata = PdfReader(io.BytesIO(pages[2])).metadata

        self.assertIsNotNone(metadata)
        self.assertIn("Lohnabrechnung 2024", metadata.title)
        self.assertIn("Seite 3", metadata.title)

    def test_split_rejects_invalid_bytes(self):
        with self.assertRaises(InvalidDocumentError):
            self.splitter.split(b"not a pdf at all, just some text")

    def test_split_rejects_empty_bytes(self):
        with self.assertRaises(InvalidDocumentError):
            self.splitter.split(b"")

    def test_page_count_rejects_invalid_bytes(self):
        with self.assertRaises(InvalidDocumentError):
            self.splitter.page_count(b"garbage")


class TestEncryptedSplitting(unittest.TestCase):
    """Splitting documents that carry an encryption dictionary."""

    def setUp(self):
        self.splitter = PageSplitter()
        self.plain = blank_pdf_bytes(3)

    def test_encrypted_document_requires_password(self):
        data = encrypt_pdf_bytes(self.plain, "secret")
        with self.assertRaises(PasswordRequiredError):
            self.splitter.split(data)

    def test_encrypted_document_with_password(self):
        data = encrypt_pdf_bytes(self.plain, "secret")
        pages = self.splitter.split(data, password="secret")
        self.assertEqual(len(pages), 3)
        for buffer in pages:
            self.assertFalse(PdfReader(io.BytesIO(buffer)).is_encrypted)

    def test_encrypted_document_with_wrong_password(self):
        data = encrypt_pdf_bytes(self.plain, "secret")
        with self.assertRaises(WrongPasswordError):
            self.splitter.split(data, password="wrong")

    def test_owner_only_document_needs_opt_in(self):
        data = encrypt_pdf_bytes(self.plain, "", owner_password="owner")
        with self.assertRaises(PasswordRequiredError):
            self.splitter.split(data)

        pages = self.splitter.split(data, ignore_encryption=True)
        self.assertEqual(len(pages), 3)


if __name__ == '__main__':
    unittest.main()
