"""
Custom exceptions for the PDF processor.

This module defines all custom exceptions used throughout the library.
Text extraction and recipient parsing never raise for bad content; every
error below concerns opening, unlocking or splitting the source document.
"""


class PDFProcessorError(Exception):
    """Base exception for all PDF processor errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF processing error occurred."


class InvalidDocumentError(PDFProcessorError):
    """Raised when the input bytes are not a parseable PDF."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF document."


class PasswordError(PDFProcessorError):
    """Common base for password related failures."""

    @property
    def default_message(self) -> str:
        return "The PDF could not be opened with the supplied credentials."


class PasswordRequiredError(PasswordError):
    """Raised when the PDF is encrypted and no password was supplied."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted. Supply a password to process this file."


class WrongPasswordError(PasswordError):
    """Raised when a supplied password is rejected by the document."""

    @property
    def default_message(self) -> str:
        return "The supplied password is incorrect."


class UnsupportedDecryptionError(PDFProcessorError):
    """Raised when no decryption strategy is usable in this environment."""

    @property
    def default_message(self) -> str:
        return (
            "Password-protected PDFs cannot be split: decrypted bytes are not "
            "available and page rendering is disabled in this environment."
        )


class CapabilityUnavailable(PDFProcessorError):
    """Raised by a backend capability that cannot serve the current request."""

    @property
    def default_message(self) -> str:
        return "The requested PDF capability is not available."


class FileTooLargeError(PDFProcessorError):
    """Raised when an input file exceeds the configured size limit."""

    @property
    def default_message(self) -> str:
        return "PDF file is too large."
