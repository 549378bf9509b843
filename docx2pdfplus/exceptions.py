"""Custom exceptions for docx2pdfplus."""
from __future__ import annotations


class Docx2PdfPlusError(RuntimeError):
    """Base class for all docx2pdfplus exceptions."""


class InvalidReturnTypeError(Docx2PdfPlusError, ValueError):
    """Raised when an unsupported output representation is requested."""

    def __init__(self, return_type: object) -> None:
        super().__init__(f"Invalid returnType specified: {return_type}")
        self.return_type = return_type


class ExtractionError(Docx2PdfPlusError):
    """Raised when a DOCX document cannot be converted to HTML."""


class RenderError(Docx2PdfPlusError):
    """Raised when the headless browser fails to produce a PDF."""


class ConversionError(Docx2PdfPlusError):
    """Raised when a conversion error occurs."""
