"""Top-level package for docx2pdfplus.

This module exposes the public API for converting DOCX documents to PDF by
extracting HTML with mammoth and printing it with a headless Chromium.
"""
from .converter import convert_docx_to_pdf, smart_convert_docx_to_pdf
from .exceptions import (
    ConversionError,
    Docx2PdfPlusError,
    ExtractionError,
    InvalidReturnTypeError,
    RenderError,
)
from .metadata import extract_document_metadata
from .types import (
    ConversionOptions,
    ConversionResult,
    DocumentMetadataGuess,
    FormatOptions,
    Margins,
    PageConfig,
)

__all__ = [
    "convert_docx_to_pdf",
    "smart_convert_docx_to_pdf",
    "extract_document_metadata",
    "ConversionOptions",
    "ConversionResult",
    "DocumentMetadataGuess",
    "FormatOptions",
    "Margins",
    "PageConfig",
    "Docx2PdfPlusError",
    "InvalidReturnTypeError",
    "ExtractionError",
    "RenderError",
    "ConversionError",
]

__version__ = "0.1.0"
