"""Validation routines for docx2pdfplus."""
from __future__ import annotations

import logging
from pathlib import Path

from pypdf import PdfReader

from .exceptions import ConversionError, InvalidReturnTypeError
from .types import RETURN_TYPES
from .utils import to_path

LOGGER = logging.getLogger(__name__)


def validate_return_type(return_type: object) -> str:
    """Ensure ``return_type`` names a supported output representation."""
    if not isinstance(return_type, str) or return_type not in RETURN_TYPES:
        raise InvalidReturnTypeError(return_type)
    return return_type


def validate_pdf_output(output_path: str | Path) -> int:
    """Validate that the rendered PDF is readable and return its page count."""
    path = to_path(output_path)
    LOGGER.debug("Validating PDF output %s", path)
    try:
        page_count = len(PdfReader(str(path)).pages)
    except Exception as exc:
        raise ConversionError(f"PDF validation failed: {path}") from exc
    if page_count == 0:
        raise ConversionError(f"Rendered PDF has no pages: {path}")
    return page_count
