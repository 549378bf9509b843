"""Heuristic document analysis used to pick print settings."""
from __future__ import annotations

import logging
from typing import Iterable

from .extractor import extract_raw_text
from .types import Diagnostic, DocumentMetadataGuess
from .utils import scoped_temp_dir, write_buffer

LOGGER = logging.getLogger(__name__)

LETTER_MIN_LENGTH = 500
LETTER_MAX_LENGTH = 3000


def suggest_page_format(content_length: int) -> str:
    """Guess a paper format from the amount of plain text.

    Documents longer than 500 and at most 3000 characters get ``Letter``,
    everything else ``A4``. The A4 band on both sides is kept as-is for
    compatibility with earlier releases even though it looks accidental.
    The length is measured in UTF-16 code units, see :func:`utf16_length`.
    """
    if content_length > LETTER_MAX_LENGTH:
        return "A4"
    if content_length > LETTER_MIN_LENGTH:
        return "Letter"
    return "A4"


def utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units; astral characters count twice."""
    return len(text.encode("utf-16-le")) // 2


def _mentions(messages: Iterable[Diagnostic], needle: str) -> bool:
    return any(needle in diagnostic.message for diagnostic in messages)


def extract_document_metadata(buffer: bytes) -> DocumentMetadataGuess:
    """Analyse a DOCX buffer and guess its print settings.

    Never raises: any failure is logged and the default guess is returned.
    """
    try:
        with scoped_temp_dir("doc-meta-") as workdir:
            docx_path = write_buffer(buffer, workdir / "temp.docx")
            text, messages = extract_raw_text(docx_path)
    except Exception:
        LOGGER.exception("Failed to extract document metadata")
        return DocumentMetadataGuess()

    content_length = utf16_length(text)
    guess = DocumentMetadataGuess(
        suggested_format=suggest_page_format(content_length),
        content_length=content_length,
        has_headers=_mentions(messages, "header"),
        has_footers=_mentions(messages, "footer"),
        messages=messages,
    )
    LOGGER.debug("Document metadata guess: %s", guess)
    return guess
