from __future__ import annotations

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from docx2pdfplus.metadata import extract_document_metadata, suggest_page_format, utf16_length
from docx2pdfplus.types import Diagnostic, DocumentMetadataGuess


@pytest.mark.parametrize(
    ("length", "expected"),
    [
        (0, "A4"),
        (500, "A4"),
        (501, "Letter"),
        (3000, "Letter"),
        (3001, "A4"),
        (50000, "A4"),
    ],
)
def test_suggest_page_format_boundaries(length: int, expected: str):
    assert suggest_page_format(length) == expected


def test_extract_metadata_from_letter_sized_document(docx_factory):
    buffer = docx_factory("x" * 1000)

    metadata = extract_document_metadata(buffer)

    assert metadata.suggested_format == "Letter"
    assert 1000 <= metadata.content_length <= 1010
    assert metadata.has_headers is False
    assert metadata.has_footers is False


def test_extract_metadata_from_short_and_long_documents(docx_factory):
    short = extract_document_metadata(docx_factory("Short note."))
    long = extract_document_metadata(docx_factory("y" * 4000))

    assert short.suggested_format == "A4"
    assert short.content_length > 0
    assert long.suggested_format == "A4"
    assert long.content_length >= 4000


def test_extract_metadata_never_raises_on_garbage(caplog):
    metadata = extract_document_metadata(b"this is not a docx archive")

    assert metadata == DocumentMetadataGuess()
    assert metadata.suggested_format == "A4"
    assert metadata.content_length == 0
    assert metadata.messages == ()
    assert "Failed to extract document metadata" in caplog.text


def test_extract_metadata_flags_headers_and_footers_from_messages():
    messages = (
        Diagnostic("warning", "Unrecognised paragraph style: header (Style ID: Header)"),
        Diagnostic("warning", "Unrecognised paragraph style: Footer (Style ID: Footer)"),
    )
    with patch("docx2pdfplus.metadata.extract_raw_text", return_value=("text", messages)):
        metadata = extract_document_metadata(b"docx")

    assert metadata.has_headers is True
    # Matching is case-sensitive.
    assert metadata.has_footers is False
    assert metadata.messages == messages
    assert metadata.content_length == 4


def test_extract_metadata_removes_its_working_directory(tmp_path: Path, monkeypatch):
    created: list[Path] = []
    real_mkdtemp = tempfile.mkdtemp

    def _mkdtemp(*args, **kwargs):
        kwargs["dir"] = str(tmp_path)
        path = real_mkdtemp(*args, **kwargs)
        created.append(Path(path))
        return path

    monkeypatch.setattr(tempfile, "mkdtemp", _mkdtemp)

    extract_document_metadata(b"garbage")

    assert len(created) == 1
    assert created[0].name.startswith("doc-meta-")
    assert not created[0].exists()


def test_content_length_counts_utf16_code_units():
    assert utf16_length("abc") == 3
    assert utf16_length("\U0001F600") == 2
    assert utf16_length("é") == 1


def test_astral_characters_push_documents_over_the_letter_threshold():
    text = "\U0001F600" * 300
    with patch("docx2pdfplus.metadata.extract_raw_text", return_value=(text, ())):
        metadata = extract_document_metadata(b"docx")

    assert metadata.content_length == 600
    assert metadata.suggested_format == "Letter"
