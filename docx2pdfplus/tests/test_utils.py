from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from docx2pdfplus.types import ConversionOptions, ConversionRequest, pdf_filename
from docx2pdfplus.utils import scoped_temp_dir, write_buffer


def test_scoped_temp_dir_is_removed_on_success():
    with scoped_temp_dir("doc-convert-") as workdir:
        write_buffer(b"data", workdir / "input.docx")
        assert workdir.name.startswith("doc-convert-")
        assert (workdir / "input.docx").read_bytes() == b"data"

    assert not workdir.exists()


def test_scoped_temp_dir_is_removed_on_failure():
    with pytest.raises(RuntimeError):
        with scoped_temp_dir("doc-convert-") as workdir:
            raise RuntimeError("boom")

    assert not workdir.exists()


def test_scoped_temp_dir_cleanup_failure_is_only_logged(caplog):
    caplog.set_level(logging.WARNING)
    with patch("docx2pdfplus.utils.shutil.rmtree", side_effect=PermissionError("busy")):
        with scoped_temp_dir("doc-convert-") as workdir:
            pass

    assert "Failed to clean up temporary files" in caplog.text
    workdir.rmdir()


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("report.docx", "report.pdf"),
        ("REPORT.DOCX", "REPORT.pdf"),
        ("archive.docx.docx", "archive.docx.pdf"),
        ("notes", "notes.pdf"),
        ("nested/dir/report.docx", "report.pdf"),
    ],
)
def test_pdf_filename(filename: str, expected: str):
    assert pdf_filename(filename) == expected


def test_conversion_request_output_path(tmp_path: Path):
    request = ConversionRequest(
        buffer=b"",
        filename="report.docx",
        options=ConversionOptions(return_type="file", output_dir=tmp_path),
    )

    assert request.output_path == tmp_path.resolve() / "report.pdf"
