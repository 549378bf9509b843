from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Callable

# Ensure the project root is importable when tests are executed from the
# package's ``tests`` directory.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from docx import Document
from pypdf import PdfWriter


@pytest.fixture()
def docx_factory() -> Callable[..., bytes]:
    def _create(*paragraphs: str, heading: str | None = None) -> bytes:
        document = Document()
        if heading is not None:
            document.add_heading(heading, level=1)
        for text in paragraphs:
            document.add_paragraph(text)
        stream = io.BytesIO()
        document.save(stream)
        return stream.getvalue()

    return _create


@pytest.fixture()
def sample_docx(docx_factory) -> bytes:
    return docx_factory("Hello from docx2pdfplus.", heading="Sample Report")


@pytest.fixture()
def pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=595, height=842)
    stream = io.BytesIO()
    writer.write(stream)
    return stream.getvalue()


@pytest.fixture()
def fake_render(pdf_bytes: bytes) -> Callable[..., Path]:
    """Stand-in for ``render_pdf`` that writes a valid one-page PDF."""

    def _render(html_path, output_path, page_config, preserve_headers=True) -> Path:
        destination = Path(output_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(pdf_bytes)
        return destination

    return _render
