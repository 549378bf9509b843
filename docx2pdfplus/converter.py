"""Conversion engine for docx2pdfplus."""
from __future__ import annotations

import base64
import logging
import shutil
from pathlib import Path
from typing import Optional

from .exceptions import ConversionError
from .extractor import extract_html
from .layout import build_html_document
from .metadata import extract_document_metadata
from .renderer import render_pdf
from .types import (
    ConversionOptions,
    ConversionRequest,
    ConversionResult,
    FormatOptions,
    Margins,
    PageConfig,
)
from .utils import ensure_output_directory, scoped_temp_dir, time_block, write_buffer
from .validators import validate_pdf_output, validate_return_type

LOGGER = logging.getLogger(__name__)


def _package_result(
    request: ConversionRequest, output_path: Path, pdf_bytes: bytes
) -> ConversionResult:
    if request.return_type == "file":
        return ConversionResult(filename=str(output_path))
    if request.return_type == "base64":
        return ConversionResult(
            filename=output_path.name,
            base64=base64.b64encode(pdf_bytes).decode("ascii"),
        )
    return ConversionResult(filename=output_path.name, buffer=pdf_bytes)


def _run(request: ConversionRequest) -> ConversionResult:
    page_config = request.page_config
    preserve_headers = request.format_options.preserve_headers

    with scoped_temp_dir("doc-convert-") as workdir:
        docx_path = write_buffer(request.buffer, workdir / "input.docx")
        extraction = extract_html(docx_path, request.format_options.style_map)

        document = build_html_document(
            extraction.html,
            request.filename,
            page_config,
            preserve_headers=preserve_headers,
        )
        html_path = workdir / "output.html"
        html_path.write_text(document, encoding="utf-8")

        rendered_path = workdir / request.output_filename
        render_pdf(html_path, rendered_path, page_config, preserve_headers=preserve_headers)
        page_count = validate_pdf_output(rendered_path)
        LOGGER.debug("Rendered %d page(s)", page_count)
        pdf_bytes = rendered_path.read_bytes()

        # The PDF only reaches output_dir once it has been validated.
        output_path = rendered_path
        if request.return_type == "file":
            output_path = request.output_path
            ensure_output_directory(output_path)
            shutil.copyfile(rendered_path, output_path)

    return _package_result(request, output_path, pdf_bytes)


def convert_docx_to_pdf(
    buffer: bytes,
    filename: str,
    options: Optional[ConversionOptions] = None,
    format_options: Optional[FormatOptions] = None,
) -> ConversionResult:
    """Convert a DOCX document held in memory to PDF.

    Parameters
    ----------
    buffer:
        Raw bytes of the DOCX file.
    filename:
        Original file name, used for the document title and the PDF name.
    options:
        Output representation (``buffer``, ``file`` or ``base64``) and the
        directory used by ``file`` mode.
    format_options:
        Page format, margins, header/footer preservation and style map.

    Raises
    ------
    InvalidReturnTypeError
        Before any file I/O, when ``options.return_type`` is unsupported.
    ConversionError
        When extraction or rendering fails.
    """
    request = ConversionRequest(
        buffer=bytes(buffer),
        filename=filename,
        options=options or ConversionOptions(),
        format_options=format_options or FormatOptions(),
    )
    validate_return_type(request.return_type)

    LOGGER.info("Starting conversion: %s (returnType=%s)", filename, request.return_type)
    try:
        with time_block(LOGGER, "DOCX to PDF conversion"):
            result = _run(request)
    except Exception as exc:
        LOGGER.exception("Error converting DOCX to PDF")
        raise ConversionError(f"Failed to convert DOCX document to PDF: {exc}") from exc

    LOGGER.info("Conversion completed: %s", result.filename)
    return result


def smart_convert_docx_to_pdf(
    buffer: bytes,
    filename: str,
    options: Optional[ConversionOptions] = None,
) -> ConversionResult:
    """Analyse the document first and convert it with the guessed settings."""
    validate_return_type((options or ConversionOptions()).return_type)
    metadata = extract_document_metadata(buffer)
    format_options = FormatOptions(
        page_config=PageConfig(format=metadata.suggested_format, margin=Margins()),
        preserve_headers=metadata.has_headers or metadata.has_footers,
    )
    LOGGER.info(
        "Auto-detected format %s (headers preserved: %s)",
        metadata.suggested_format,
        format_options.preserve_headers,
    )
    return convert_docx_to_pdf(buffer, filename, options, format_options)
