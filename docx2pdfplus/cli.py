"""
Command-line interface for docx2pdfplus.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docx2pdfplus import __version__
from docx2pdfplus.converter import convert_docx_to_pdf, smart_convert_docx_to_pdf
from docx2pdfplus.metadata import extract_document_metadata
from docx2pdfplus.types import ConversionOptions, FormatOptions, Margins, PageConfig
from docx2pdfplus.utils import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    docx2pdfplus - Convert DOCX documents to PDF.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="convert")
@click.argument('input_docx', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output-dir', '-o',
    default='.',
    help='Output directory for the PDF',
    type=click.Path(file_okay=False)
)
@click.option('--format', 'page_format', default='A4', help='Page format (A4, Letter, ...)')
@click.option('--margin-top', default='1in', help='Top margin')
@click.option('--margin-right', default='1in', help='Right margin')
@click.option('--margin-bottom', default='1in', help='Bottom margin')
@click.option('--margin-left', default='1in', help='Left margin')
@click.option(
    '--headers/--no-headers',
    default=True,
    help='Reserve space for headers and footers'
)
@click.option(
    '--smart',
    is_flag=True,
    help='Guess page format and header handling from the document'
)
def convert(input_docx, output_dir, page_format, margin_top, margin_right,
            margin_bottom, margin_left, headers, smart):
    """
    Convert a DOCX file to PDF.

    Examples:

        docx2pdfplus convert report.docx

        docx2pdfplus convert report.docx -o out --format Letter --no-headers

        docx2pdfplus convert report.docx --smart
    """
    try:
        with open(input_docx, 'rb') as handle:
            buffer = handle.read()

        filename = os.path.basename(input_docx)
        options = ConversionOptions(return_type='file', output_dir=output_dir)

        console.print(f"\n[bold cyan]Converting {escape(filename)}...[/bold cyan]")
        with console.status("Rendering PDF"):
            if smart:
                result = smart_convert_docx_to_pdf(buffer, filename, options)
            else:
                format_options = FormatOptions(
                    page_config=PageConfig(
                        format=page_format,
                        margin=Margins(
                            top=margin_top,
                            right=margin_right,
                            bottom=margin_bottom,
                            left=margin_left,
                        ),
                    ),
                    preserve_headers=headers,
                )
                result = convert_docx_to_pdf(buffer, filename, options, format_options)

        console.print(f"[bold green]✓ Saved:[/bold green] {escape(result.filename)}\n")

    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


@cli.command(name="info")
@click.argument('input_docx', type=click.Path(exists=True, dir_okay=False))
def show_info(input_docx):
    """
    Display the print settings guessed for a DOCX file.

    Example:

        docx2pdfplus info report.docx
    """
    with open(input_docx, 'rb') as handle:
        metadata = extract_document_metadata(handle.read())

    table = Table(title=f"Document Analysis: {os.path.basename(input_docx)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Suggested Format", metadata.suggested_format)
    table.add_row("Content Length", str(metadata.content_length))
    table.add_row("Headers", "Yes" if metadata.has_headers else "No")
    table.add_row("Footers", "Yes" if metadata.has_footers else "No")
    table.add_row("Messages", str(len(metadata.messages)))

    console.print()
    console.print(table)
    for diagnostic in metadata.messages:
        console.print(f"  • [yellow]{diagnostic.level}[/yellow] {escape(diagnostic.message)}")
    console.print()


def main():
    cli()


if __name__ == '__main__':
    main()
