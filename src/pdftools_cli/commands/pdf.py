"""PDF manipulation commands."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from pdftools_cli.console.console import Console
from pdftools_cli.services.pdf_utils import format_file_size, format_ratio
from pdftools_core.exceptions import PdfToolsException
from pdftools_core.logging import build_logger
from pdftools_core.models import PdfToolsConfig, RemovePagesRequest
from pdftools_core.services import PdfProcessor
from pdftools_core.utils import create_zip_archive

app = typer.Typer()

console = Console()

EXIT_FAILURE = 1
"""Exit code for unreadable documents and engine failures."""

EXIT_INVALID_INPUT = 2
"""Exit code for invalid page selections and modes."""


def _processor() -> PdfProcessor:
    config = PdfToolsConfig()
    return PdfProcessor(
        config=config,
        logger=build_logger('pdftools.cli', config, stream=sys.stderr),
    )


def _fail(ex: PdfToolsException):
    """Print the error and exit with the code matching its kind."""
    console.error(ex.message, panel=True)
    raise typer.Exit(EXIT_INVALID_INPUT if ex.kind.is_input_error else EXIT_FAILURE)


@app.command(name='pdf:split', help='Split a PDF file into individual pages')
def split(
    input_file: Annotated[
        str,
        typer.Argument(
            help='PDF file to split',
        ),
    ],
    output_dir: Annotated[
        Optional[str],
        typer.Option(
            '--output',
            '-o',
            help='Output directory for split files. If not specified, creates a folder next to the input file.',
        ),
    ] = None,
    prefix: Annotated[
        Optional[str],
        typer.Option(
            '--prefix',
            '-p',
            help='Prefix for output filenames. If not specified, uses the input filename.',
        ),
    ] = None,
    zip_file: Annotated[
        Optional[str],
        typer.Option(
            '--zip',
            help='Also package the split pages into this ZIP archive.',
        ),
    ] = None,
):
    """
    Split a PDF file into individual pages.

    Each page becomes a separate PDF file in the output directory.

    Output files are named: {prefix}_page_{number}.pdf

    Examples:

        # Split into individual pages (default behavior)
        pdftools pdf:split document.pdf

        # Split with custom output directory and prefix
        pdftools pdf:split report.pdf -o ./pages -p page

        # Split and package the pages
        pdftools pdf:split report.pdf --zip report-pages.zip
    """
    console.action('Split PDF file')

    input_path = Path(input_file)

    if output_dir is None:
        output_path = input_path.parent / f'{input_path.stem}_split'
    else:
        output_path = Path(output_dir)

    try:
        with console.spinner('Splitting PDF...'):
            result = _processor().split(input_path, output_path, prefix)

        for index, file in enumerate(result.files, start=1):
            console.print(f'[faint]⎿ [/faint] Created {Path(file).name} (page {index})')

        if zip_file is not None:
            zip_path = create_zip_archive(
                Path(zip_file), [Path(f) for f in result.files]
            )
            console.info(f'Created archive {zip_path}')

    except PdfToolsException as ex:
        _fail(ex)

    count = len(result.files)
    console.newline()
    console.success(
        f'Successfully split PDF into {count} file{"s" if count > 1 else ""} in {result.output_dir}'
    )


@app.command(name='pdf:info', help='Show page count and size of a PDF file')
def info(
    input_file: Annotated[
        str,
        typer.Argument(
            help='PDF file to inspect',
        ),
    ],
):
    """
    Show page count, size and file name of a PDF file.

    Examples:

        pdftools pdf:info document.pdf
    """
    try:
        result = _processor().info(Path(input_file))
    except PdfToolsException as ex:
        _fail(ex)

    console.details(
        {
            'File': result.filename,
            'Pages': result.total_pages,
            'Size': format_file_size(result.size_bytes),
        }
    )


@app.command(name='pdf:compress', help='Write an optimized copy of a PDF file')
def compress(
    input_file: Annotated[
        str,
        typer.Argument(
            help='PDF file to compress',
        ),
    ],
    output: Annotated[
        Optional[str],
        typer.Option(
            '--output',
            '-o',
            help='Output file path. If not specified, writes {name}_compressed.pdf next to the input file.',
        ),
    ] = None,
):
    """
    Compress a PDF file.

    Unused objects are removed, streams, images and fonts are deflated and,
    unless disabled via PDFTOOLS_REMOVE_METADATA, metadata is cleared.

    Examples:

        pdftools pdf:compress scan.pdf

        pdftools pdf:compress scan.pdf -o scan-small.pdf
    """
    console.action('Compress PDF file')

    input_path = Path(input_file)

    if output is None:
        output_path = input_path.parent / f'{input_path.stem}_compressed.pdf'
    else:
        output_path = Path(output)

    try:
        with console.spinner('Compressing PDF...'):
            result = _processor().compress(input_path, output_path)
    except PdfToolsException as ex:
        _fail(ex)

    console.details(
        {
            'Original size': format_file_size(result.original_size),
            'Compressed size': format_file_size(result.compressed_size),
            'Reduction': format_ratio(result.compression_ratio),
        }
    )
    console.newline()
    console.success(f'Compressed PDF saved to {result.output_path}')


@app.command(
    name='pdf:remove-pages', help='Remove pages from a PDF file, or keep only some'
)
def remove_pages(
    input_file: Annotated[
        str,
        typer.Argument(
            help='PDF file to remove pages from',
        ),
    ],
    output: Annotated[
        str,
        typer.Option(
            '--output',
            '-o',
            help='Output file path for the resulting PDF.',
        ),
    ],
    pages: Annotated[
        str,
        typer.Option(
            '--pages',
            '-p',
            help='Page selection, 1-based. Single pages and ranges separated by commas, e.g. "2,5-8,11".',
        ),
    ],
    mode: Annotated[
        str,
        typer.Option(
            '--mode',
            '-m',
            help="'remove' deletes the selected pages, 'keep' deletes every other page.",
        ),
    ] = 'remove',
):
    """
    Remove the selected pages from a PDF file, or keep only them.

    The document must keep at least one page and at least one page must be
    removed.

    Examples:

        # Remove pages 2, 5, 6, 7, 8 and 11
        pdftools pdf:remove-pages report.pdf -o trimmed.pdf --pages "2,5-8,11"

        # Keep only the first three pages
        pdftools pdf:remove-pages report.pdf -o summary.pdf --pages 1-3 --mode keep
    """
    console.action('Remove PDF pages')

    try:
        request = RemovePagesRequest.from_raw(input_file, output, pages, mode)

        with console.spinner('Removing pages...'):
            result = _processor().remove_pages(request)
    except PdfToolsException as ex:
        _fail(ex)

    console.details(
        {
            'Mode': result.mode.value,
            'Original pages': result.original_pages,
            'Removed pages': result.removed_count,
            'Remaining pages': result.remaining_pages,
        }
    )
    console.newline()
    console.success(f'PDF saved to {result.output_path}')
