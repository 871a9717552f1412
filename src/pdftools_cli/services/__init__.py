"""Command line helpers."""

from pdftools_cli.services.pdf_utils import format_file_size, format_ratio

__all__ = [
    'format_file_size',
    'format_ratio',
]
