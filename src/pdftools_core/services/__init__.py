"""Services module for pdftools_core."""

from pdftools_core.services.page_selection import (
    compact_page_ranges,
    parse_page_selection,
    resolve_removal_set,
    validate_removal_set,
)
from pdftools_core.services.pdf_service import PdfService
from pdftools_core.services.processor import PdfProcessor

__all__ = [
    'PdfProcessor',
    'PdfService',
    'compact_page_ranges',
    'parse_page_selection',
    'resolve_removal_set',
    'validate_removal_set',
]
