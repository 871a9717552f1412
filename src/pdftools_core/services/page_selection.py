"""Page selection parsing, removal set resolution and range compaction.

A selection is a comma separated list of 1-based page numbers and inclusive
ranges, e.g. "2,5-8,11". These helpers are pure: they hold no state and do no
I/O, so they can be called concurrently from any request.
"""

import re
from typing import Iterable, List

from pdftools_core.exceptions import ErrorKind, PageSelectionException
from pdftools_core.models import Mode

_NUMBER_PATTERN = re.compile(r'\+?[0-9]+')


def _parse_number(value: str) -> int | None:
    """Parse a non-negative decimal integer with an optional plus sign, returning None when invalid."""
    value = value.strip()
    if not _NUMBER_PATTERN.fullmatch(value):
        return None
    return int(value)


def parse_page_selection(selection: str, total_pages: int) -> List[int]:
    """
    Parse a page selection into a sorted list of unique page numbers.

    Supports formats:
    - "5" - single page
    - "2-5" - inclusive range
    - "2,5-8,11" - any combination of pages and ranges

    Whitespace around tokens and around the hyphen is ignored, empty tokens
    (e.g. trailing commas) are skipped and duplicates are collapsed.

    Args:
        selection: The raw selection string
        total_pages: Number of pages in the document

    Returns:
        Sorted list of page numbers, each within [1, total_pages]

    Raises:
        PageSelectionException: on the first invalid token, or when the
            selection contains no pages at all
    """
    selection = (selection or '').strip()
    if selection == '':
        raise PageSelectionException(
            'page selection cannot be empty',
            kind=ErrorKind.EMPTY_SELECTION,
            selection=selection,
        )

    pages = set()

    for token in selection.split(','):
        token = token.strip()
        if token == '':
            continue

        if '-' in token:
            raw_start, raw_end = token.split('-', 1)

            start = _parse_number(raw_start)
            if start is None:
                raise PageSelectionException(
                    f'invalid range start "{raw_start.strip()}"',
                    kind=ErrorKind.MALFORMED_RANGE,
                    selection=selection,
                )
            end = _parse_number(raw_end)
            if end is None:
                raise PageSelectionException(
                    f'invalid range end "{raw_end.strip()}"',
                    kind=ErrorKind.MALFORMED_RANGE,
                    selection=selection,
                )
            if start > end:
                raise PageSelectionException(
                    f'invalid range {start}-{end}: start > end',
                    kind=ErrorKind.INVERTED_RANGE,
                    selection=selection,
                )
            if start < 1 or end > total_pages:
                raise PageSelectionException(
                    f'range {start}-{end} out of bounds (PDF has {total_pages} pages)',
                    kind=ErrorKind.OUT_OF_BOUNDS,
                    selection=selection,
                )
            pages.update(range(start, end + 1))
        else:
            page = _parse_number(token)
            if page is None:
                raise PageSelectionException(
                    f'invalid page number "{token}"',
                    kind=ErrorKind.MALFORMED_NUMBER,
                    selection=selection,
                )
            if page < 1 or page > total_pages:
                raise PageSelectionException(
                    f'page {page} out of bounds (PDF has {total_pages} pages)',
                    kind=ErrorKind.OUT_OF_BOUNDS,
                    selection=selection,
                )
            pages.add(page)

    if not pages:
        raise PageSelectionException(
            'page selection resolved to zero pages',
            kind=ErrorKind.EMPTY_SELECTION,
            selection=selection,
        )

    return sorted(pages)


def resolve_removal_set(
    selected: Iterable[int], total_pages: int, mode: Mode
) -> List[int]:
    """
    Compute the pages to delete for the given mode.

    In `remove` mode the selection itself is deleted, in `keep` mode every
    page not in the selection is deleted.

    Args:
        selected: The selected page numbers
        total_pages: Number of pages in the document
        mode: The removal mode

    Returns:
        Sorted list of the pages to delete
    """
    selected = set(selected)

    if Mode.parse(mode) == Mode.KEEP:
        return [page for page in range(1, total_pages + 1) if page not in selected]

    return sorted(selected)


def validate_removal_set(removal: List[int], total_pages: int) -> None:
    """
    Ensure a removal set changes the document without emptying it.

    Raises:
        PageSelectionException: if there is nothing to remove or every page
            would be removed
    """
    if len(removal) == 0:
        raise PageSelectionException(
            'no pages to remove (selection matches all pages)',
            kind=ErrorKind.NO_PAGES_SELECTED,
        )

    if len(removal) >= total_pages:
        raise PageSelectionException(
            f'cannot remove all {total_pages} pages from the PDF',
            kind=ErrorKind.CANNOT_REMOVE_ALL_PAGES,
        )


def compact_page_ranges(pages: Iterable[int]) -> List[str]:
    """
    Collapse page numbers into the shortest list of range tokens.

    Example:
        [1, 2, 3, 5, 7, 8, 9] -> ["1-3", "5", "7-9"]

    Args:
        pages: Page numbers, in any order

    Returns:
        Range tokens in ascending order, empty when pages is empty
    """
    ordered = sorted(set(pages))
    if not ordered:
        return []

    tokens = []
    start = end = ordered[0]

    for page in ordered[1:]:
        if page == end + 1:
            end = page
            continue
        tokens.append(_range_token(start, end))
        start = end = page

    tokens.append(_range_token(start, end))
    return tokens


def _range_token(start: int, end: int) -> str:
    if start == end:
        return str(start)
    return f'{start}-{end}'
