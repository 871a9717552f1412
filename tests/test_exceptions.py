from pathlib import Path

import pytest

from pdftools_core.exceptions import (
    DocumentUnreadableException,
    ErrorKind,
    InvalidModeException,
    PageSelectionException,
    PdfOperationException,
    PdfToolsException,
)


class TestErrorKind:
    @pytest.mark.parametrize(
        'kind',
        [
            ErrorKind.EMPTY_SELECTION,
            ErrorKind.MALFORMED_NUMBER,
            ErrorKind.MALFORMED_RANGE,
            ErrorKind.INVERTED_RANGE,
            ErrorKind.OUT_OF_BOUNDS,
            ErrorKind.NO_PAGES_SELECTED,
            ErrorKind.CANNOT_REMOVE_ALL_PAGES,
            ErrorKind.INVALID_MODE,
        ],
    )
    def test_input_errors(self, kind):
        assert kind.is_input_error

    @pytest.mark.parametrize(
        'kind',
        [
            ErrorKind.DOCUMENT_UNREADABLE,
            ErrorKind.REMOVAL_FAILED,
            ErrorKind.OPERATION_FAILED,
        ],
    )
    def test_document_and_engine_errors(self, kind):
        assert not kind.is_input_error


class TestExceptions:
    def test_all_exceptions_share_the_base_class(self):
        for exception in [
            PageSelectionException('bad', kind=ErrorKind.MALFORMED_NUMBER),
            InvalidModeException('drop'),
            DocumentUnreadableException('unreadable'),
            PdfOperationException('split PDF', 'boom'),
        ]:
            assert isinstance(exception, PdfToolsException)

    def test_str_includes_details(self):
        ex = PdfToolsException('failed', details={'path': 'a.pdf'})

        assert str(ex) == "failed\nDetails: {'path': 'a.pdf'}"

    def test_str_without_details(self):
        assert str(PdfToolsException('failed')) == 'failed'

    def test_document_unreadable(self):
        ex = DocumentUnreadableException('failed to read PDF: broken', path=Path('a.pdf'))

        assert ex.kind == ErrorKind.DOCUMENT_UNREADABLE
        assert ex.path == Path('a.pdf')

    def test_operation_message_wraps_cause(self):
        ex = PdfOperationException(
            'remove pages', 'no space left', kind=ErrorKind.REMOVAL_FAILED
        )

        assert ex.message == 'failed to remove pages: no space left'
        assert ex.operation == 'remove pages'
        assert ex.kind == ErrorKind.REMOVAL_FAILED
