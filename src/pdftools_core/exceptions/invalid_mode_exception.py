from typing import Optional

from pdftools_core.exceptions.error_kind import ErrorKind
from pdftools_core.exceptions.pdftools_exception import PdfToolsException


class InvalidModeException(PdfToolsException):
    """Exception raised when a removal mode other than `remove` or `keep` is requested."""

    def __init__(self, value: Optional[str] = None):
        self.value = value
        super().__init__(
            message="invalid mode: must be 'remove' or 'keep'",
            kind=ErrorKind.INVALID_MODE,
        )
