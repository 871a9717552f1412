from typing import Optional

from pdftools_core.exceptions.error_kind import ErrorKind
from pdftools_core.exceptions.pdftools_exception import PdfToolsException


class PageSelectionException(PdfToolsException):
    """Exception raised when a page selection cannot be honoured.

    Covers parse failures (empty, malformed, inverted or out of bounds tokens)
    and removal sets that would leave the document unchanged or empty.

    Attributes
    ----------
    selection : str, optional
        The raw selection string that was rejected
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        selection: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.selection = selection
        super().__init__(message=message, kind=kind, details=details)
