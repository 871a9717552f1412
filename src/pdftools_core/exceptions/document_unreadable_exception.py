from pathlib import Path
from typing import Optional

from pdftools_core.exceptions.error_kind import ErrorKind
from pdftools_core.exceptions.pdftools_exception import PdfToolsException


class DocumentUnreadableException(PdfToolsException):
    """Exception raised when a document does not exist or cannot be opened as a PDF.

    Attributes
    ----------
    path : Path, optional
        The document that could not be read
    """

    def __init__(self, message: str, path: Optional[str | Path] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message=message, kind=ErrorKind.DOCUMENT_UNREADABLE)
