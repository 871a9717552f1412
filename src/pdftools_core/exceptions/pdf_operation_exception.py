from pathlib import Path
from typing import Optional

from pdftools_core.exceptions.error_kind import ErrorKind
from pdftools_core.exceptions.pdftools_exception import PdfToolsException


class PdfOperationException(PdfToolsException):
    """Exception raised when the PDF engine fails while rewriting a document.

    Attributes
    ----------
    operation : str
        The operation that failed (e.g. 'remove pages', 'compress')
    path : Path, optional
        The file affected by the operation

    Example
    ---------
    try:
        raise PdfOperationException('remove pages', 'cannot save file')
    except PdfOperationException as e:
        print(e)  # Will print: "failed to remove pages: cannot save file"
    """

    def __init__(
        self,
        operation: str,
        message: str,
        path: Optional[str | Path] = None,
        kind: ErrorKind = ErrorKind.OPERATION_FAILED,
    ):
        self.operation = operation
        self.path = Path(path) if path is not None else None
        super().__init__(message=f'failed to {operation}: {message}', kind=kind)
