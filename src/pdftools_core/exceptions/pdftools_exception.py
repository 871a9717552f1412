from typing import Optional

from pdftools_core.exceptions.error_kind import ErrorKind


class PdfToolsException(Exception):
    """Base exception for all PDF tools failures.

    Attributes
    ----------
    message : str
        Explanation of the error
    kind : ErrorKind
        The kind of failure
    details : dict, optional
        Additional details about the error

    Example
    ---------
    try:
        raise PdfToolsException(
            message="page selection cannot be empty",
            kind=ErrorKind.EMPTY_SELECTION,
        )
    except PdfToolsException as e:
        print(e.kind)  # Will print: "ErrorKind.EMPTY_SELECTION"
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.OPERATION_FAILED,
        details: Optional[dict] = None,
    ):
        """Initialize the error.

        Parameters
        ----------
        message : str
            Human-readable error message
        kind : ErrorKind, optional
            The kind of failure, by default ErrorKind.OPERATION_FAILED
        details : dict, optional
            Additional error details, by default None
        """
        self.message = message
        self.kind = kind
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return a string representation of the error.

        Returns
        -------
        str
            The error message, followed by details when available
        """
        if self.details:
            return f'{self.message}\nDetails: {self.details}'
        return self.message
