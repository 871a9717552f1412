from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure reported by PDF tools operations.

    The kind is identical whatever front end reports it; only the way it is
    surfaced (exit code, HTTP status, tool error) differs.
    """

    EMPTY_SELECTION = 'empty_selection'
    MALFORMED_NUMBER = 'malformed_number'
    MALFORMED_RANGE = 'malformed_range'
    INVERTED_RANGE = 'inverted_range'
    OUT_OF_BOUNDS = 'out_of_bounds'
    NO_PAGES_SELECTED = 'no_pages_selected'
    CANNOT_REMOVE_ALL_PAGES = 'cannot_remove_all_pages'
    INVALID_MODE = 'invalid_mode'
    DOCUMENT_UNREADABLE = 'document_unreadable'
    REMOVAL_FAILED = 'removal_failed'
    OPERATION_FAILED = 'operation_failed'

    @property
    def is_input_error(self) -> bool:
        """Whether the failure is caused by the caller's input rather than the document or the engine."""
        return self not in (
            ErrorKind.DOCUMENT_UNREADABLE,
            ErrorKind.REMOVAL_FAILED,
            ErrorKind.OPERATION_FAILED,
        )
