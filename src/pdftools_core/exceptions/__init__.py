from pdftools_core.exceptions.error_kind import ErrorKind as ErrorKind
from pdftools_core.exceptions.pdftools_exception import (
    PdfToolsException as PdfToolsException,
)
from pdftools_core.exceptions.page_selection_exception import (
    PageSelectionException as PageSelectionException,
)
from pdftools_core.exceptions.invalid_mode_exception import (
    InvalidModeException as InvalidModeException,
)
from pdftools_core.exceptions.document_unreadable_exception import (
    DocumentUnreadableException as DocumentUnreadableException,
)
from pdftools_core.exceptions.pdf_operation_exception import (
    PdfOperationException as PdfOperationException,
)
