# Use an explicit re-export https://github.com/astral-sh/ruff/issues/5697#issuecomment-1631647211

from pdftools_core.models.models import (
    Mode as Mode,
    RemovePagesRequest as RemovePagesRequest,
    RemovePagesResult as RemovePagesResult,
    SplitResult as SplitResult,
    PdfInfoResult as PdfInfoResult,
    CompressResult as CompressResult,
)

from pdftools_core.models.config import (
    PdfToolsConfig as PdfToolsConfig,
    PdfToolsServerConfig as PdfToolsServerConfig,
    PdfToolsMcpConfig as PdfToolsMcpConfig,
)
