"""Orchestration of PDF operations on top of the engine adapter."""

import tempfile
from logging import Logger
from pathlib import Path
from typing import Optional

from pdftools_core.exceptions import PageSelectionException
from pdftools_core.logging import create_null_logger
from pdftools_core.models import (
    CompressResult,
    PdfInfoResult,
    PdfToolsConfig,
    RemovePagesRequest,
    RemovePagesResult,
    SplitResult,
)
from pdftools_core.services.page_selection import (
    compact_page_ranges,
    parse_page_selection,
    resolve_removal_set,
    validate_removal_set,
)
from pdftools_core.services.pdf_service import PdfService


class PdfProcessor:
    """Run PDF operations requested by the command line, HTTP and tool server front ends.

    The processor is the only component touching the PDF engine and the file
    system. Each call validates its input, delegates the rewrite to
    `PdfService` and returns a result model. Failures propagate as
    `PdfToolsException` subclasses, nothing is retried.

    Example
    -------
    >>> processor = PdfProcessor()
    >>> request = RemovePagesRequest.from_raw('in.pdf', 'out.pdf', '2,5-8', 'keep')
    >>> result = processor.remove_pages(request)
    >>> result.remaining_pages
    5

    Attributes
    ----------
    _config : PdfToolsConfig
        Validation mode, temporary directory and compression settings

    _logger : Logger
        The logger instance
    """

    _config: PdfToolsConfig

    _logger: Logger

    def __init__(self, config: PdfToolsConfig = None, logger: Logger = None):
        self._config = config if config is not None else PdfToolsConfig()

        if logger is None:
            logger = create_null_logger(name=f'pdftools.{self.__class__.__name__}')

        self._logger = logger

    def _open(self, input_path: str | Path) -> PdfService:
        return PdfService(
            Path(input_path),
            validation_mode=self._config.validation_mode,
            logger=self._logger,
        )

    def validate_file(self, input_path: str | Path) -> int:
        """Check that a file is a readable PDF.

        Returns
        -------
        int
            The number of pages

        Raises
        ------
        DocumentUnreadableException
            If the file does not exist or cannot be opened as a PDF
        """
        with self._open(input_path) as pdf:
            return pdf.page_count

    def info(self, input_path: str | Path) -> PdfInfoResult:
        """Report page count and size of a PDF."""
        input_path = Path(input_path)
        self._logger.debug(f'Reading PDF info [{input_path}]')

        total_pages = self.validate_file(input_path)

        return PdfInfoResult(
            total_pages=total_pages,
            size_bytes=input_path.stat().st_size,
            filename=input_path.name,
        )

    def split(
        self,
        input_path: str | Path,
        output_dir: Optional[str | Path] = None,
        prefix: Optional[str] = None,
    ) -> SplitResult:
        """Split a PDF into single page files.

        Parameters
        ----------
        input_path : str | Path
            The PDF to split
        output_dir : str | Path, optional
            Destination directory. A new temporary directory is created when
            omitted, the caller is responsible for removing it
        prefix : str, optional
            File name prefix, defaults to the input file name without extension

        Returns
        -------
        SplitResult
            The created files in page order
        """
        input_path = Path(input_path)
        self._logger.debug(f'Splitting PDF [{input_path}]')

        with self._open(input_path) as pdf:
            if output_dir is None:
                output_dir = tempfile.mkdtemp(
                    prefix='pdf-split-', dir=self._config.temp_dir
                )
            output_dir = Path(output_dir)

            files = pdf.split(output_dir, prefix or input_path.stem)
            total_pages = pdf.page_count

        self._logger.debug(f'PDF split complete, {len(files)} files in [{output_dir}]')

        return SplitResult(
            files=[str(f) for f in files],
            total_pages=total_pages,
            output_dir=str(output_dir),
        )

    def compress(
        self, input_path: str | Path, output_path: str | Path
    ) -> CompressResult:
        """Write an optimized copy of a PDF and report the size reduction."""
        input_path = Path(input_path)
        output_path = Path(output_path)
        self._logger.debug(f'Compressing PDF [{input_path}] to [{output_path}]')

        with self._open(input_path) as pdf:
            original_size = input_path.stat().st_size
            pdf.compress(output_path, remove_metadata=self._config.remove_metadata)

        compressed_size = output_path.stat().st_size

        ratio = 0.0
        if original_size > 0:
            ratio = (original_size - compressed_size) / original_size

        self._logger.debug(
            f'PDF compression complete, {original_size} -> {compressed_size} bytes'
        )

        return CompressResult(
            output_path=str(output_path),
            original_size=original_size,
            compressed_size=compressed_size,
            reduction_bytes=original_size - compressed_size,
            compression_ratio=ratio,
        )

    def remove_pages(self, request: RemovePagesRequest) -> RemovePagesResult:
        """Remove the selected pages, or keep only them, and save the result.

        Steps: open and validate the document, read the page count, parse
        the selection, resolve the pages to delete for the requested mode,
        check that the document neither stays unchanged nor becomes empty,
        compact the removal set into range tokens and let the engine rewrite
        the file.

        Parameters
        ----------
        request : RemovePagesRequest
            Input and output paths, the selection and the mode

        Returns
        -------
        RemovePagesResult
            Counts computed from the selection, before the rewrite

        Raises
        ------
        DocumentUnreadableException
            If the input is not a readable PDF
        PageSelectionException
            If the selection is invalid or would remove nothing or everything
        PdfOperationException
            If the engine fails to rewrite the document
        """
        self._logger.debug(
            f'Removing pages from [{request.input_path}], mode {request.mode.value}'
        )

        with self._open(request.input_path) as pdf:
            total_pages = pdf.page_count

            try:
                selected = parse_page_selection(request.pages, total_pages)
                removal = resolve_removal_set(selected, total_pages, request.mode)
                validate_removal_set(removal, total_pages)
            except PageSelectionException as ex:
                self._logger.warning(
                    f'Invalid page selection [{request.pages}]: {ex.message}'
                )
                raise

            tokens = compact_page_ranges(removal)

            pdf.delete_pages(request.output_path, tokens)

        result = RemovePagesResult(
            output_path=str(request.output_path),
            original_pages=total_pages,
            removed_pages=removal,
            removed_count=len(removal),
            remaining_pages=total_pages - len(removal),
            mode=request.mode,
        )

        self._logger.debug(
            f'Page removal complete, removed {result.removed_count}, remaining {result.remaining_pages}'
        )

        return result
