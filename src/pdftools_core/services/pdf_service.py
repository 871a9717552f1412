"""PDF engine adapter using PyMuPDF."""

import os
import shutil
import tempfile
from logging import Logger
from pathlib import Path
from typing import List, Literal

import pymupdf

from pdftools_core.exceptions import (
    DocumentUnreadableException,
    ErrorKind,
    PdfOperationException,
)
from pdftools_core.logging import create_null_logger


class PdfService:
    """
    Service for page level PDF operations using PyMuPDF.

    This class wraps a single document and exposes the primitives the
    processor needs: page counting, page deletion from range tokens,
    compression and splitting into single pages. It uses the context
    manager protocol for proper resource management.

    Example:
        with PdfService(pdf_path) as pdf:
            total = pdf.page_count
            pdf.delete_pages(output_path, ['1-3', '7'])
    """

    def __init__(
        self,
        pdf_path: Path,
        validation_mode: Literal['strict', 'relaxed'] = 'relaxed',
        logger: Logger = None,
    ):
        """
        Initialize PDF service with a PDF file path.

        Args:
            pdf_path: Path to the PDF file
            validation_mode: 'strict' rejects documents MuPDF had to repair
                while opening, 'relaxed' accepts them
            logger: Logger instance, a null logger is used when omitted
        """
        self.pdf_path = Path(pdf_path)
        self.validation_mode = validation_mode
        self._logger = logger or create_null_logger(name='pdftools.PdfService')
        self._doc = None

    def __enter__(self):
        """
        Open and validate the PDF document when entering context manager.

        Returns:
            Self for method chaining

        Raises:
            DocumentUnreadableException: If the file is missing, is not a
                readable PDF, is password protected or has no pages
        """
        if not self.pdf_path.is_file():
            raise DocumentUnreadableException(
                f'input file does not exist: {self.pdf_path}', path=self.pdf_path
            )

        pymupdf.TOOLS.mupdf_display_errors(False)
        pymupdf.TOOLS.mupdf_display_warnings(False)

        try:
            doc = pymupdf.open(str(self.pdf_path), filetype='pdf')
        except Exception as ex:
            raise DocumentUnreadableException(
                f'failed to read PDF: {ex}', path=self.pdf_path
            ) from ex

        try:
            self._validate(doc)
        except DocumentUnreadableException:
            doc.close()
            raise

        self._doc = doc
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Close the PDF document when exiting context manager.

        Args:
            exc_type: Exception type if an exception occurred
            exc_val: Exception value if an exception occurred
            exc_tb: Exception traceback if an exception occurred
        """
        if self._doc is not None:
            self._doc.close()
            self._doc = None
        return False

    def _validate(self, doc) -> None:
        if doc.needs_pass:
            raise DocumentUnreadableException(
                'failed to validate PDF: document is password protected',
                path=self.pdf_path,
            )

        if self.validation_mode == 'strict' and doc.is_repaired:
            raise DocumentUnreadableException(
                'failed to validate PDF: document is damaged and needed repairs',
                path=self.pdf_path,
            )

        if doc.page_count == 0:
            raise DocumentUnreadableException(
                'PDF file is empty (no pages)', path=self.pdf_path
            )

    def _document(self):
        if self._doc is None:
            raise RuntimeError('PdfService must be used within a context manager')
        return self._doc

    @property
    def page_count(self) -> int:
        """
        Number of pages in the document.

        Raises:
            RuntimeError: If called outside context manager
        """
        return self._document().page_count

    # ========================================================================
    # Rewriting Operations
    # ========================================================================

    def delete_pages(self, output_path: Path, range_tokens: List[str]) -> None:
        """
        Delete pages and save the result.

        The output may be the input file itself, it is replaced only once the
        rewritten document has been saved completely.

        Args:
            output_path: Path where the rewritten PDF should be saved
            range_tokens: 1-based page tokens such as "4" or "7-9"

        Raises:
            RuntimeError: If called outside context manager
            PdfOperationException: If the engine fails to delete or save
        """
        doc = self._document()
        output_path = Path(output_path)

        try:
            bounds = [_token_bounds(token) for token in range_tokens]

            # Delete from the end so earlier indices are not shifted
            for start, end in sorted(bounds, reverse=True):
                doc.delete_pages(from_page=start - 1, to_page=end - 1)

            _save_replacing(doc, output_path, garbage=3, deflate=True)
        except Exception as ex:
            self._logger.error(f'Page deletion failed for [{self.pdf_path}]: {ex}')
            raise PdfOperationException(
                'remove pages',
                str(ex),
                path=self.pdf_path,
                kind=ErrorKind.REMOVAL_FAILED,
            ) from ex

    def compress(self, output_path: Path, remove_metadata: bool = True) -> None:
        """
        Save an optimized copy of the document.

        Unused objects are dropped, streams are deflated and content is
        cleaned. Metadata is cleared when requested.

        Args:
            output_path: Path where the compressed PDF should be saved
            remove_metadata: Clear the info dictionary and XMP metadata

        Raises:
            RuntimeError: If called outside context manager
            PdfOperationException: If the engine fails to save
        """
        doc = self._document()
        output_path = Path(output_path)

        try:
            if remove_metadata:
                doc.set_metadata({})
                doc.del_xml_metadata()

            _save_replacing(
                doc,
                output_path,
                garbage=4,
                deflate=True,
                deflate_images=True,
                deflate_fonts=True,
                clean=True,
            )
        except Exception as ex:
            self._logger.error(f'Compression failed for [{self.pdf_path}]: {ex}')
            raise PdfOperationException(
                'optimize PDF', str(ex), path=self.pdf_path
            ) from ex

    def split(self, output_dir: Path, prefix: str) -> List[Path]:
        """
        Split the document into individual pages.

        Args:
            output_dir: Directory where split PDFs should be saved
            prefix: Prefix for output filenames

        Returns:
            List of paths to the created PDF files, in page order

        Raises:
            RuntimeError: If called outside context manager
            PdfOperationException: If the engine fails to write a page
        """
        doc = self._document()
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        output_files = []

        try:
            for page_num in range(doc.page_count):
                output_file = output_dir / f'{prefix}_page_{page_num + 1}.pdf'
                output_pdf = pymupdf.open()
                try:
                    output_pdf.insert_pdf(doc, from_page=page_num, to_page=page_num)
                    output_pdf.save(str(output_file))
                finally:
                    output_pdf.close()
                output_files.append(output_file)
        except Exception as ex:
            self._logger.error(f'Split failed for [{self.pdf_path}]: {ex}')
            raise PdfOperationException('split PDF', str(ex), path=self.pdf_path) from ex

        return output_files


def _token_bounds(token: str) -> tuple[int, int]:
    """Convert a range token ("4" or "7-9") to inclusive 1-based bounds."""
    start, _, end = token.partition('-')
    return int(start), int(end or start)


def _save_replacing(doc, output_path: Path, **options) -> None:
    """Save to a temporary file next to the output, then move it into place."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(
        prefix=f'.{output_path.stem}-', suffix='.pdf', dir=output_path.parent
    )
    os.close(fd)
    temp_path = Path(temp_name)

    try:
        doc.save(str(temp_path), **options)
        if output_path.exists():
            shutil.copymode(output_path, temp_path)
        os.replace(temp_path, output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
