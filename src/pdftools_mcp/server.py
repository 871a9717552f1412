"""Tool server exposing the PDF operations over the Model Context Protocol."""

import sys
from logging import Logger
from pathlib import Path
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from pdftools_core.exceptions import PdfToolsException
from pdftools_core.logging import build_logger, create_null_logger
from pdftools_core.models import PdfToolsConfig, PdfToolsMcpConfig, RemovePagesRequest
from pdftools_core.services import PdfProcessor
from pdftools_core.utils import create_zip_archive, encode_file_base64


def _require(value: Optional[str], name: str) -> str:
    if value is None or value.strip() == '':
        raise ToolError(f'missing or invalid {name}')
    return value


class PdfTools:
    """Tool handlers bound to a processor.

    Every handler validates its arguments, delegates to `PdfProcessor` and
    returns a JSON serializable dictionary. Failures are raised as `ToolError`
    carrying the exception message, the server reports them to the client as
    a tool result with `isError` set.
    """

    def __init__(self, processor: PdfProcessor, logger: Logger = None):
        self._processor = processor
        self._logger = logger or create_null_logger(name='pdftools.mcp.tools')

    def _fail(self, tool: str, ex: PdfToolsException) -> ToolError:
        self._logger.error(f'{tool} failed: {ex.message}')
        return ToolError(ex.message)

    def pdf_split(
        self,
        pdf_path: str,
        output_dir: Optional[str] = None,
        zip: bool = False,
        zip_name: Optional[str] = None,
        zip_b64: bool = False,
    ) -> Dict[str, Any]:
        """Split a PDF into single-page PDFs and optionally create a ZIP archive.

        Args:
            pdf_path: Absolute path to the input PDF
            output_dir: Directory for the page PDFs, a temporary directory is used when omitted
            zip: Create a ZIP archive with the parts
            zip_name: ZIP file name, defaults to "<name>-split.zip"
            zip_b64: Return the ZIP content as base64
        """
        pdf_path = _require(pdf_path, 'pdf_path')
        self._logger.debug(f'executing pdf_split pdf_path={pdf_path} zip={zip}')

        if output_dir is not None and output_dir.strip() == '':
            output_dir = None

        try:
            result = self._processor.split(pdf_path, output_dir)

            if zip:
                if zip_name is None or zip_name.strip() == '':
                    zip_name = f'{Path(pdf_path).stem}-split.zip'

                zip_path = create_zip_archive(
                    Path(result.output_dir) / Path(zip_name).name,
                    [Path(f) for f in result.files],
                )
                result.zip_path = str(zip_path)

                if zip_b64:
                    result.zip_b64 = encode_file_base64(zip_path)
        except PdfToolsException as ex:
            raise self._fail('pdf_split', ex)

        return result.model_dump(mode='json', exclude_none=True)

    def pdf_info(self, pdf_path: str) -> Dict[str, Any]:
        """Return basic PDF information (page count, file size).

        Args:
            pdf_path: Path to the PDF file
        """
        pdf_path = _require(pdf_path, 'pdf_path')
        self._logger.debug(f'executing pdf_info pdf_path={pdf_path}')

        try:
            result = self._processor.info(pdf_path)
        except PdfToolsException as ex:
            raise self._fail('pdf_info', ex)

        return result.model_dump(mode='json')

    def pdf_compress(self, pdf_path: str, output_path: str) -> Dict[str, Any]:
        """Compress a PDF by removing unused objects, deflating streams and clearing metadata.

        Args:
            pdf_path: Path to the input PDF
            output_path: Path for the compressed PDF
        """
        pdf_path = _require(pdf_path, 'pdf_path')
        output_path = _require(output_path, 'output_path')
        self._logger.debug(f'executing pdf_compress pdf_path={pdf_path}')

        try:
            result = self._processor.compress(pdf_path, output_path)
        except PdfToolsException as ex:
            raise self._fail('pdf_compress', ex)

        return result.model_dump(mode='json')

    def pdf_remove_pages(
        self,
        pdf_path: str,
        output_path: str,
        pages: str,
        mode: str = 'remove',
    ) -> Dict[str, Any]:
        """Remove pages from a PDF, or keep only the selected ones.

        Args:
            pdf_path: Path to the input PDF
            output_path: Path for the resulting PDF
            pages: 1-based page selection such as "2,5-8,11"
            mode: "remove" deletes the selected pages, "keep" deletes every other page
        """
        pdf_path = _require(pdf_path, 'pdf_path')
        output_path = _require(output_path, 'output_path')
        pages = _require(pages, 'pages')
        self._logger.debug(
            f'executing pdf_remove_pages pdf_path={pdf_path} pages={pages} mode={mode}'
        )

        try:
            request = RemovePagesRequest.from_raw(pdf_path, output_path, pages, mode)
            result = self._processor.remove_pages(request)
        except PdfToolsException as ex:
            raise self._fail('pdf_remove_pages', ex)

        return result.model_dump(mode='json')


def create_server(
    config: PdfToolsMcpConfig = None,
    tools_config: PdfToolsConfig = None,
    logger: Logger = None,
) -> FastMCP:
    """Build the tool server with the four PDF tools registered."""
    config = config or PdfToolsMcpConfig()
    tools_config = tools_config or PdfToolsConfig()

    if logger is None:
        logger = create_null_logger(name='pdftools.mcp')

    tools = PdfTools(PdfProcessor(config=tools_config, logger=logger), logger=logger)

    server = FastMCP(config.server_name)
    server.add_tool(tools.pdf_split, name='pdf_split')
    server.add_tool(tools.pdf_info, name='pdf_info')
    server.add_tool(tools.pdf_compress, name='pdf_compress')
    server.add_tool(tools.pdf_remove_pages, name='pdf_remove_pages')

    return server


def main():
    """Entry point for the tool server. Logs go to stderr, stdout carries the protocol."""
    config = PdfToolsMcpConfig()
    tools_config = PdfToolsConfig()
    logger = build_logger('pdftools.mcp', tools_config, stream=sys.stderr)

    server = create_server(config, tools_config, logger=logger)

    logger.info(f'Starting {config.server_name} tool server ({config.transport})')
    server.run(transport=config.transport)
