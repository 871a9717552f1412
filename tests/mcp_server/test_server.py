"""Test suite for the tool server."""

import asyncio
import base64
import io
import zipfile
from pathlib import Path

import pytest
import pymupdf
from mcp.server.fastmcp.exceptions import ToolError

from pdftools_core.models import PdfToolsConfig, PdfToolsMcpConfig
from pdftools_core.services import PdfProcessor
from pdftools_mcp.server import PdfTools, create_server


@pytest.fixture
def sample_pdf(tmp_path):
    """Create a sample PDF with 4 pages."""
    pdf_path = tmp_path / 'slides.pdf'
    doc = pymupdf.open()
    for i in range(4):
        page = doc.new_page(width=612, height=792)
        page.insert_text((100, 100), f'Slide {i + 1}')
    doc.save(str(pdf_path))
    doc.close()
    return pdf_path


@pytest.fixture
def tools(tmp_path):
    """Tool handlers using a processor with its temp dir inside the test directory."""
    temp_dir = tmp_path / 'tmp'
    temp_dir.mkdir()
    return PdfTools(PdfProcessor(config=PdfToolsConfig(temp_dir=str(temp_dir))))


@pytest.fixture
def server(tmp_path):
    return create_server(
        PdfToolsMcpConfig(server_name='pdftools-test'),
        PdfToolsConfig(temp_dir=str(tmp_path)),
    )


class TestServer:
    def test_tools_are_listed(self, server):
        """Test that the four PDF tools are registered."""
        tools = asyncio.run(server.list_tools())

        assert sorted(tool.name for tool in tools) == [
            'pdf_compress',
            'pdf_info',
            'pdf_remove_pages',
            'pdf_split',
        ]

    def test_remove_pages_schema(self, server):
        """Test that required arguments are declared in the input schema."""
        tools = {tool.name: tool for tool in asyncio.run(server.list_tools())}

        schema = tools['pdf_remove_pages'].inputSchema

        assert set(schema['required']) == {'pdf_path', 'output_path', 'pages'}
        assert 'mode' in schema['properties']

    def test_call_tool_reports_errors(self, server):
        """Test that a failing call surfaces the error message."""
        with pytest.raises(ToolError, match='missing or invalid pdf_path'):
            asyncio.run(server.call_tool('pdf_info', {'pdf_path': '  '}))


class TestPdfInfoTool:
    def test_info(self, tools, sample_pdf):
        result = tools.pdf_info(str(sample_pdf))

        assert result == {
            'total_pages': 4,
            'size_bytes': sample_pdf.stat().st_size,
            'filename': 'slides.pdf',
        }

    def test_info_missing_file(self, tools, tmp_path):
        with pytest.raises(ToolError, match='input file does not exist'):
            tools.pdf_info(str(tmp_path / 'missing.pdf'))


class TestPdfSplitTool:
    def test_split_into_directory(self, tools, sample_pdf, tmp_path):
        output_dir = tmp_path / 'slides'

        result = tools.pdf_split(str(sample_pdf), output_dir=str(output_dir))

        assert result['total_pages'] == 4
        assert [Path(f).name for f in result['files']] == [
            f'slides_page_{i}.pdf' for i in range(1, 5)
        ]
        assert 'zip_path' not in result

    def test_split_with_zip(self, tools, sample_pdf, tmp_path):
        result = tools.pdf_split(
            str(sample_pdf), output_dir=str(tmp_path / 'slides'), zip=True
        )

        zip_path = Path(result['zip_path'])
        assert zip_path.name == 'slides-split.zip'
        assert zip_path.parent == tmp_path / 'slides'
        assert 'zip_b64' not in result

    def test_split_with_zip_as_base64(self, tools, sample_pdf):
        result = tools.pdf_split(
            str(sample_pdf), zip=True, zip_name='bundle.zip', zip_b64=True
        )

        assert Path(result['zip_path']).name == 'bundle.zip'
        with zipfile.ZipFile(io.BytesIO(base64.b64decode(result['zip_b64']))) as archive:
            assert len(archive.namelist()) == 4

    def test_split_requires_path(self, tools):
        with pytest.raises(ToolError, match='missing or invalid pdf_path'):
            tools.pdf_split('')


class TestPdfCompressTool:
    def test_compress(self, tools, sample_pdf, tmp_path):
        output = tmp_path / 'small.pdf'

        result = tools.pdf_compress(str(sample_pdf), str(output))

        assert result['output_path'] == str(output)
        assert result['compressed_size'] == output.stat().st_size

    def test_compress_requires_output(self, tools, sample_pdf):
        with pytest.raises(ToolError, match='missing or invalid output_path'):
            tools.pdf_compress(str(sample_pdf), '')


class TestPdfRemovePagesTool:
    def test_remove_pages(self, tools, sample_pdf, tmp_path):
        output = tmp_path / 'trimmed.pdf'

        result = tools.pdf_remove_pages(str(sample_pdf), str(output), '2-3')

        assert result == {
            'output_path': str(output),
            'original_pages': 4,
            'removed_pages': [2, 3],
            'removed_count': 2,
            'remaining_pages': 2,
            'mode': 'remove',
        }

    def test_keep_pages(self, tools, sample_pdf, tmp_path):
        result = tools.pdf_remove_pages(
            str(sample_pdf), str(tmp_path / 'first.pdf'), '1', mode='keep'
        )

        assert result['removed_pages'] == [2, 3, 4]
        assert result['mode'] == 'keep'

    def test_requires_pages(self, tools, sample_pdf, tmp_path):
        with pytest.raises(ToolError, match='missing or invalid pages'):
            tools.pdf_remove_pages(str(sample_pdf), str(tmp_path / 'out.pdf'), ' ')

    @pytest.mark.parametrize(
        'pages,mode,message',
        [
            ('5', 'remove', 'page 5 out of bounds'),
            ('1-4', 'remove', 'cannot remove all 4 pages'),
            ('1', 'erase', 'invalid mode'),
        ],
    )
    def test_invalid_input(self, tools, sample_pdf, tmp_path, pages, mode, message):
        with pytest.raises(ToolError, match=message):
            tools.pdf_remove_pages(
                str(sample_pdf), str(tmp_path / 'out.pdf'), pages, mode=mode
            )
