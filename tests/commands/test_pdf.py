"""Test suite for PDF commands."""

import zipfile

import pytest
import pymupdf
from typer.testing import CliRunner

from pdftools_cli.commands.pdf import app


@pytest.fixture
def runner():
    """Fixture providing a CLI runner."""
    return CliRunner()


@pytest.fixture
def sample_pdf(tmp_path):
    """Create a sample PDF with 6 pages."""
    pdf_path = tmp_path / 'doc.pdf'
    pdf = pymupdf.open()
    for i in range(6):
        page = pdf.new_page(width=612, height=792)
        page.insert_text((100, 100), f'Page {i + 1} of doc')
    pdf.save(str(pdf_path))
    pdf.close()
    return pdf_path


def page_count(pdf_path):
    with pymupdf.open(str(pdf_path)) as doc:
        return doc.page_count


# Tests for pdf:split command
class TestSplitCommand:
    """Tests for the pdf:split command."""

    def test_split_default_output(self, runner, sample_pdf):
        """Test splitting into a folder next to the input file."""
        result = runner.invoke(app, ['pdf:split', str(sample_pdf)])

        assert result.exit_code == 0
        output_dir = sample_pdf.parent / 'doc_split'
        assert sorted(f.name for f in output_dir.iterdir()) == sorted(
            f'doc_page_{i}.pdf' for i in range(1, 7)
        )

    def test_split_with_output_and_prefix(self, runner, sample_pdf, tmp_path):
        """Test splitting with a custom directory and prefix."""
        output_dir = tmp_path / 'pages'

        result = runner.invoke(
            app, ['pdf:split', str(sample_pdf), '-o', str(output_dir), '-p', 'part']
        )

        assert result.exit_code == 0
        assert (output_dir / 'part_page_1.pdf').is_file()
        assert page_count(output_dir / 'part_page_6.pdf') == 1

    def test_split_with_zip(self, runner, sample_pdf, tmp_path):
        """Test packaging the parts into an archive."""
        zip_path = tmp_path / 'doc-pages.zip'

        result = runner.invoke(
            app,
            ['pdf:split', str(sample_pdf), '-o', str(tmp_path / 'pages'), '--zip', str(zip_path)],
        )

        assert result.exit_code == 0
        with zipfile.ZipFile(zip_path) as archive:
            assert len(archive.namelist()) == 6

    def test_split_missing_file(self, runner, tmp_path):
        """Test that a missing input fails with a document error."""
        result = runner.invoke(app, ['pdf:split', str(tmp_path / 'missing.pdf')])

        assert result.exit_code == 1
        assert 'does not exist' in result.stdout


# Tests for pdf:info command
class TestInfoCommand:
    """Tests for the pdf:info command."""

    def test_info(self, runner, sample_pdf):
        """Test printing page count and file name."""
        result = runner.invoke(app, ['pdf:info', str(sample_pdf)])

        assert result.exit_code == 0
        assert 'doc.pdf' in result.stdout
        assert '6' in result.stdout

    def test_info_not_a_pdf(self, runner, tmp_path):
        """Test that an empty file is reported as unreadable."""
        broken = tmp_path / 'broken.pdf'
        broken.write_bytes(b'')

        result = runner.invoke(app, ['pdf:info', str(broken)])

        assert result.exit_code == 1


# Tests for pdf:compress command
class TestCompressCommand:
    """Tests for the pdf:compress command."""

    def test_compress_default_output(self, runner, sample_pdf):
        """Test that the compressed copy is written next to the input."""
        result = runner.invoke(app, ['pdf:compress', str(sample_pdf)])

        assert result.exit_code == 0
        output = sample_pdf.parent / 'doc_compressed.pdf'
        assert page_count(output) == 6

    def test_compress_with_output(self, runner, sample_pdf, tmp_path):
        """Test writing the compressed copy to a given path."""
        output = tmp_path / 'out' / 'small.pdf'

        result = runner.invoke(app, ['pdf:compress', str(sample_pdf), '-o', str(output)])

        assert result.exit_code == 0
        assert output.is_file()


# Tests for pdf:remove-pages command
class TestRemovePagesCommand:
    """Tests for the pdf:remove-pages command."""

    def test_remove_pages(self, runner, sample_pdf, tmp_path):
        """Test removing a selection of pages."""
        output = tmp_path / 'trimmed.pdf'

        result = runner.invoke(
            app,
            ['pdf:remove-pages', str(sample_pdf), '-o', str(output), '--pages', '2,4-5'],
        )

        assert result.exit_code == 0
        assert page_count(output) == 3
        assert 'Remaining pages' in result.stdout

    def test_keep_pages(self, runner, sample_pdf, tmp_path):
        """Test keeping only a selection of pages."""
        output = tmp_path / 'first.pdf'

        result = runner.invoke(
            app,
            [
                'pdf:remove-pages',
                str(sample_pdf),
                '-o',
                str(output),
                '-p',
                '1',
                '--mode',
                'keep',
            ],
        )

        assert result.exit_code == 0
        assert page_count(output) == 1

    @pytest.mark.parametrize(
        'pages,mode,message',
        [
            ('9', 'remove', 'out of bounds'),
            ('4-2', 'remove', 'start > end'),
            ('1-6', 'remove', 'cannot remove all 6 pages'),
            ('1-6', 'keep', 'no pages to remove'),
            ('1', 'discard', 'invalid mode'),
        ],
    )
    def test_invalid_input_exit_code(
        self, runner, sample_pdf, tmp_path, pages, mode, message
    ):
        """Test that selection and mode errors exit with code 2."""
        output = tmp_path / 'out.pdf'

        result = runner.invoke(
            app,
            [
                'pdf:remove-pages',
                str(sample_pdf),
                '-o',
                str(output),
                '-p',
                pages,
                '-m',
                mode,
            ],
        )

        assert result.exit_code == 2
        assert message in result.stdout
        assert not output.exists()

    def test_unreadable_document_exit_code(self, runner, tmp_path):
        """Test that document errors exit with code 1."""
        result = runner.invoke(
            app,
            [
                'pdf:remove-pages',
                str(tmp_path / 'missing.pdf'),
                '-o',
                str(tmp_path / 'out.pdf'),
                '-p',
                '1',
            ],
        )

        assert result.exit_code == 1
