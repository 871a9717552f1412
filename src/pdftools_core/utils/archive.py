"""ZIP packaging of split pages."""

import base64
import zipfile
from pathlib import Path
from typing import Iterable

from pdftools_core.exceptions import PdfOperationException


def create_zip_archive(zip_path: Path, files: Iterable[Path]) -> Path:
    """
    Write the given files into a flat ZIP archive.

    Each entry is named after the file name, without directories.
    An incomplete archive is removed when writing fails.

    Args:
        zip_path: Where the archive is created
        files: Files to include

    Returns:
        The archive path

    Raises:
        PdfOperationException: If there is nothing to archive or writing fails
    """
    zip_path = Path(zip_path)
    files = [Path(f) for f in files]

    if not files:
        raise PdfOperationException('create ZIP', 'no output files to zip')

    zip_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with zipfile.ZipFile(zip_path, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for file_path in files:
                archive.write(file_path, arcname=file_path.name)
    except OSError as ex:
        zip_path.unlink(missing_ok=True)
        raise PdfOperationException('create ZIP', str(ex), path=zip_path) from ex

    return zip_path


def encode_file_base64(file_path: Path) -> str:
    """Return the content of a file as a base64 string."""
    return base64.b64encode(Path(file_path).read_bytes()).decode('ascii')
