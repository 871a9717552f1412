import shutil
from logging import Logger
from pathlib import Path
from typing import List, Optional

from pdftools_core.logging import create_null_logger


class ResourceCleaner:
    """Collect temporary files and directories and remove them together.

    Example
    -------
    with ResourceCleaner() as cleaner:
        cleaner.add_file(upload_path)
        cleaner.add_directory(parts_dir)
        ...
    # everything registered is removed here
    """

    def __init__(self, logger: Logger = None):
        self._files: List[Path] = []
        self._directories: List[Path] = []
        self._logger = logger or create_null_logger(name='pdftools.ResourceCleaner')

    def add_file(self, path: str | Path) -> None:
        self._files.append(Path(path))

    def add_directory(self, path: str | Path) -> None:
        self._directories.append(Path(path))

    def cleanup(self) -> None:
        """Remove every registered path.

        Paths that no longer exist are ignored. Other failures are logged and
        the last one is raised once every path has been attempted.
        """
        last_error: Optional[OSError] = None

        for file_path in self._files:
            try:
                file_path.unlink(missing_ok=True)
            except OSError as ex:
                self._logger.warning(f'Failed to remove file [{file_path}]: {ex}')
                last_error = ex

        for directory in self._directories:
            try:
                shutil.rmtree(directory)
            except FileNotFoundError:
                pass
            except OSError as ex:
                self._logger.warning(f'Failed to remove directory [{directory}]: {ex}')
                last_error = ex

        self._files = []
        self._directories = []

        if last_error is not None:
            raise last_error

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
        return False
