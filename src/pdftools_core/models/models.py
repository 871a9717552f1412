from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from pdftools_core.exceptions import InvalidModeException


class Mode(str, Enum):
    """Page removal semantics."""

    REMOVE = 'remove'
    """The selected pages are deleted."""

    KEEP = 'keep'
    """The selected pages are preserved, every other page is deleted."""

    @classmethod
    def parse(cls, value: Optional[str], default: Optional['Mode'] = None) -> 'Mode':
        """Convert a raw mode string to a Mode.

        Parameters
        ----------
        value : str, optional
            The raw value, surrounding whitespace is ignored
        default : Mode, optional
            Returned when value is empty, by default Mode.REMOVE

        Returns
        -------
        Mode
            The parsed mode

        Raises
        ------
        InvalidModeException
            If value is neither `remove` nor `keep`
        """
        if isinstance(value, Mode):
            return value

        raw = (value or '').strip()
        if raw == '':
            return default if default is not None else cls.REMOVE

        try:
            return cls(raw)
        except ValueError as ex:
            raise InvalidModeException(raw) from ex


class RemovePagesRequest(BaseModel):
    """A remove or keep pages request, shared by all front ends."""

    input_path: Path
    output_path: Path
    pages: str
    mode: Mode = Mode.REMOVE

    @classmethod
    def from_raw(
        cls,
        input_path: str | Path,
        output_path: str | Path,
        pages: Optional[str],
        mode: Optional[str] = None,
    ) -> 'RemovePagesRequest':
        return cls(
            input_path=Path(input_path),
            output_path=Path(output_path),
            pages=pages or '',
            mode=Mode.parse(mode),
        )


class RemovePagesResult(BaseModel):
    output_path: str
    original_pages: int
    removed_pages: List[int]
    removed_count: int
    remaining_pages: int
    mode: Mode


class SplitResult(BaseModel):
    files: List[str]
    total_pages: int
    output_dir: str
    zip_path: Optional[str] = None
    zip_b64: Optional[str] = None


class PdfInfoResult(BaseModel):
    total_pages: int
    size_bytes: int
    filename: str


class CompressResult(BaseModel):
    output_path: str
    original_size: int
    compressed_size: int
    reduction_bytes: int
    compression_ratio: float
    """Fraction of the original size saved by compression (0.25 means 25% smaller)."""
