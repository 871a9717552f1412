"""Formatting helpers for PDF command output."""


def format_file_size(size_bytes: int) -> str:
    """
    Convert bytes to human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string like "1.5 MB"
    """
    size = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size < 1024.0:
            return f'{size:.1f} {unit}'
        size /= 1024.0
    return f'{size:.1f} TB'


def format_ratio(ratio: float) -> str:
    """Format a compression ratio (fraction of bytes saved) as a percentage, e.g. "25.00%"."""
    return f'{ratio * 100:.2f}%'
