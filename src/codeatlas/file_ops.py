"""
Safe file operations for codeatlas.

Size-limited reads that degrade to ``None`` instead of raising, so a file that
cannot be read still keeps its record in the scan.
"""

from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)

# Files above this size are recorded without content
MAX_FILE_SIZE = 1024 * 1024


def safe_read_file(
    filepath: Path,
    max_bytes: Optional[int] = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """
    Read a file with a size check.

    Args:
        filepath: File to read
        max_bytes: Maximum size in bytes (None = unlimited)
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If the file is oversized or cannot be read
    """
    try:
        size = filepath.stat().st_size
    except OSError as e:
        raise FileAccessError(filepath, f"Cannot stat file: {e}")

    if max_bytes is not None and size > max_bytes:
        raise FileAccessError(filepath, f"File too large ({size} bytes > {max_bytes})")

    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def read_file_content(filepath: Path, max_bytes: int = MAX_FILE_SIZE) -> Optional[str]:
    """Read a file as UTF-8 text, or return None if oversized or unreadable."""
    try:
        return safe_read_file(filepath, max_bytes=max_bytes)
    except FileAccessError as e:
        logger.debug(f"No content for {filepath}: {e.reason}")
        return None


def should_skip_file(relative_path: str, exclude_patterns: list[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        relative_path: Project-relative, forward-slash path
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    path = Path(relative_path)
    for pattern in exclude_patterns:
        if path.match(pattern):
            return True
    return False
