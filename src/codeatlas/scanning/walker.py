"""File discovery: walk a project root under the ignore policy."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional

from ..file_ops import should_skip_file
from ..logging_config import get_logger
from .ignore import IGNORE_FOLDERS, is_allowed_file, should_ignore_path

logger = get_logger(__name__)


def iter_project_files(
    root_dir: Path,
    exclude_patterns: Optional[list[str]] = None,
    follow_symlinks: bool = False,
) -> Iterator[str]:
    """Yield project-relative, forward-slash file paths under ``root_dir``.

    Ignored folders are pruned without being descended into. Directory
    entries are visited in sorted order so repeated scans enumerate files
    identically.
    """
    root_dir = Path(root_dir)
    exclude_patterns = exclude_patterns or []

    for dirpath, dirnames, filenames in os.walk(root_dir, followlinks=follow_symlinks):
        dirnames[:] = sorted(d for d in dirnames if d not in IGNORE_FOLDERS)

        for name in sorted(filenames):
            full_path = Path(dirpath) / name
            if full_path.is_symlink() and not follow_symlinks:
                continue

            relative = full_path.relative_to(root_dir).as_posix()

            if should_ignore_path(relative):
                continue
            if not is_allowed_file(name):
                continue
            if should_skip_file(relative, exclude_patterns):
                logger.debug(f"Skipped (pattern): {relative}")
                continue

            yield relative


def get_all_files(
    root_dir: Path,
    exclude_patterns: Optional[list[str]] = None,
    follow_symlinks: bool = False,
) -> list[str]:
    """Collect every discoverable file under ``root_dir``."""
    files = list(iter_project_files(root_dir, exclude_patterns, follow_symlinks))
    logger.info(f"Discovered {len(files)} files under {root_dir}")
    return files
