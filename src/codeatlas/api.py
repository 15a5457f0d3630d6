"""Public API for codeatlas.

Example:
    >>> from codeatlas import scan
    >>>
    >>> result = scan("/path/to/project")
    >>> result.metadata.project_type
    'fullstack'
    >>> sorted(result.features)
    ['auth', 'budget', 'dashboard']
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import load_config
from .core import ScanResult, ScanOrchestrator
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def scan(path: str | Path = ".", config_file: Optional[Path] = None, **overrides) -> ScanResult:
    """Scan a project and return its structural model.

    Steps:
    1. Load configuration (auto-discover TOML, environment, overrides)
    2. Set up logging for the configured verbosity
    3. Run the scan pipeline

    Args:
        path: Project root (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g. feature_max_depth=3,
            verbose=True)

    Returns:
        ScanResult with files, metadata, relationships and features

    Raises:
        CodeAtlasError: If configuration is invalid
        InvalidPathError: If ``path`` is not a readable directory
    """
    config = load_config(config_file=config_file, **overrides)
    setup_logging(config.verbosity)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")

    return ScanOrchestrator(path, config).run()
