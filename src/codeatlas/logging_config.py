"""
Logging for codeatlas.

All records go to stderr through a rich handler, so ``--format json`` output
on stdout can be piped straight into other tools.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "codeatlas"

VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal") -> logging.Logger:
    """
    Route codeatlas log records to a rich stderr handler.

    Args:
        verbosity: ``quiet`` (errors only), ``normal`` (warnings) or
            ``verbose`` (debug records with source locations), as held in
            ``ScanConfig.verbosity``

    Returns:
        The package logger
    """
    level = VERBOSITY_LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger nested under ``codeatlas``; ``get_logger(__name__)`` in modules."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
