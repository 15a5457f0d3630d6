"""Exception hierarchy for codeatlas."""

from .analysis import AnalysisError, FileAccessError
from .base import CodeAtlasError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "CodeAtlasError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
