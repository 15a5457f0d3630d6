"""Configuration loading and management for codeatlas.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.codeatlas.toml)
    3. Project config (./codeatlas.toml)
    4. Explicit config file
    5. Environment variables (CODEATLAS_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(verbose=True, feature_max_depth=3)
    >>> config.verbosity
    'verbose'
    >>> config.feature_max_depth
    3
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, get_type_hints

from .exceptions import CodeAtlasError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for a scan.

    Attributes:
        File filtering:
            max_file_size_mb: Files above this size keep their record but
                get no content (and therefore no content-based analysis)
            exclude_patterns: Extra glob patterns (matched against the
                project-relative path) to drop during discovery
            follow_symlinks: Follow symbolic links during discovery

        Classification:
            content_confidence_threshold: Minimum content-scorer confidence
                required to override the path-based type

        Feature detection:
            feature_max_depth: Import hops followed from each hub

        Output control:
            verbosity: Logging verbosity level
    """

    # File filtering
    max_file_size_mb: float = 1.0
    exclude_patterns: list[str] = field(default_factory=list)
    follow_symlinks: bool = False

    # Classification
    content_confidence_threshold: float = 0.5

    # Feature detection
    feature_max_depth: int = 2

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if not 0.0 <= self.content_confidence_threshold <= 1.0:
            raise ValueError("content_confidence_threshold must be between 0.0 and 1.0")
        if self.feature_max_depth < 0:
            raise ValueError("feature_max_depth must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of: quiet, normal, verbose")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


DEFAULT_CONFIG = ScanConfig()


def load_config(config_file: Path | None = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated ScanConfig instance

    Raises:
        CodeAtlasError: If a config file is invalid or missing, or a value
            fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".codeatlas.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise CodeAtlasError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "codeatlas.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise CodeAtlasError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise CodeAtlasError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise CodeAtlasError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Verbosity booleans from the CLI map onto the verbosity field
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        raise CodeAtlasError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise CodeAtlasError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CODEATLAS_* environment variables.

    Supported environment variables:
        CODEATLAS_MAX_FILE_SIZE_MB: float
        CODEATLAS_CONTENT_CONFIDENCE_THRESHOLD: float
        CODEATLAS_FEATURE_MAX_DEPTH: int
        CODEATLAS_FOLLOW_SYMLINKS: bool
        CODEATLAS_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CODEATLAS_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"CODEATLAS_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single env value
    (lists).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Lists (exclude_patterns) are too complex for env vars
    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A `[codeatlas]` table is used when present, otherwise the top level.
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise CodeAtlasError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("codeatlas")
    if isinstance(section, dict):
        return section
    return data
