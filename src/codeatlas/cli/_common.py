"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ScanConfig, load_config

console = Console()

CATEGORY_COLORS = {
    "backend": "magenta",
    "frontend": "cyan",
    "shared": "blue",
    "infrastructure": "yellow",
    "test": "green",
    "documentation": "dim",
    "other": "white",
}


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    max_depth: Optional[int] = None,
) -> ScanConfig:
    """Build a ScanConfig from CLI options."""
    overrides = {}
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    if max_depth is not None:
        overrides["feature_max_depth"] = max_depth
    return load_config(config_file=config, **overrides)


def colored_category(category: str) -> str:
    color = CATEGORY_COLORS.get(category, "white")
    return f"[{color}]{category}[/{color}]"
