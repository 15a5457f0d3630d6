"""List detected features."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import CodeAtlasError
from ..logging_config import setup_logging
from ..serializers import feature_to_dict
from . import app
from ._common import console, resolve_config


@app.command()
def features(
    path: Path = typer.Argument(
        Path("."),
        help="Project root to scan",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    List the features of a project with their hubs and files.

    [bold cyan]Examples:[/bold cyan]

      codeatlas features .

      codeatlas features . --format json
    """
    from ..core import scan_project

    try:
        scan_config = resolve_config(config=config, verbose=verbose)
        setup_logging("quiet" if fmt == "json" else scan_config.verbosity)
        result = scan_project(path, scan_config)
    except CodeAtlasError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if fmt == "json":
        print(json.dumps({k: feature_to_dict(f) for k, f in result.features.items()}, indent=2))
        return

    if not result.features:
        console.print("[yellow]No features detected[/yellow]")
        return

    for keyword, feature in sorted(result.features.items()):
        table = Table(
            title=f"{feature.name} ({feature.file_count} files)",
            show_header=True,
            header_style="bold",
        )
        table.add_column("Bucket", style="cyan")
        table.add_column("Files")
        for hub_kind, hub_paths in feature.hub_paths.items():
            table.add_row(f"hubs: {hub_kind}", "\n".join(hub_paths))
        for bucket, paths in feature.categorized.items():
            if paths:
                table.add_row(bucket, "\n".join(paths))
        if feature.shared_dependencies:
            table.add_row("shared deps", "\n".join(feature.shared_dependencies))
        if feature.api_routes:
            table.add_row("routes", "\n".join(f"{r.method} {r.path}" for r in feature.api_routes))
        console.print(table)
        console.print()

    console.print(f"Coverage: [green]{result.metadata.coverage:.1%}[/green] of files")
