"""Main scan command and the root callback."""

import json
from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..core import ScanResult, scan_project
from ..exceptions import CodeAtlasError
from ..frameworks import FRAMEWORK_CATEGORIES
from ..logging_config import get_logger, setup_logging
from ..serializers import scan_result_to_dict
from . import app
from ._common import console, resolve_config

logger = get_logger(__name__)


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Map a JavaScript/TypeScript repository: file roles, import graph,
    frameworks and features.

    [bold cyan]Examples:[/bold cyan]

      codeatlas scan ./my-app

      codeatlas scan ./my-app --format json --output scan.json

      codeatlas features ./my-app

      codeatlas file ./my-app server/routes/authRoutes.js
    """
    if ctx.invoked_subcommand is not None:
        return

    from .. import __version__

    if version:
        console.print(f"[bold cyan]codeatlas[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    console.print(ctx.get_help())


@app.command()
def scan(
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
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write JSON output to this file instead of stdout",
    ),
    include_content: bool = typer.Option(
        False,
        "--include-content",
        help="Include raw file content in JSON output",
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        help="Import hops followed from each feature hub",
        min=0,
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
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
):
    """
    Scan a project and report its structure.

    [bold cyan]Examples:[/bold cyan]

      codeatlas scan .

      codeatlas scan . --format json | jq '.metadata'
    """
    if fmt not in ("rich", "json"):
        console.print(f"[red]Error:[/red] Unknown format '{fmt}' (expected rich or json)")
        raise typer.Exit(1)

    try:
        scan_config = resolve_config(config=config, verbose=verbose, quiet=quiet, max_depth=max_depth)
        setup_logging(scan_config.verbosity)
        result = scan_project(path, scan_config)

        if output is not None:
            data = scan_result_to_dict(result, include_content=include_content)
            output.write_text(json.dumps(data, indent=2), encoding="utf-8")
            console.print(f"Wrote scan of [green]{len(result.files)}[/green] files to {output}")
        elif fmt == "json":
            print(json.dumps(scan_result_to_dict(result, include_content=include_content), indent=2))
        else:
            _output_rich(result, verbose=scan_config.verbosity == "verbose")

    except typer.Exit:
        raise
    except CodeAtlasError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


def _output_rich(result: ScanResult, verbose: bool = False) -> None:
    meta = result.metadata

    console.print()
    console.print("[bold cyan]CODEATLAS - Project Scan[/bold cyan]")
    console.print()
    console.print(
        f"  [green]{meta.total_files}[/green] files, project type [bold]{meta.project_type}[/bold]"
    )
    console.print()

    fw_table = Table(title="Frameworks", show_header=True, header_style="bold")
    fw_table.add_column("Category", style="cyan")
    fw_table.add_column("Detected")
    for category in FRAMEWORK_CATEGORIES:
        names = meta.frameworks.get(category, [])
        fw_table.add_row(category, ", ".join(names) if names else "[dim]-[/dim]")
    console.print(fw_table)
    console.print()

    type_counts = Counter(f.type for f in result.files)
    type_table = Table(title="File Types", show_header=True, header_style="bold")
    type_table.add_column("Type", style="cyan")
    type_table.add_column("Files", justify="right")
    for file_type, count in type_counts.most_common():
        type_table.add_row(file_type, str(count))
    console.print(type_table)
    console.print()

    stats = meta.relationship_stats
    console.print(
        f"  Relationships: [green]{stats.total_relationships}[/green] "
        f"({stats.import_relationships} imports, {stats.uses_relationships} uses) "
        f"across {stats.files_in_graph} files"
    )
    console.print()

    if not result.features:
        console.print("  [yellow]No features detected[/yellow]")
        return

    feat_table = Table(title="Features", show_header=True, header_style="bold")
    feat_table.add_column("Keyword", style="cyan")
    feat_table.add_column("Name")
    feat_table.add_column("Files", justify="right")
    feat_table.add_column("Routes", justify="right")
    feat_table.add_column("Shared deps", justify="right")
    for keyword, feature in sorted(result.features.items()):
        feat_table.add_row(
            keyword,
            feature.name,
            str(feature.file_count),
            str(len(feature.api_routes)),
            str(len(feature.shared_dependencies)),
        )
    console.print(feat_table)
    console.print(f"  Feature coverage: [green]{meta.coverage:.1%}[/green]")

    if verbose:
        console.print()
        for keyword, feature in sorted(result.features.items()):
            console.print(f"[bold]{keyword}[/bold]")
            for path in feature.all_files:
                console.print(f"    {path}")
