"""Explain one file's classification and analysis."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import CodeAtlasError
from ..logging_config import setup_logging
from ..semantics import classify_by_content, classify_by_path
from . import app
from ._common import colored_category, console, resolve_config


@app.command()
def file(
    path: Path = typer.Argument(
        ...,
        help="Project root",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    target: str = typer.Argument(..., help="Project-relative path of the file to explain"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Show why a file was classified the way it was, and what it imports and exports.

    [bold cyan]Examples:[/bold cyan]

      codeatlas file . server/routes/authRoutes.js
    """
    from ..core import scan_project

    try:
        scan_config = resolve_config(config=config)
        setup_logging(scan_config.verbosity)
        result = scan_project(path, scan_config)
    except CodeAtlasError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    scanned = result.get_file(target)
    if scanned is None:
        console.print(f"[red]Error:[/red] {target} is not part of the scan")
        raise typer.Exit(1)

    by_path = classify_by_path(scanned.path)
    by_content = classify_by_content(scanned.content)

    console.print()
    console.print(f"[bold]{scanned.path}[/bold]")
    console.print(f"  type:      [cyan]{scanned.type}[/cyan] ({scanned.role})")
    console.print(f"  category:  {colored_category(scanned.category)}")
    console.print(f"  behavior:  {scanned.behavior}")
    console.print(f"  by path:   {by_path.type} ({by_path.role})")
    if by_content is not None:
        console.print(f"  by content: {by_content.type} (confidence {by_content.confidence:.2f})")
    else:
        console.print("  by content: [dim]no signal[/dim]")
    if not scanned.has_content:
        console.print("  [yellow]content not read (unreadable or too large)[/yellow]")

    analysis = scanned.analysis
    if analysis.imports:
        console.print()
        console.print("[bold]Imports[/bold]")
        for imp in analysis.imports:
            target_label = f"[green]{imp.resolved_path}[/green]" if imp.resolved_path else "[dim]external[/dim]"
            type_only = " [dim](type)[/dim]" if imp.is_type_only else ""
            console.print(f"  {imp.value} -> {target_label}: {', '.join(imp.imported)}{type_only}")
    if analysis.exports:
        console.print()
        console.print("[bold]Exports[/bold]")
        for export in analysis.exports:
            console.print(f"  {export.name} ({export.kind}, {export.type})")
    if analysis.routes:
        console.print()
        console.print("[bold]Routes[/bold]")
        for route in analysis.routes:
            console.print(f"  {route.method} {route.path}")
    if analysis.api_calls:
        console.print()
        console.print("[bold]API calls[/bold]")
        for call in analysis.api_calls:
            console.print(f"  {call.type} {call.method or ''} {call.url}".rstrip())
    if analysis.imported_by:
        console.print()
        console.print("[bold]Imported by[/bold]")
        for importer in analysis.imported_by:
            console.print(f"  {importer}")

    memberships = [k for k, f in result.features.items() if scanned.path in f.all_files]
    if memberships:
        console.print()
        console.print(f"Features: {', '.join(sorted(memberships))}")
