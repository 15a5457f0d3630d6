"""CLI entry point: registers all subcommands."""

import typer

from ._common import console

app = typer.Typer(
    name="codeatlas",
    help="codeatlas - Map a JS/TS repository: file roles, import graph, frameworks, features",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .scan import main as _main_callback, scan as _scan  # noqa: F401, E402
from .features import features as _features  # noqa: F401, E402
from .file import file as _file  # noqa: F401, E402

__all__ = ["app", "console"]
