"""Command-line interface for omdbquery.

This package provides the Typer app and global console shared by all CLI
commands.

- app: The Typer application object; commands are registered in
  :mod:`omdbquery.cli.commands`.
- console: Rich Console instance for consistent, styled output.
"""

import typer
from rich.console import Console
from rich.traceback import install

from omdbquery.utils.debug import setup_logger

# Install rich traceback handler for all CLI commands
install(show_locals=False)

console = Console()

app = typer.Typer(
    name="omdbquery",
    help="Look up movies, series and episodes on OMDb.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=(
            "Log outgoing requests (API key masked). "
            "Can also be set with the OMDBQUERY_DEBUG environment variable."
        ),
    ),
) -> None:
    """Top-level CLI callback adding global options."""
    setup_logger(verbose)


@app.command()
def version() -> None:
    """Show the version of omdbquery."""
    from omdbquery.__about__ import __version__

    console.print(f"omdbquery version: [bold]{__version__}[/bold]")
