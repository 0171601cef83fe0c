"""CLI commands for omdbquery.

Wraps the three query entry points (title, id, search) in Typer commands.
- Options map one-to-one onto the builder setters.
- The API key comes from ``--apikey`` or OMDB_API_KEY, in that order.
- Output is a Rich table, or the decoded model as JSON with ``--json``.
- Exit codes distinguish "nothing found" (RemoteError) from other failures.
"""

import asyncio
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.markup import escape

from omdbquery.cli import app, console
from omdbquery.cli.renderer import render_item, render_search
from omdbquery.errors import OMDbError, RemoteError
from omdbquery.models import Item, Kind, Plot, SearchResult
from omdbquery.query import Query, imdb_id, search, title
from omdbquery.settings import (
    InvalidSettingsError,
    MissingAPIKeyError,
    load_settings,
)


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    NOT_FOUND = 2


KIND = Annotated[
    Optional[Kind],
    typer.Option("--kind", "-k", case_sensitive=False, help="Restrict to a media type"),
]
YEAR = Annotated[
    Optional[int], typer.Option("--year", "-y", help="Release year")
]
PLOT = Annotated[
    Optional[Plot],
    typer.Option("--plot", case_sensitive=False, help="Plot length (short or full)"),
]
SEASON = Annotated[
    Optional[int], typer.Option("--season", help="List a season (series only)")
]
EPISODE = Annotated[
    Optional[int], typer.Option("--episode", help="Pick one episode of --season")
]
PAGE = Annotated[
    Optional[int], typer.Option("--page", "-p", help="Result page, starting at 1")
]
APIKEY = Annotated[
    Optional[str],
    typer.Option(
        "--apikey",
        help="OMDb API key (defaults to the OMDB_API_KEY environment variable)",
    ),
]
JSON_OUTPUT = Annotated[
    bool, typer.Option("--json", help="Print the decoded response as JSON")
]


def _resolve_apikey(cli_value: str | None) -> str:
    """Return the API key from the CLI option, falling back to settings."""
    if cli_value:
        return cli_value
    return load_settings().require_api_key()


def _run(query: Query, apikey: str | None) -> Item | SearchResult:
    """Attach the API key, perform the request and map errors to exit codes."""
    try:
        query.apikey(_resolve_apikey(apikey))
    except (MissingAPIKeyError, InvalidSettingsError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(ExitCode.ERROR.value) from e

    try:
        return asyncio.run(query.get())
    except RemoteError as e:
        console.print(f"[yellow]OMDb: {escape(e.message)}[/yellow]")
        raise typer.Exit(ExitCode.NOT_FOUND.value) from e
    except (OMDbError, InvalidSettingsError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(ExitCode.ERROR.value) from e


def _output(result: Item | SearchResult, as_json: bool) -> None:
    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    elif isinstance(result, SearchResult):
        render_search(result, console=console)
    else:
        render_item(result, console=console)


@app.command("title")
def title_command(  # noqa: PLR0913
    text: Annotated[str, typer.Argument(help="Title to look up")],
    year: YEAR = None,
    kind: KIND = None,
    plot: PLOT = None,
    season: SEASON = None,
    episode: EPISODE = None,
    apikey: APIKEY = None,
    as_json: JSON_OUTPUT = False,
) -> None:
    """Look up a single movie, series or episode by title."""
    query = title(text)
    if year is not None:
        query.year(year)
    if kind is not None:
        query.kind(kind)
    if plot is not None:
        query.plot(plot)
    if season is not None:
        query.season(season)
    if episode is not None:
        query.episode(episode)
    _output(_run(query, apikey), as_json)


@app.command("id")
def id_command(  # noqa: PLR0913
    imdb: Annotated[str, typer.Argument(help="IMDb id, e.g. tt0032138")],
    kind: KIND = None,
    plot: PLOT = None,
    season: SEASON = None,
    episode: EPISODE = None,
    apikey: APIKEY = None,
    as_json: JSON_OUTPUT = False,
) -> None:
    """Look up a single movie, series or episode by IMDb id."""
    query = imdb_id(imdb)
    if kind is not None:
        query.kind(kind)
    if plot is not None:
        query.plot(plot)
    if season is not None:
        query.season(season)
    if episode is not None:
        query.episode(episode)
    _output(_run(query, apikey), as_json)


@app.command("search")
def search_command(
    text: Annotated[str, typer.Argument(help="Text to search for")],
    year: YEAR = None,
    kind: KIND = None,
    page: PAGE = None,
    apikey: APIKEY = None,
    as_json: JSON_OUTPUT = False,
) -> None:
    """Search for movies, series and episodes matching free text."""
    query = search(text)
    if year is not None:
        query.year(year)
    if kind is not None:
        query.kind(kind)
    if page is not None:
        query.page(page)
    _output(_run(query, apikey), as_json)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
