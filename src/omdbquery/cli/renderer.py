"""Renderers for CLI output.

Prints OMDb items and search pages as Rich tables.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from omdbquery.models import Item, SearchResult

_NOT_AVAILABLE = "N/A"
_OPTIONAL_FIELDS = {"total_seasons", "season", "episode", "series_id"}

# Reason: label order follows OMDb's own field order.
_ITEM_FIELDS = [
    ("Year", "year"),
    ("Type", "kind"),
    ("Rated", "rated"),
    ("Released", "released"),
    ("Runtime", "runtime"),
    ("Genre", "genre"),
    ("Director", "director"),
    ("Writer", "writer"),
    ("Actors", "actors"),
    ("Plot", "plot"),
    ("Language", "language"),
    ("Country", "country"),
    ("Awards", "awards"),
    ("Metascore", "metascore"),
    ("IMDb rating", "imdb_rating"),
    ("IMDb votes", "imdb_votes"),
    ("IMDb ID", "imdb_id"),
    ("Seasons", "total_seasons"),
    ("Season", "season"),
    ("Episode", "episode"),
    ("Series ID", "series_id"),
    ("Box office", "box_office"),
    ("Poster", "poster"),
]


def _text(value: object) -> str:
    if value is None or value == "":
        return _NOT_AVAILABLE
    return escape(str(getattr(value, "value", value)))


def render_item(item: Item, console: Console | None = None) -> None:
    """Render a single OMDb item as a two-column table.

    Season listings (lookups with ``--season``) also get an episode table.
    """
    console = console or Console()

    table = Table(title=_text(item.title), show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    for label, attr in _ITEM_FIELDS:
        value = getattr(item, attr)
        if value is None and attr in _OPTIONAL_FIELDS:
            continue
        table.add_row(label, _text(value))
    for rating in item.ratings:
        table.add_row(_text(rating.source), _text(rating.value), style="yellow")
    console.print(table)

    if item.episodes:
        episodes = Table(title=f"Season {_text(item.season)}")
        episodes.add_column("#", justify="right")
        episodes.add_column("Title", style="green")
        episodes.add_column("Released")
        episodes.add_column("IMDb rating", justify="right")
        episodes.add_column("IMDb ID", style="cyan")
        for ep in item.episodes:
            episodes.add_row(
                _text(ep.episode),
                _text(ep.title),
                _text(ep.released),
                _text(ep.imdb_rating),
                _text(ep.imdb_id),
            )
        console.print(episodes)


def render_search(result: SearchResult, console: Console | None = None) -> None:
    """Render one page of search results followed by a summary line."""
    console = console or Console()

    table = Table(title="Search results")
    table.add_column("IMDb ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Year")
    table.add_column("Type")
    for hit in result.items:
        table.add_row(
            _text(hit.imdb_id), _text(hit.title), _text(hit.year), hit.kind.value
        )
    console.print(table)
    console.print(f"Showing: {len(result.items)} | Total: {result.total_results}")
