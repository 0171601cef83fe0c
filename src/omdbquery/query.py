"""Fluent query builders for OMDb.

Start a query with one of the entry points, chain optional setters, then await
``get()``:

    item = await omdbquery.title("The Wizard of Oz").year(1939).apikey(key).get()
    hits = await omdbquery.search("batman").kind(Kind.MOVIE).page(2).get()

- ``title(text)`` and ``imdb_id(id)`` return a single :class:`Item`.
- ``search(text)`` returns a :class:`SearchResult` page.
- Setters overwrite any earlier value for the same field and return the same
  builder. Nothing touches the network until ``get()``.
- The lookup kind (title, id or search) is fixed by the entry point and
  cannot be changed afterwards.
"""

from enum import Enum
from typing import Generic, TypeVar

import httpx

from omdbquery.executor import execute
from omdbquery.models import Item, Kind, Plot, SearchResult
from omdbquery.settings import Settings

ResultT = TypeVar("ResultT", Item, SearchResult)
QueryT = TypeVar("QueryT", bound="Query")


class Lookup(str, Enum):
    """Which OMDb lookup a query performs, valued by its wire parameter."""

    TITLE = "t"
    ID = "i"
    SEARCH = "s"


class Query(Generic[ResultT]):
    """Base builder: one fixed lookup plus a set of optional fields."""

    result_model: type[ResultT]

    def __init__(self, lookup: Lookup, text: str) -> None:
        """Create a query for ``text``. Use the module entry points instead."""
        self._lookup = lookup
        self._fields: dict[str, str] = {lookup.value: text}

    @property
    def lookup(self) -> Lookup:
        """The lookup kind chosen by the entry point."""
        return self._lookup

    def _set(self: QueryT, key: str, value: str) -> QueryT:
        self._fields[key] = value
        return self

    def apikey(self: QueryT, apikey: str) -> QueryT:
        """Set the OMDb API key for this request."""
        return self._set("apikey", str(apikey))

    def kind(self: QueryT, kind: Kind | str) -> QueryT:
        """Restrict results to one kind of media."""
        return self._set("type", Kind(kind).value)

    def params(self) -> dict[str, str]:
        """Return a copy of the fields set so far, keyed by OMDb parameter."""
        return dict(self._fields)

    async def get(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> ResultT:
        """Send the query to OMDb and decode the answer.

        Args:
            client: Optional HTTP client to reuse; one is opened per call
                otherwise.
            settings: Optional settings; read from the environment otherwise.

        Raises:
            OMDbError: One of its subclasses on any failure.
        """
        return await execute(
            self.params(), self.result_model, client=client, settings=settings
        )

    def __repr__(self) -> str:
        shown = {k: ("***" if k == "apikey" else v) for k, v in self._fields.items()}
        return f"{type(self).__name__}({shown!r})"


class _LookupQuery(Query[Item]):
    """Shared setters of single-item lookups (by title or by id)."""

    result_model = Item

    def plot(self: QueryT, plot: Plot | str) -> QueryT:
        """Choose a short or full plot."""
        return self._set("plot", Plot(plot).value)

    def season(self: QueryT, season: int) -> QueryT:
        """Ask for a season listing (series only)."""
        return self._set("Season", str(season))

    def episode(self: QueryT, episode: int) -> QueryT:
        """Ask for a single episode of the chosen season."""
        return self._set("Episode", str(episode))


class TitleQuery(_LookupQuery):
    """Looks up a single item by its title."""

    def year(self, year: int | str) -> "TitleQuery":
        """Specify the release year."""
        return self._set("y", str(year))


class IdQuery(_LookupQuery):
    """Looks up a single item by its IMDb id.

    There is no ``year`` setter: the id already identifies one item.
    """


class SearchQuery(Query[SearchResult]):
    """Searches OMDb for a page of items matching free text."""

    result_model = SearchResult

    def year(self, year: int | str) -> "SearchQuery":
        """Specify the release year."""
        return self._set("y", str(year))

    def page(self, page: int) -> "SearchQuery":
        """Select a result page (1-based). Out-of-range pages are left to OMDb."""
        return self._set("page", str(page))


def title(text: str) -> TitleQuery:
    """Start a lookup of a single item by title.

    An empty title is sent as-is; OMDb decides whether it matches anything.
    """
    return TitleQuery(Lookup.TITLE, text)


def imdb_id(imdb_id: str) -> IdQuery:
    """Start a lookup of a single item by IMDb id, e.g. ``tt0032138``."""
    return IdQuery(Lookup.ID, imdb_id)


def search(text: str) -> SearchQuery:
    """Start a search for items matching ``text``."""
    return SearchQuery(Lookup.SEARCH, text)
