"""Data models for OMDb responses.

This module defines the immutable value types returned by omdbquery and the
small wire envelope every OMDb response shares.

- Field aliases mirror OMDb's JSON keys (``Title``, ``imdbID``,
  ``totalResults`` ...) so payloads validate directly; models can also be
  built with the Python field names.
- Numeric-looking fields (year, runtime, votes, ratings, seasons) stay as
  opaque text. OMDb emits ranges like ``1998–2004``, ``N/A`` and unit
  suffixes, and parsing them would drop real-world responses.
- JSON null in a text or list field decodes as the empty default, the same as
  a missing key.
- Models are frozen: once a response has been decoded it is never mutated.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Kind(str, Enum):
    """Type of media, sent to OMDb as ``type``.

    Leaving the kind unset means unrestricted.
    """

    MOVIE = "movie"
    SERIES = "series"
    EPISODE = "episode"
    GAME = "game"


class Plot(str, Enum):
    """Plot length to return for a lookup."""

    SHORT = "short"
    FULL = "full"


def _kind_or_movie(value: Any) -> Any:
    """Map OMDb's ``Type`` text to Kind, treating unknown tags as movies."""
    if value is None:
        return Kind.MOVIE
    if isinstance(value, str) and not isinstance(value, Kind):
        try:
            return Kind(value.lower())
        except ValueError:
            return Kind.MOVIE
    return value


class OMDbModel(BaseModel):
    """Base for all OMDb value types: frozen, populated by alias or name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Decode JSON null as "" for text fields and [] for list fields."""
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.default == "":
            return ""
        if field.default_factory is list:
            return []
        return value


class Envelope(OMDbModel):
    """Domain success indicator present on every OMDb response."""

    response: str = Field(alias="Response")
    error: str | None = Field(None, alias="Error")

    @property
    def ok(self) -> bool:
        """True when OMDb reports ``Response: "True"``."""
        return self.response.lower() == "true"


class Rating(OMDbModel):
    """A rating from one source, e.g. ``Rotten Tomatoes`` / ``98%``."""

    source: str = Field("", alias="Source")
    value: str = Field("", alias="Value")


class Episode(OMDbModel):
    """One entry of a season listing (lookup with ``Season`` set)."""

    title: str = Field("", alias="Title")
    released: str = Field("", alias="Released")
    episode: str = Field("", alias="Episode")
    imdb_rating: str = Field("", alias="imdbRating")
    imdb_id: str = Field("", alias="imdbID")


class Item(OMDbModel):
    """A movie, series, episode or game returned by a title or id lookup."""

    title: str = Field("", alias="Title")
    """Title as listed on IMDb."""
    year: str = Field("", alias="Year")
    """Release year, or a range such as ``1998–2004`` for series."""
    rated: str = Field("", alias="Rated")
    released: str = Field("", alias="Released")
    runtime: str = Field("", alias="Runtime")
    """Runtime with units, e.g. ``102 min``."""
    genre: str = Field("", alias="Genre")
    director: str = Field("", alias="Director")
    writer: str = Field("", alias="Writer")
    actors: str = Field("", alias="Actors")
    plot: str = Field("", alias="Plot")
    language: str = Field("", alias="Language")
    country: str = Field("", alias="Country")
    awards: str = Field("", alias="Awards")
    poster: str = Field("", alias="Poster")
    ratings: list[Rating] = Field(default_factory=list, alias="Ratings")
    metascore: str = Field("", alias="Metascore")
    imdb_rating: str = Field("", alias="imdbRating")
    imdb_votes: str = Field("", alias="imdbVotes")
    imdb_id: str = Field("", alias="imdbID")
    kind: Kind = Field(Kind.MOVIE, alias="Type")
    dvd: str = Field("", alias="DVD")
    box_office: str = Field("", alias="BoxOffice")
    production: str = Field("", alias="Production")
    website: str = Field("", alias="Website")

    # Series only
    total_seasons: str | None = Field(None, alias="totalSeasons")
    """Number of seasons as reported by OMDb (series only)."""

    # Episode lookups and season listings
    season: str | None = Field(None, alias="Season")
    episode: str | None = Field(None, alias="Episode")
    series_id: str | None = Field(None, alias="seriesID")
    episodes: list[Episode] = Field(default_factory=list, alias="Episodes")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value: Any) -> Any:
        """Decode unknown or missing ``Type`` tags as movies."""
        return _kind_or_movie(value)


class SearchResultItem(OMDbModel):
    """A search hit. Carries far less detail than a full :class:`Item`."""

    title: str = Field("", alias="Title")
    year: str = Field("", alias="Year")
    imdb_id: str = Field("", alias="imdbID")
    kind: Kind = Field(Kind.MOVIE, alias="Type")
    poster: str = Field("", alias="Poster")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value: Any) -> Any:
        """Decode unknown or missing ``Type`` tags as movies."""
        return _kind_or_movie(value)


class SearchResult(OMDbModel):
    """One page of search hits plus the total number of matches."""

    items: list[SearchResultItem] = Field(default_factory=list, alias="Search")
    total_results: int = Field(0, alias="totalResults")
    success: bool = Field(True, alias="Response")
