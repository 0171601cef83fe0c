# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""omdbquery - fluent async client for the OMDb API."""

from omdbquery.__about__ import __version__
from omdbquery.errors import (
    DecodeError,
    OMDbError,
    RemoteError,
    StatusError,
    TransportError,
)
from omdbquery.models import (
    Episode,
    Item,
    Kind,
    Plot,
    Rating,
    SearchResult,
    SearchResultItem,
)
from omdbquery.query import (
    IdQuery,
    Lookup,
    SearchQuery,
    TitleQuery,
    imdb_id,
    search,
    title,
)
from omdbquery.settings import InvalidSettingsError, MissingAPIKeyError

__all__ = [
    "__version__",
    "DecodeError",
    "Episode",
    "IdQuery",
    "InvalidSettingsError",
    "Item",
    "Kind",
    "Lookup",
    "MissingAPIKeyError",
    "OMDbError",
    "Plot",
    "Rating",
    "RemoteError",
    "SearchQuery",
    "SearchResult",
    "SearchResultItem",
    "StatusError",
    "TitleQuery",
    "TransportError",
    "imdb_id",
    "search",
    "title",
]
