"""OMDb API client.

Looks up titles and runs searches against the OMDb movie
metadata API, returning typed results.

Functions:
    imdb_id: Start a find query by IMDb ID.
    title: Start a find query by title.
    search: Start a search query.

Classes:
    FindQuery, SearchQuery: Immutable query builders.
    MovieRecord, EpisodeSummary: Find results.
    SearchResultSet, SearchResultSummary: Search results.
    MediaKind, PlotLength: Filter enums.

Exceptions:
    OMDbError: Base error.
    OMDbTransportError: Network failure.
    OMDbStatusError: Non-success HTTP status.
    OMDbDecodeError: Undecodable response body.
    OMDbApiError: Lookup rejected by OMDb.
    OMDbOtherError: Request construction failure.

Usage:
    import omdb_client

    movie = omdb_client.imdb_id("tt0032138").with_api_key(key).get()
"""

from omdb_client.errors import (
    OMDbApiError,
    OMDbDecodeError,
    OMDbError,
    OMDbOtherError,
    OMDbStatusError,
    OMDbTransportError,
)
from omdb_client.query import FindQuery, SearchQuery, imdb_id, search, title
from omdb_client.types import (
    EpisodeSummary,
    MediaKind,
    MovieRecord,
    PlotLength,
    SearchResultSet,
    SearchResultSummary,
)

__all__ = [
    # Queries
    "imdb_id",
    "title",
    "search",
    "FindQuery",
    "SearchQuery",
    # Types
    "MediaKind",
    "PlotLength",
    "MovieRecord",
    "EpisodeSummary",
    "SearchResultSet",
    "SearchResultSummary",
    # Errors
    "OMDbError",
    "OMDbTransportError",
    "OMDbStatusError",
    "OMDbDecodeError",
    "OMDbApiError",
    "OMDbOtherError",
]
