"""OMDb client data types package.

Exports the raw response models (pydantic) and the domain
types returned to callers.

Usage:
    from omdb_client.types import MovieRecord, OMDbFindResponse
"""

from omdb_client.types.domain import (
    EpisodeSummary,
    MediaKind,
    MovieRecord,
    PlotLength,
    SearchResultSet,
    SearchResultSummary,
)
from omdb_client.types.omdb import (
    OMDbEpisodeData,
    OMDbFindResponse,
    OMDbSearchItemData,
    OMDbSearchResponse,
)

__all__ = [
    # Domain
    "MediaKind",
    "PlotLength",
    "MovieRecord",
    "EpisodeSummary",
    "SearchResultSet",
    "SearchResultSummary",
    # Raw
    "OMDbFindResponse",
    "OMDbEpisodeData",
    "OMDbSearchResponse",
    "OMDbSearchItemData",
]
