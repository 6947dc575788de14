"""Domain types returned to callers.

Dataclasses and enums produced by the normalizer from raw
OMDb responses.
"""

from dataclasses import dataclass, field
from enum import Enum


class MediaKind(Enum):
    """Kind of title (OMDb's ``type`` / ``Type``)."""

    MOVIE = "movie"
    SERIES = "series"
    EPISODE = "episode"
    GAME = "game"

    @classmethod
    def from_wire(cls, token: str) -> "MediaKind | None":
        """Parse a wire token, returning None when it is not recognized."""
        for kind in cls:
            if kind.value == token:
                return kind
        return None

    def to_wire(self) -> str:
        """Lowercase token sent as the ``type`` parameter."""
        return self.value


class PlotLength(Enum):
    """Requested plot verbosity (request parameter only)."""

    SHORT = "short"
    FULL = "full"

    def to_wire(self) -> str:
        """Token sent as the ``plot`` parameter."""
        return self.value


@dataclass
class EpisodeSummary:
    """One episode listed in a season lookup.

    Attributes:
        title: Episode title.
        released: Release date as returned by the API.
        episode: Episode number within the season.
        imdb_rating: Episode rating.
        imdb_id: IMDb identifier of the episode.
    """

    title: str
    released: str
    episode: int
    imdb_rating: float
    imdb_id: str


@dataclass
class MovieRecord:
    """A movie, series, episode or game resolved by a find query.

    Metascore, rating and votes stay text because OMDb
    returns ``"N/A"`` for missing values. Season fields are
    only meaningful for series.
    """

    title: str = ""
    year: str = ""
    rated: str = ""
    released: str = ""
    runtime: str = ""
    genre: str = ""
    director: str = ""
    writer: str = ""
    actors: str = ""
    plot: str = ""
    language: str = ""
    country: str = ""
    awards: str = ""
    poster: str = ""
    metascore: str = ""
    imdb_rating: str = ""
    imdb_votes: str = ""
    imdb_id: str = ""
    kind: MediaKind = MediaKind.MOVIE
    season: int = 0
    total_seasons: int = 0
    episodes: list[EpisodeSummary] = field(default_factory=list)


@dataclass
class SearchResultSummary:
    """A search hit. Carries less information than ``MovieRecord``."""

    title: str = ""
    year: str = ""
    imdb_id: str = ""
    poster: str = ""
    kind: MediaKind = MediaKind.MOVIE


@dataclass
class SearchResultSet:
    """One page of search results.

    Attributes:
        results: Hits on the requested page.
        total_results: Total hits across all pages.
    """

    results: list[SearchResultSummary] = field(default_factory=list)
    total_results: int = 0
