"""OMDb query builders.

Builders are immutable: every ``with_*`` call returns a new
query, so a request already sent can never be altered and a
query can be executed again to repeat the request.

Usage:
    from omdb_client import MediaKind, imdb_id, search, title

    movie = imdb_id("tt0032138").with_api_key(key).with_year(1939).get()
    show = title("Silicon Valley").with_kind(MediaKind.SERIES).get()
    page = search("Batman").with_page(2).get()
"""

from dataclasses import dataclass, replace
from typing import Any

from omdb_client.client import AsyncTransport, Transport, adispatch, dispatch
from omdb_client.normalizer import OMDbNormalizer
from omdb_client.settings import settings
from omdb_client.types import MediaKind, MovieRecord, PlotLength, SearchResultSet

# =============================================================================
# FIND QUERY
# =============================================================================


@dataclass(frozen=True)
class FindQuery:
    """Lookup of a single title.

    The IMDb ID selector wins over the title when both are set.
    Build it with ``imdb_id()`` or ``title()``.
    """

    imdb_id: str | None = None
    title: str | None = None
    api_key: str | None = None
    kind: MediaKind | None = None
    year: str | None = None
    plot: PlotLength | None = None

    def with_kind(self, kind: MediaKind) -> "FindQuery":
        """Restrict the lookup to a kind of media."""
        _require_type("kind", kind, MediaKind)
        return replace(self, kind=kind)

    def with_year(self, year: str | int) -> "FindQuery":
        """Restrict the lookup to a year (or a range such as "2014-")."""
        _require_type("year", year, (str, int))
        return replace(self, year=str(year))

    def with_api_key(self, api_key: str) -> "FindQuery":
        _require_type("api_key", api_key, str)
        return replace(self, api_key=api_key)

    def with_plot(self, plot: PlotLength) -> "FindQuery":
        """Choose the plot length returned."""
        _require_type("plot", plot, PlotLength)
        return replace(self, plot=plot)

    def to_params(self) -> list[tuple[str, str]]:
        """Serialize to ordered query parameters.

        Returns:
            Selector, apikey, type, y, plot (unset ones skipped).
        """
        params: list[tuple[str, str]] = []

        if self.imdb_id is not None:
            params.append(("i", self.imdb_id))
        elif self.title is not None:
            params.append(("t", self.title))

        api_key = _resolve_api_key(self.api_key)
        if api_key is not None:
            params.append(("apikey", api_key))
        if self.kind is not None:
            params.append(("type", self.kind.to_wire()))
        if self.year is not None:
            params.append(("y", self.year))
        if self.plot is not None:
            params.append(("plot", self.plot.to_wire()))

        return params

    def get(self, transport: Transport | None = None) -> MovieRecord:
        """Perform the request and return the matching title.

        Args:
            transport: Optional transport (default: httpx).

        Returns:
            Fully normalized movie record.

        Raises:
            OMDbError: Any failure, classified (see ``omdb_client.errors``).
        """
        response = dispatch(self.to_params(), transport)
        return OMDbNormalizer().parse_movie(response.body)

    async def aget(self, transport: AsyncTransport | None = None) -> MovieRecord:
        """Asynchronous counterpart of ``get``."""
        response = await adispatch(self.to_params(), transport)
        return OMDbNormalizer().parse_movie(response.body)


# =============================================================================
# SEARCH QUERY
# =============================================================================


@dataclass(frozen=True)
class SearchQuery:
    """Free-text search returning one page of results.

    Build it with ``search()``.
    """

    search: str
    api_key: str | None = None
    kind: MediaKind | None = None
    year: str | None = None
    page: int | None = None

    def with_api_key(self, api_key: str) -> "SearchQuery":
        _require_type("api_key", api_key, str)
        return replace(self, api_key=api_key)

    def with_kind(self, kind: MediaKind) -> "SearchQuery":
        """Restrict results to a kind of media."""
        _require_type("kind", kind, MediaKind)
        return replace(self, kind=kind)

    def with_year(self, year: str | int) -> "SearchQuery":
        """Restrict results to a year."""
        _require_type("year", year, (str, int))
        return replace(self, year=str(year))

    def with_page(self, page: int) -> "SearchQuery":
        """Select the result page (1-based)."""
        _require_type("page", page, int)
        return replace(self, page=page)

    def to_params(self) -> list[tuple[str, str]]:
        """Serialize to ordered query parameters.

        Returns:
            s, apikey, type, y, page (unset ones skipped).
        """
        params: list[tuple[str, str]] = [("s", self.search)]

        api_key = _resolve_api_key(self.api_key)
        if api_key is not None:
            params.append(("apikey", api_key))
        if self.kind is not None:
            params.append(("type", self.kind.to_wire()))
        if self.year is not None:
            params.append(("y", self.year))
        if self.page is not None:
            params.append(("page", str(self.page)))

        return params

    def get(self, transport: Transport | None = None) -> SearchResultSet:
        """Perform the request and return the requested page.

        Args:
            transport: Optional transport (default: httpx).

        Returns:
            Fully normalized result page.

        Raises:
            OMDbError: Any failure, classified (see ``omdb_client.errors``).
        """
        response = dispatch(self.to_params(), transport)
        return OMDbNormalizer().parse_search(response.body)

    async def aget(self, transport: AsyncTransport | None = None) -> SearchResultSet:
        """Asynchronous counterpart of ``get``."""
        response = await adispatch(self.to_params(), transport)
        return OMDbNormalizer().parse_search(response.body)


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def imdb_id(value: str) -> FindQuery:
    """Start a find query selecting a title by IMDb ID."""
    _require_type("imdb_id", value, str)
    return FindQuery(imdb_id=value)


def title(value: str) -> FindQuery:
    """Start a find query selecting a title by name."""
    _require_type("title", value, str)
    return FindQuery(title=value)


def search(text: str) -> SearchQuery:
    """Start a search query."""
    _require_type("search", text, str)
    return SearchQuery(search=text)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _require_type(name: str, value: Any, expected: type | tuple[type, ...]) -> None:
    # bool passes isinstance(..., int)
    if isinstance(value, bool) or not isinstance(value, expected):
        raise TypeError(f"{name} must be {_type_names(expected)}, got {type(value).__name__}")


def _type_names(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def _resolve_api_key(api_key: str | None) -> str | None:
    """Query key, else the configured OMDB_API_KEY, else None."""
    if api_key is not None:
        return api_key
    return settings.omdb.api_key or None
