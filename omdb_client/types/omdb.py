"""OMDb API raw response models.

Pydantic models mirroring the JSON field names returned by
OMDb. Text fields are lenient: absent, null or non-string
values decode to None. Numeric fields that OMDb sends either
as JSON numbers or as strings go through the flexible
numeric rules below.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# =============================================================================
# DECODE RULES
# =============================================================================


def _lenient_str(value: Any) -> str | None:
    """Keep strings, drop anything else to None."""
    return value if isinstance(value, str) else None


def _lenient_list(value: Any) -> list[Any] | None:
    """Keep arrays, drop anything else to None."""
    return value if isinstance(value, list) else None


def _numeric_text(value: str) -> str:
    """Reject padded or underscore-grouped numeric strings."""
    if value != value.strip() or "_" in value:
        raise ValueError(f"expected a plain numeric string, got {value!r}")
    return value


def _flexible_int(value: Any) -> int:
    """Decode an integer sent as a JSON number or a numeric string.

    Raises:
        ValueError: For booleans, arrays, objects, negative or
            non-integral numbers and unparsable strings.
    """
    # bool is an int subclass
    if isinstance(value, bool):
        raise ValueError("expected a number or numeric string, got boolean")
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"expected a non-negative integer string, got {value!r}")
        result = int(value)
    elif isinstance(value, int):
        result = value
    elif isinstance(value, float) and value.is_integer():
        result = int(value)
    elif isinstance(value, float):
        raise ValueError(f"expected an integer, got {value}")
    else:
        raise ValueError(f"expected a number or numeric string, got {type(value).__name__}")
    if result < 0:
        raise ValueError(f"expected a non-negative integer, got {result}")
    return result


def _flexible_optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return _flexible_int(value)


def _flexible_float(value: Any) -> float:
    """Decode a float sent as a JSON number or a numeric string.

    Raises:
        ValueError: For booleans, arrays, objects and unparsable strings.
    """
    if isinstance(value, bool):
        raise ValueError("expected a number or numeric string, got boolean")
    if isinstance(value, str):
        return float(_numeric_text(value))
    if isinstance(value, (int, float)):
        return float(value)
    raise ValueError(f"expected a number or numeric string, got {type(value).__name__}")


LenientStr = Annotated[str | None, BeforeValidator(_lenient_str)]
FlexibleInt = Annotated[int, BeforeValidator(_flexible_int)]
FlexibleOptionalInt = Annotated[int | None, BeforeValidator(_flexible_optional_int)]
FlexibleFloat = Annotated[float, BeforeValidator(_flexible_float)]


# =============================================================================
# FIND RESPONSE
# =============================================================================


class OMDbEpisodeData(BaseModel):
    """Episode entry from a season lookup (``Episodes`` array)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: LenientStr = Field(default=None, alias="Title")
    released: LenientStr = Field(default=None, alias="Released")
    episode: FlexibleInt = Field(alias="Episode")
    imdb_rating: FlexibleFloat = Field(alias="imdbRating")
    imdb_id: LenientStr = Field(default=None, alias="imdbID")


class OMDbFindResponse(BaseModel):
    """Response from a find request (``i=`` or ``t=``).

    ``Response`` is the only mandatory field; everything else
    is absent when the lookup failed.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response: str = Field(alias="Response")
    error: LenientStr = Field(default=None, alias="Error")

    # Descriptive text
    title: LenientStr = Field(default=None, alias="Title")
    year: LenientStr = Field(default=None, alias="Year")
    rated: LenientStr = Field(default=None, alias="Rated")
    released: LenientStr = Field(default=None, alias="Released")
    runtime: LenientStr = Field(default=None, alias="Runtime")
    genre: LenientStr = Field(default=None, alias="Genre")
    director: LenientStr = Field(default=None, alias="Director")
    writer: LenientStr = Field(default=None, alias="Writer")
    actors: LenientStr = Field(default=None, alias="Actors")
    plot: LenientStr = Field(default=None, alias="Plot")
    language: LenientStr = Field(default=None, alias="Language")
    country: LenientStr = Field(default=None, alias="Country")
    awards: LenientStr = Field(default=None, alias="Awards")
    poster: LenientStr = Field(default=None, alias="Poster")

    # Scores ("N/A" when missing upstream)
    metascore: LenientStr = Field(default=None, alias="Metascore")
    imdb_rating: LenientStr = Field(default=None, alias="imdbRating")
    imdb_votes: LenientStr = Field(default=None, alias="imdbVotes")

    # Identity
    imdb_id: LenientStr = Field(default=None, alias="imdbID")
    kind: LenientStr = Field(default=None, alias="Type")

    # Series only
    season: FlexibleOptionalInt = Field(default=None, alias="Season")
    total_seasons: FlexibleOptionalInt = Field(default=None, alias="totalSeasons")
    episodes: Annotated[list[OMDbEpisodeData] | None, BeforeValidator(_lenient_list)] = Field(
        default=None,
        alias="Episodes",
    )


# =============================================================================
# SEARCH RESPONSE
# =============================================================================


class OMDbSearchItemData(BaseModel):
    """Search hit from the ``Search`` array."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: LenientStr = Field(default=None, alias="Title")
    year: LenientStr = Field(default=None, alias="Year")
    imdb_id: LenientStr = Field(default=None, alias="imdbID")
    kind: LenientStr = Field(default=None, alias="Type")
    poster: LenientStr = Field(default=None, alias="Poster")


class OMDbSearchResponse(BaseModel):
    """Response from a search request (``s=``)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    response: str = Field(alias="Response")
    error: LenientStr = Field(default=None, alias="Error")

    search: Annotated[list[OMDbSearchItemData] | None, BeforeValidator(_lenient_list)] = Field(
        default=None,
        alias="Search",
    )
    total_results: LenientStr = Field(default=None, alias="totalResults")
