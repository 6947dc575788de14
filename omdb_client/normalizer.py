"""OMDb response normalizer.

Decodes raw OMDb bodies, checks the API success flag and
projects the raw models into domain types, defaulting absent
fields.
"""

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from omdb_client.errors import OMDbApiError, OMDbDecodeError
from omdb_client.settings import settings
from omdb_client.types import (
    EpisodeSummary,
    MediaKind,
    MovieRecord,
    OMDbEpisodeData,
    OMDbFindResponse,
    OMDbSearchItemData,
    OMDbSearchResponse,
    SearchResultSet,
    SearchResultSummary,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class OMDbNormalizer:
    """Turns OMDb response bodies into domain types.

    Args:
        strict_media_kind: Raise on unknown ``Type`` tokens instead
            of falling back to movie. Defaults to OMDB_STRICT_MEDIA_KIND.
    """

    UNDEFINED_ERROR = "undefined"

    def __init__(self, strict_media_kind: bool | None = None) -> None:
        if strict_media_kind is None:
            strict_media_kind = settings.omdb.strict_media_kind
        self._strict_media_kind = strict_media_kind

    # -------------------------------------------------------------------------
    # Entry Points
    # -------------------------------------------------------------------------

    def parse_movie(self, body: bytes | str) -> MovieRecord:
        """Decode, check and normalize a find response body.

        Raises:
            OMDbDecodeError: When the body cannot be decoded.
            OMDbApiError: When OMDb reports a failed lookup.
        """
        raw = self.decode(OMDbFindResponse, body)
        self.check_success(raw)
        return self.normalize_movie(raw)

    def parse_search(self, body: bytes | str) -> SearchResultSet:
        """Decode, check and normalize a search response body.

        Raises:
            OMDbDecodeError: When the body cannot be decoded.
            OMDbApiError: When OMDb reports a failed search.
        """
        raw = self.decode(OMDbSearchResponse, body)
        self.check_success(raw)
        return self.normalize_search(raw)

    # -------------------------------------------------------------------------
    # Decoding
    # -------------------------------------------------------------------------

    @staticmethod
    def decode(model: type[ModelT], body: bytes | str) -> ModelT:
        """Decode a JSON body into a raw response model.

        Args:
            model: Raw response model class.
            body: JSON body.

        Returns:
            Decoded raw model.

        Raises:
            OMDbDecodeError: On malformed JSON or invalid numeric fields.
        """
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise OMDbDecodeError(e) from e

    @classmethod
    def check_success(cls, raw: OMDbFindResponse | OMDbSearchResponse) -> None:
        """Raise when the ``Response`` flag is not "True".

        Raises:
            OMDbApiError: With the upstream ``Error`` text or "undefined".
        """
        if raw.response.lower() != "true":
            raise OMDbApiError(raw.error or cls.UNDEFINED_ERROR)

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def normalize_movie(self, raw: OMDbFindResponse) -> MovieRecord:
        """Project a successful find response.

        Args:
            raw: Decoded find response.

        Returns:
            Movie record with absent fields defaulted.
        """
        return MovieRecord(
            title=_text(raw.title),
            year=_text(raw.year),
            rated=_text(raw.rated),
            released=_text(raw.released),
            runtime=_text(raw.runtime),
            genre=_text(raw.genre),
            director=_text(raw.director),
            writer=_text(raw.writer),
            actors=_text(raw.actors),
            plot=_text(raw.plot),
            language=_text(raw.language),
            country=_text(raw.country),
            awards=_text(raw.awards),
            poster=_text(raw.poster),
            metascore=_text(raw.metascore),
            imdb_rating=_text(raw.imdb_rating),
            imdb_votes=_text(raw.imdb_votes),
            imdb_id=_text(raw.imdb_id),
            kind=self._resolve_kind(raw.kind),
            season=raw.season or 0,
            total_seasons=raw.total_seasons or 0,
            episodes=[self.normalize_episode(e) for e in raw.episodes or []],
        )

    @staticmethod
    def normalize_episode(raw: OMDbEpisodeData) -> EpisodeSummary:
        return EpisodeSummary(
            title=_text(raw.title),
            released=_text(raw.released),
            episode=raw.episode,
            imdb_rating=raw.imdb_rating,
            imdb_id=_text(raw.imdb_id),
        )

    def normalize_search(self, raw: OMDbSearchResponse) -> SearchResultSet:
        """Project a successful search response.

        Args:
            raw: Decoded search response.

        Returns:
            Result page; ``total_results`` is 0 when absent or unparsable.
        """
        return SearchResultSet(
            results=[self.normalize_search_item(item) for item in raw.search or []],
            total_results=_parse_count(raw.total_results),
        )

    def normalize_search_item(self, raw: OMDbSearchItemData) -> SearchResultSummary:
        return SearchResultSummary(
            title=_text(raw.title),
            year=_text(raw.year),
            imdb_id=_text(raw.imdb_id),
            poster=_text(raw.poster),
            kind=self._resolve_kind(raw.kind),
        )

    def _resolve_kind(self, token: str | None) -> MediaKind:
        """Map a ``Type`` token, falling back to movie.

        Raises:
            OMDbDecodeError: On an unknown token in strict mode.
        """
        if token is None:
            return MediaKind.MOVIE
        kind = MediaKind.from_wire(token)
        if kind is not None:
            return kind
        if self._strict_media_kind:
            raise OMDbDecodeError(ValueError(f"Unknown media kind: {token!r}"))
        logger.debug(f"Unknown media kind {token!r}, using movie")
        return MediaKind.MOVIE


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _text(value: str | None) -> str:
    return value if value is not None else ""


def _parse_count(value: str | None) -> int:
    """Parse a decimal count string, 0 when absent or invalid."""
    if value is None:
        return 0
    try:
        count = int(value)
    except ValueError:
        logger.debug(f"Invalid totalResults: {value!r}")
        return 0
    return max(count, 0)
