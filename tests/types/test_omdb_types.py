"""Unit tests for OMDb raw response models.

Covers the lenient text rule and the flexible numeric rules.
"""

from typing import Any

import pytest
from pydantic import ValidationError
from pytest import approx

from omdb_client.types import OMDbEpisodeData, OMDbFindResponse, OMDbSearchResponse


def _episode(**overrides: Any) -> dict[str, Any]:
    base = {
        "Title": "Pilot",
        "Released": "2014-04-06",
        "Episode": "1",
        "imdbRating": "8.0",
        "imdbID": "tt3222784",
    }
    base.update(overrides)
    return base


class TestFlexibleEpisodeNumber:
    """Episode numbers arrive as strings or numbers."""

    @staticmethod
    @pytest.mark.parametrize("value", ["7", 7, 7.0])
    def test_accepted_shapes(value: Any) -> None:
        episode = OMDbEpisodeData.model_validate(_episode(Episode=value))
        assert episode.episode == 7
        assert isinstance(episode.episode, int)

    @staticmethod
    @pytest.mark.parametrize(
        "value",
        [True, False, [7], {"n": 7}, "seven", "", 7.5, -1, None, " 7 ", "1_000", "+7", "-1", "7.0"],
    )
    def test_rejected_shapes(value: Any) -> None:
        with pytest.raises(ValidationError):
            OMDbEpisodeData.model_validate(_episode(Episode=value))

    @staticmethod
    def test_missing_is_rejected() -> None:
        raw = _episode()
        del raw["Episode"]
        with pytest.raises(ValidationError):
            OMDbEpisodeData.model_validate(raw)


class TestFlexibleRating:
    """Episode ratings arrive as strings or numbers."""

    @staticmethod
    @pytest.mark.parametrize("value", ["8.4", 8.4])
    def test_accepted_shapes(value: Any) -> None:
        episode = OMDbEpisodeData.model_validate(_episode(imdbRating=value))
        assert episode.imdb_rating == approx(8.4)

    @staticmethod
    def test_integer_rating() -> None:
        episode = OMDbEpisodeData.model_validate(_episode(imdbRating=9))
        assert episode.imdb_rating == approx(9.0)
        assert isinstance(episode.imdb_rating, float)

    @staticmethod
    @pytest.mark.parametrize("value", [True, [8.4], "N/A", " 8 ", "8_4", ""])
    def test_rejected_shapes(value: Any) -> None:
        with pytest.raises(ValidationError):
            OMDbEpisodeData.model_validate(_episode(imdbRating=value))


class TestFindResponse:
    """Tests for OMDbFindResponse decoding."""

    @staticmethod
    def test_decodes_aliases(sample_movie_payload: dict[str, Any]) -> None:
        raw = OMDbFindResponse.model_validate(sample_movie_payload)
        assert raw.response == "True"
        assert raw.title == "The Wizard of Oz"
        assert raw.imdb_id == "tt0032138"
        assert raw.kind == "movie"
        assert raw.season is None
        assert raw.episodes is None

    @staticmethod
    def test_wrong_typed_text_becomes_none() -> None:
        raw = OMDbFindResponse.model_validate({"Response": "True", "Title": 42, "Plot": None})
        assert raw.title is None
        assert raw.plot is None

    @staticmethod
    def test_season_shapes() -> None:
        raw = OMDbFindResponse.model_validate({"Response": "True", "Season": "3", "totalSeasons": 6})
        assert raw.season == 3
        assert raw.total_seasons == 6

    @staticmethod
    def test_null_season_is_none() -> None:
        raw = OMDbFindResponse.model_validate({"Response": "True", "Season": None})
        assert raw.season is None

    @staticmethod
    def test_invalid_season_rejected() -> None:
        with pytest.raises(ValidationError):
            OMDbFindResponse.model_validate({"Response": "True", "totalSeasons": "N/A"})

    @staticmethod
    def test_response_required() -> None:
        with pytest.raises(ValidationError):
            OMDbFindResponse.model_validate({"Title": "Orphan"})

    @staticmethod
    def test_episodes_not_a_list_becomes_none() -> None:
        raw = OMDbFindResponse.model_validate({"Response": "True", "Episodes": "N/A"})
        assert raw.episodes is None

    @staticmethod
    def test_extra_fields_ignored() -> None:
        raw = OMDbFindResponse.model_validate(
            {"Response": "True", "Ratings": [{"Source": "Metacritic", "Value": "92/100"}]}
        )
        assert raw.response == "True"


class TestSearchResponse:
    @staticmethod
    def test_decodes(sample_search_payload: dict[str, Any]) -> None:
        raw = OMDbSearchResponse.model_validate(sample_search_payload)
        assert raw.total_results == "583"
        assert raw.search is not None
        assert raw.search[1].kind == "series"

    @staticmethod
    def test_failure_payload() -> None:
        raw = OMDbSearchResponse.model_validate({"Response": "False", "Error": "Too many results."})
        assert raw.search is None
        assert raw.error == "Too many results."
