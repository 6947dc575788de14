"""Shared pytest fixtures for OMDb client tests."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from omdb_client.client import RawResponse
from omdb_client.settings import settings


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the settings singleton to defaults for reproducible tests."""
    monkeypatch.setattr(settings.omdb, "api_key", "")
    monkeypatch.setattr(settings.omdb, "base_url", "https://www.omdbapi.com/")
    monkeypatch.setattr(settings.omdb, "api_version", "1")
    monkeypatch.setattr(settings.omdb, "strict_media_kind", False)
    monkeypatch.setattr(settings.logging, "log_dir", None)


def make_response(payload: Any, status_code: int = 200) -> RawResponse:
    """Build a RawResponse carrying a JSON payload."""
    return RawResponse(status_code=status_code, body=json.dumps(payload).encode("utf-8"))


@pytest.fixture
def json_response() -> Callable[..., RawResponse]:
    """Factory building RawResponse objects from payloads."""
    return make_response


@pytest.fixture
def sample_movie_payload() -> dict[str, Any]:
    """OMDb find response for a movie."""
    return {
        "Title": "The Wizard of Oz",
        "Year": "1939",
        "Rated": "PG",
        "Released": "25 Aug 1939",
        "Runtime": "102 min",
        "Genre": "Adventure, Family, Fantasy",
        "Director": "Victor Fleming, George Cukor",
        "Writer": "Noel Langley, Florence Ryerson",
        "Actors": "Judy Garland, Frank Morgan, Ray Bolger",
        "Plot": "Young Dorothy Gale and her dog Toto are swept away by a tornado.",
        "Language": "English",
        "Country": "United States",
        "Awards": "Won 2 Oscars. 13 wins & 16 nominations total",
        "Poster": "https://m.media-amazon.com/images/M/oz.jpg",
        "Metascore": "92",
        "imdbRating": "8.1",
        "imdbVotes": "419,372",
        "imdbID": "tt0032138",
        "Type": "movie",
        "Response": "True",
    }


@pytest.fixture
def sample_season_payload() -> dict[str, Any]:
    """OMDb find response for a series season, mixed numeric encodings."""
    return {
        "Title": "Silicon Valley",
        "Season": "1",
        "totalSeasons": 6,
        "Type": "series",
        "imdbID": "tt2575988",
        "Episodes": [
            {
                "Title": "Minimum Viable Product",
                "Released": "2014-04-06",
                "Episode": "1",
                "imdbRating": "8.0",
                "imdbID": "tt3222784",
            },
            {
                "Title": "The Cap Table",
                "Released": "2014-04-13",
                "Episode": 2,
                "imdbRating": 8.1,
                "imdbID": "tt3656938",
            },
        ],
        "Response": "True",
    }


@pytest.fixture
def sample_search_payload() -> dict[str, Any]:
    """OMDb search response."""
    return {
        "Search": [
            {
                "Title": "Batman Begins",
                "Year": "2005",
                "imdbID": "tt0372784",
                "Type": "movie",
                "Poster": "https://m.media-amazon.com/images/M/begins.jpg",
            },
            {
                "Title": "Batman: The Animated Series",
                "Year": "1992–1995",
                "imdbID": "tt0103359",
                "Type": "series",
                "Poster": "N/A",
            },
        ],
        "totalResults": "583",
        "Response": "True",
    }


@pytest.fixture
def mock_transport(sample_movie_payload: dict[str, Any]) -> MagicMock:
    """Blocking transport double answering with the movie payload."""
    transport = MagicMock()
    transport.get.return_value = make_response(sample_movie_payload)
    return transport


@pytest.fixture
def mock_async_transport(sample_movie_payload: dict[str, Any]) -> AsyncMock:
    """Async transport double answering with the movie payload."""
    transport = AsyncMock()
    transport.get.return_value = make_response(sample_movie_payload)
    return transport
