"""Shared test fixtures."""

from __future__ import annotations

import pytest

from shelf.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(tmdb_api_key="test_key")


@pytest.fixture
def tv_search_payload() -> dict:
    """A /search/tv page with one dated and one undated series."""
    return {
        "page": 1,
        "results": [
            {
                "id": 1396,
                "name": "Breaking Bad",
                "original_name": "Breaking Bad",
                "first_air_date": "2008-01-20",
                "overview": "A chemistry teacher turns to crime.",
                "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
                "vote_average": 8.9,
                "vote_count": 12000,
                "original_language": "en",
                "popularity": 300.5,
            },
            {
                "id": 99999,
                "name": "Untitled Pilot",
                "first_air_date": None,
                "poster_path": None,
                "vote_average": None,
            },
        ],
        "total_pages": 1,
        "total_results": 2,
    }


@pytest.fixture
def tv_details_payload() -> dict:
    """/tv/{id} with genres, networks and two seasons."""
    return {
        "id": 1396,
        "name": "Breaking Bad",
        "overview": "A chemistry teacher turns to crime.",
        "first_air_date": "2008-01-20",
        "last_air_date": "2013-09-29",
        "status": "Ended",
        "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
        "genres": [{"id": 18, "name": "Drama"}, {"id": 80, "name": "Crime"}],
        "networks": [{"id": 174, "name": "AMC"}, {"id": 1, "name": "Other"}],
        "seasons": [
            {"season_number": 0, "name": "Specials", "overview": None, "poster_path": None},
            {
                "season_number": 1,
                "name": "Season 1",
                "overview": "The beginning.",
                "poster_path": "/season1.jpg",
            },
        ],
    }


@pytest.fixture
def tv_season_payload() -> dict:
    """/tv/{id}/season/1 with two episodes."""
    return {
        "id": 3572,
        "episodes": [
            {
                "episode_number": 1,
                "name": "Pilot",
                "overview": "Walter gets a diagnosis.",
                "air_date": "2008-01-20",
                "still_path": "/pilot.jpg",
                "runtime": 58,
            },
            {"episode_number": 2, "name": "Cat's in the Bag...", "runtime": None},
        ],
    }


@pytest.fixture
def genres_payload() -> dict:
    return {
        "genres": [
            {"id": 28, "name": "Action"},
            {"id": 35, "name": "Comedy"},
            {"id": 18, "name": "Drama"},
        ]
    }
