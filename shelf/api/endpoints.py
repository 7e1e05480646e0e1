"""Typed fetch functions for the TMDB API."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx

from shelf.api.client import APIClient, QueryValue
from shelf.api.errors import APIError, APIErrors, ErrorCode
from shelf.api.models import (
    Genre,
    GenreListResponse,
    TmdbTvDetails,
    TmdbTvSearchResponse,
    TmdbTvSeasonDetails,
)
from shelf.config import Settings

log = logging.getLogger(__name__)

T = TypeVar("T")


def _tmdb_url(
    client: APIClient,
    settings: Settings,
    endpoint: str,
    params: dict[str, QueryValue] | None = None,
) -> httpx.URL:
    if not settings.tmdb_configured:
        raise APIErrors.TMDB.not_configured()
    return client.build_url(
        f"{settings.tmdb_base_url}{endpoint}",
        {"api_key": settings.tmdb_api_key, **(params or {})},
    )


async def _fetch_or_not_found(
    client: APIClient, url: httpx.URL, model: type[T], context: str
) -> T:
    try:
        return await client.fetch(url, model)
    except APIError as exc:
        if exc.code is ErrorCode.NOT_FOUND:
            raise APIErrors.TMDB.not_found(context) from exc
        raise


async def search_tv(
    client: APIClient,
    settings: Settings,
    query: str,
    *,
    page: int = 1,
) -> TmdbTvSearchResponse:
    """Search TV series by name."""
    url = _tmdb_url(client, settings, "/search/tv", {"query": query, "page": page})
    return await client.fetch(url, TmdbTvSearchResponse)


async def get_tv_details(
    client: APIClient, settings: Settings, tmdb_id: str
) -> TmdbTvDetails:
    """Fetch series details, including its seasons."""
    url = _tmdb_url(client, settings, f"/tv/{tmdb_id}")
    return await _fetch_or_not_found(client, url, TmdbTvDetails, "TV show")


async def get_tv_season(
    client: APIClient, settings: Settings, tmdb_id: str, season_number: int
) -> TmdbTvSeasonDetails:
    """Fetch the episodes of one season."""
    url = _tmdb_url(client, settings, f"/tv/{tmdb_id}/season/{season_number}")
    return await _fetch_or_not_found(client, url, TmdbTvSeasonDetails, "Season")


async def get_movie_genres(client: APIClient, settings: Settings) -> list[Genre]:
    """Fetch the movie genre list. Rarely changes, so callers should cache it."""
    url = _tmdb_url(client, settings, "/genre/movie/list")
    data = await client.fetch(url, GenreListResponse)
    log.debug("Fetched %d TMDB genres", len(data.genres))
    return data.genres
