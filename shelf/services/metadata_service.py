"""Orchestrator: TMDB fetches, result shaping, and the genre cache."""

from __future__ import annotations

import logging

from shelf.api.client import APIClient
from shelf.api.endpoints import (
    get_movie_genres,
    get_tv_details,
    get_tv_season,
    search_tv,
)
from shelf.api.models import (
    Genre,
    TmdbTv,
    TvEpisodeSummary,
    TvSearchResult,
    TvSeasonSummary,
    TvSeriesDetails,
)
from shelf.config import Settings
from shelf.services.cache import SingleFlightTTLCache

log = logging.getLogger(__name__)


class MetadataService:
    """Looks up media metadata on TMDB for the rest of the app.

    Owns its HTTP client and the genre cache; create one per process at the
    composition root and share it.
    """

    def __init__(
        self,
        settings: Settings,
        client: APIClient | None = None,
        genres_cache: SingleFlightTTLCache[list[Genre]] | None = None,
    ) -> None:
        self.settings = settings
        self.client = client or APIClient(timeout=settings.request_timeout)
        self.genres_cache = genres_cache or SingleFlightTTLCache(
            settings.genres_cache_ttl_ms, self._fetch_genres
        )

    async def close(self) -> None:
        await self.client.close()

    def _image_url(self, path: str | None) -> str | None:
        if not path:
            return None
        return f"{self.settings.tmdb_image_base_url}{path}"

    # ── Genres ──

    async def _fetch_genres(self) -> list[Genre]:
        log.info("Refreshing TMDB movie genres")
        return await get_movie_genres(self.client, self.settings)

    async def get_genres(self) -> list[Genre]:
        """Movie genres, served from cache for ``genres_cache_ttl_ms``."""
        return await self.genres_cache.get()

    def refresh_genres(self) -> None:
        """Force the next get_genres() to hit TMDB."""
        self.genres_cache.invalidate()

    # ── TV ──

    async def search_tv(self, query: str, page: int = 1) -> list[TvSearchResult]:
        if not query:
            raise ValueError("query must not be empty")
        if page < 1:
            raise ValueError("page must be >= 1")
        response = await search_tv(self.client, self.settings, query, page=page)
        return [self._format_search_result(tv) for tv in response.results]

    async def get_series(self, tmdb_id: str) -> TvSeriesDetails:
        series = await get_tv_details(self.client, self.settings, tmdb_id)
        return TvSeriesDetails(
            id=str(series.id),
            title=series.name,
            overview=series.overview,
            poster_path=self._image_url(series.poster_path),
            first_air_date=series.first_air_date,
            last_air_date=series.last_air_date,
            status=series.status,
            network=series.networks[0].name if series.networks else None,
            genres=[genre.name for genre in series.genres],
        )

    async def get_seasons(self, tmdb_id: str) -> list[TvSeasonSummary]:
        series = await get_tv_details(self.client, self.settings, tmdb_id)
        return [
            TvSeasonSummary(
                number=season.season_number,
                name=season.name,
                overview=season.overview,
                image=self._image_url(season.poster_path),
            )
            for season in series.seasons
        ]

    async def get_episodes(
        self, tmdb_id: str, season_number: int
    ) -> list[TvEpisodeSummary]:
        if season_number < 0:
            raise ValueError("season_number must be >= 0")
        season = await get_tv_season(
            self.client, self.settings, tmdb_id, season_number
        )
        return [
            TvEpisodeSummary(
                number=episode.episode_number,
                name=episode.name,
                overview=episode.overview,
                aired=episode.air_date,
                runtime=episode.runtime,
                image=self._image_url(episode.still_path),
            )
            for episode in season.episodes
        ]

    def _format_search_result(self, tv: TmdbTv) -> TvSearchResult:
        prefix = (tv.first_air_date or "")[:4]
        # TMDB occasionally sends "" or placeholders such as "TBA".
        is_year = len(prefix) == 4 and prefix.isascii() and prefix.isdigit()
        year = int(prefix) if is_year else None
        return TvSearchResult(
            id=str(tv.id),
            title=tv.name,
            overview=tv.overview,
            poster_path=self._image_url(tv.poster_path),
            first_air_date=tv.first_air_date,
            year=year,
        )
