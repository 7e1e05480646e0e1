"""Pydantic models for TMDB responses and the summaries built from them."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Genre(BaseModel):
    id: int
    name: str


class GenreListResponse(BaseModel):
    genres: list[Genre] = Field(default_factory=list)


class Network(BaseModel):
    id: int
    name: str


class TmdbTv(BaseModel):
    """A single TV series as returned by /search/tv."""

    id: int
    name: str
    original_name: str = ""
    first_air_date: str | None = None
    overview: str = ""
    poster_path: str | None
    vote_average: float | None = 0
    vote_count: int | None = 0
    original_language: str | None = None
    popularity: float | None = None

    @field_validator("original_name", "overview", mode="before")
    @classmethod
    def null_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v


class TmdbTvSearchResponse(BaseModel):
    page: int
    results: list[TmdbTv]
    total_pages: int
    total_results: int


class TmdbTvSeason(BaseModel):
    season_number: int
    name: str | None = None
    overview: str | None = None
    poster_path: str | None = None


class TmdbTvDetails(BaseModel):
    """Series details from /tv/{id}, including the season list."""

    id: int
    name: str
    overview: str = ""
    first_air_date: str | None = None
    last_air_date: str | None = None
    status: str | None = None
    poster_path: str | None = None
    genres: list[Genre] = Field(default_factory=list)
    networks: list[Network] = Field(default_factory=list)
    seasons: list[TmdbTvSeason] = Field(default_factory=list)

    @field_validator("overview", mode="before")
    @classmethod
    def null_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v


class TmdbTvEpisode(BaseModel):
    episode_number: int
    name: str | None = None
    overview: str | None = None
    air_date: str | None = None
    still_path: str | None = None
    runtime: int | None = None


class TmdbTvSeasonDetails(BaseModel):
    id: int
    episodes: list[TmdbTvEpisode] = Field(default_factory=list)


# ── App-facing summaries ──


class TvSearchResult(BaseModel):
    id: str
    title: str
    overview: str = ""
    poster_path: str | None = None
    first_air_date: str | None = None
    year: int | None = None
    status: str | None = None
    network: str | None = None


class TvSeriesDetails(BaseModel):
    id: str
    title: str
    overview: str = ""
    poster_path: str | None = None
    first_air_date: str | None = None
    last_air_date: str | None = None
    status: str | None = None
    network: str | None = None
    genres: list[str] = Field(default_factory=list)


class TvSeasonSummary(BaseModel):
    number: int
    name: str | None = None
    overview: str | None = None
    image: str | None = None


class TvEpisodeSummary(BaseModel):
    number: int
    name: str | None = None
    overview: str | None = None
    aired: str | None = None
    runtime: int | None = None
    image: str | None = None
