"""Load .env and settings.yaml, expose all configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# 24 hours
DEFAULT_GENRES_CACHE_TTL_MS = 1000 * 60 * 60 * 24


def _load_env() -> None:
    env_path = PROJECT_ROOT / ".env"
    load_dotenv(env_path)


def _load_yaml(settings_path: Path | None = None) -> dict:
    settings_path = settings_path or PROJECT_ROOT / "settings.yaml"
    if settings_path.exists():
        try:
            with open(settings_path) as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError:
            log.warning("Failed to parse %s, using defaults", settings_path.name)
            return {}
    return {}


class Settings(BaseModel):
    tmdb_api_key: str = ""

    @field_validator("tmdb_api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return v.strip()

    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"
    genres_cache_ttl_ms: int = Field(default=DEFAULT_GENRES_CACHE_TTL_MS, gt=0)
    request_timeout: float = Field(default=15.0, gt=0)

    @property
    def tmdb_configured(self) -> bool:
        return bool(self.tmdb_api_key)


def load_settings(settings_path: Path | None = None) -> Settings:
    _load_env()
    raw = _load_yaml(settings_path)
    raw["tmdb_api_key"] = os.getenv("TMDB_API_KEY", "")
    return Settings(**raw)
