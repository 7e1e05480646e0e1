"""Typed API errors surfaced by the metadata layer."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class APIError(Exception):
    """An upstream API call failed or returned an unusable payload."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"APIError(code={self.code.value!r}, message={self.message!r})"


class _TMDBErrors:
    @staticmethod
    def not_configured() -> APIError:
        return APIError(ErrorCode.INTERNAL_SERVER_ERROR, "TMDB API key not configured")

    @staticmethod
    def not_found(context: str = "Movie") -> APIError:
        return APIError(ErrorCode.NOT_FOUND, f"{context} not found on TMDB")


class APIErrors:
    """Factories for the error messages each provider surfaces."""

    TMDB = _TMDBErrors
