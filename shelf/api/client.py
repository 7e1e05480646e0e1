"""Async httpx wrapper that validates JSON responses against pydantic models."""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from shelf.api.errors import APIError, ErrorCode

log = logging.getLogger(__name__)

T = TypeVar("T")

QueryValue = str | int | float | bool


class APIClient:
    """Async HTTP client shared by every metadata provider."""

    def __init__(
        self,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        kwargs: dict[str, Any] = {"timeout": timeout}
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    @staticmethod
    def build_url(
        base_url: str, params: Mapping[str, QueryValue] | None = None
    ) -> httpx.URL:
        """Return ``base_url`` with each param set, replacing existing values."""
        url = httpx.URL(base_url)
        for key, value in (params or {}).items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            url = url.copy_set_param(key, str(value))
        return url

    async def fetch(self, url: httpx.URL | str, model: type[T], **kwargs: Any) -> T:
        """GET ``url`` and validate the JSON body as ``model``.

        Non-2xx responses raise ``APIError`` (``NOT_FOUND`` for 404). A body
        that does not match ``model`` raises ``APIError`` as well. Transport
        errors from httpx propagate unchanged.
        """
        response = await self._client.get(url, **kwargs)

        if not response.is_success:
            code = (
                ErrorCode.NOT_FOUND
                if response.status_code == 404
                else ErrorCode.INTERNAL_SERVER_ERROR
            )
            raise APIError(code, f"API request failed: {response.reason_phrase}")

        try:
            return TypeAdapter(model).validate_python(response.json())
        except (ValidationError, ValueError) as exc:
            log.warning("API response validation failed for %s: %s", url, exc)
            raise APIError(
                ErrorCode.INTERNAL_SERVER_ERROR, "Invalid response from API"
            ) from exc
