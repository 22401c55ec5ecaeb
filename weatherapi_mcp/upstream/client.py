from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import httpx

from weatherapi_mcp.core.logging_config import get_logger

from .errors import UpstreamError

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"

CURRENT_ENDPOINT = "/current.json"
FORECAST_ENDPOINT = "/forecast.json"
SEARCH_ENDPOINT = "/search.json"


class WeatherApiClient:
    """
    Thin async HTTP client for the WeatherAPI.com REST API.

    Responsibilities:
    - call (generic GET against an endpoint path)
    - current / forecast / search (endpoint bindings used by the MCP tools)

    Note: The API key is supplied per call by the MCP caller; the client itself
    holds no credential. No retries, no caching.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = get_logger(__name__)

    @staticmethod
    def _to_params(credential: str, params: Mapping[str, Any]) -> dict[str, str]:
        query: dict[str, str] = {"key": credential}
        for k, v in params.items():
            if v is None:
                continue
            query[k] = str(v).lower() if isinstance(v, bool) else str(v)
        return query

    async def call(self, endpoint: str, credential: str, params: Mapping[str, Any]) -> Any:
        """GET ``endpoint`` and return the decoded JSON body.

        Raises:
            UpstreamError: The provider answered with a non-2xx status.
        """
        query = self._to_params(credential, params)
        self._logger.debug(
            "WeatherApiClient.call: GET %s%s params=%s",
            self.base_url,
            endpoint,
            {k: v for k, v in query.items() if k != "key"},
        )
        r = await self._client.get(f"{self.base_url}{endpoint}", params=query)
        if r.is_success:
            return r.json()

        raw = r.text
        self._logger.error("WeatherAPI error: %s - %s", r.status_code, raw)
        try:
            body = json.loads(raw)
        except ValueError:
            body = {"message": raw}
        raise UpstreamError(
            f"WeatherAPI request failed: {raw}",
            status_code=r.status_code,
            status_text=r.reason_phrase,
            body=body,
        )

    async def current(self, credential: str, *, location: str, language: Optional[str] = None) -> Any:
        return await self.call(CURRENT_ENDPOINT, credential, {"q": location, "lang": language})

    async def forecast(
        self,
        credential: str,
        *,
        location: str,
        days: int,
        language: Optional[str] = None,
    ) -> Any:
        return await self.call(FORECAST_ENDPOINT, credential, {"q": location, "days": days, "lang": language})

    async def search(self, credential: str, *, query: str) -> Any:
        return await self.call(SEARCH_ENDPOINT, credential, {"q": query})

    async def aclose(self) -> None:
        await self._client.aclose()
