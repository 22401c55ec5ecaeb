from __future__ import annotations

from typing import Any, Callable, Iterable

import httpx
import pytest

from weatherapi_mcp.upstream import WeatherApiClient

MOCK_BASE_URL = "http://mock/v1"


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
        "http://testserver",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


@pytest.fixture
def london_current() -> dict[str, Any]:
    return {
        "location": {"name": "London", "country": "UK", "lat": 51.52, "lon": -0.11},
        "current": {
            "condition": {"text": "Sunny"},
            "temp_c": 20,
            "temp_f": 68,
            "feelslike_c": 19,
            "humidity": 50,
            "wind_kph": 10,
            "wind_dir": "N",
        },
    }


@pytest.fixture
def london_forecast() -> dict[str, Any]:
    return {
        "location": {"name": "London", "country": "UK", "lat": 51.52, "lon": -0.11},
        "forecast": {
            "forecastday": [
                {"date": "2024-06-01", "day": {"condition": {"text": "Sunny"}, "maxtemp_c": 22.4, "mintemp_c": 12.1}},
                {"date": "2024-06-02", "day": {"condition": {"text": "Light rain"}, "maxtemp_c": 18.0, "mintemp_c": 11.5}},
            ]
        },
    }


@pytest.fixture
def paris_search() -> list[dict[str, Any]]:
    return [
        {"name": "Paris", "region": "Ile-de-France", "country": "France", "lat": 48.87, "lon": 2.33},
        {"name": "Paris", "region": "Texas", "country": "United States of America", "lat": 33.66, "lon": -95.56},
    ]


@pytest.fixture
def make_weather_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], WeatherApiClient]:
    """Build a WeatherApiClient whose HTTP traffic is served by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> WeatherApiClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return WeatherApiClient(MOCK_BASE_URL, client=http)

    return _make
