from typing import Any, AsyncGenerator, Dict, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from weatherapi_mcp.jsonrpc import McpDispatcher
from weatherapi_mcp.schemas import ServerInfo
from weatherapi_mcp.tools import build_registry


class FakeWeatherApi:
    """Scriptable stand-in for the WeatherAPI.com HTTP surface."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status = 200
        self.payloads: Dict[str, Any] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(self.status, json=self.payloads.get(endpoint, {}))


@pytest.fixture
def weather_api(london_current, london_forecast, paris_search) -> FakeWeatherApi:
    fake = FakeWeatherApi()
    fake.payloads = {
        "current.json": london_current,
        "forecast.json": london_forecast,
        "search.json": paris_search,
    }
    return fake


@pytest_asyncio.fixture(name="client")
async def client_fixture(weather_api: FakeWeatherApi, make_weather_client) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the dispatcher wired to the fake upstream."""
    from weatherapi_mcp.server.main import app
    from weatherapi_mcp.server.services.deps import get_dispatcher

    weather_client = make_weather_client(weather_api)
    dispatcher = McpDispatcher(
        build_registry(),
        weather_client,
        server_info=ServerInfo(name="weatherapi-mcp", version="1.0.0"),
    )
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
    await weather_client.aclose()
