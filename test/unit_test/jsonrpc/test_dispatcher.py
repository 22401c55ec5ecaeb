from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from weatherapi_mcp.jsonrpc import JsonRpcRequest, McpDispatcher
from weatherapi_mcp.schemas import ServerInfo
from weatherapi_mcp.tools import build_registry

pytestmark = pytest.mark.asyncio

TOOL_NAMES = ["getCurrentWeather", "getWeatherForecast", "searchLocations"]


def _request(method: str, params=None, id=1) -> JsonRpcRequest:
    return JsonRpcRequest(jsonrpc="2.0", id=id, method=method, params=params)


@pytest.fixture
def upstream_calls() -> list[httpx.Request]:
    return []


@pytest.fixture
def dispatcher_for(make_weather_client, upstream_calls):
    def _make(status: int = 200, payload=None) -> McpDispatcher:
        def handler(request: httpx.Request) -> httpx.Response:
            upstream_calls.append(request)
            return httpx.Response(status, json=payload if payload is not None else {})

        return McpDispatcher(
            build_registry(),
            make_weather_client(handler),
            server_info=ServerInfo(name="weatherapi-mcp", version="1.0.0"),
        )

    return _make


class TestInitializeAndList:
    async def test_initialize(self, dispatcher_for) -> None:
        resp = await dispatcher_for().handle(_request("initialize", {"anything": True}))
        assert resp.to_dict() == {
            "jsonrpc": "2.0",
            "id": 1,
            "result": {
                "protocolVersion": "2024-11-05",
                "capabilities": {"tools": {"listChanged": True}},
                "serverInfo": {"name": "weatherapi-mcp", "version": "1.0.0"},
            },
        }

    async def test_initialize_does_not_need_credential(self, dispatcher_for) -> None:
        resp = await dispatcher_for().handle(_request("initialize"), None)
        assert not resp.is_error

    async def test_tools_list_is_idempotent(self, dispatcher_for) -> None:
        dispatcher = dispatcher_for()
        first = await dispatcher.handle(_request("tools/list"))
        second = await dispatcher.handle(_request("tools/list", id=2))

        tools = first.result["tools"]
        assert [t["name"] for t in tools] == TOOL_NAMES
        assert set(tools[0]) == {"name", "title", "description", "inputSchema"}
        assert second.result == first.result

    async def test_unknown_method(self, dispatcher_for) -> None:
        resp = await dispatcher_for().handle(_request("resources/list"), "k")
        assert resp.error["code"] == -32601
        assert resp.error["message"] == 'Method "resources/list" not found'
        assert resp.error["data"]["availableMethods"] == ["initialize", "tools/list", "tools/call"]

    async def test_missing_id_is_reported_as_unknown(self, dispatcher_for) -> None:
        resp = await dispatcher_for().handle(_request("tools/list", id=None))
        assert resp.id == "unknown"


class TestToolsCall:
    async def test_success(self, dispatcher_for, london_current, upstream_calls) -> None:
        dispatcher = dispatcher_for(payload=london_current)
        resp = await dispatcher.handle(
            _request("tools/call", {"name": "getCurrentWeather", "arguments": {"location": "London"}}), "valid-key"
        )

        content = resp.result["content"]
        assert [c["type"] for c in content] == ["text", "text"]
        assert content[0]["text"] == (
            "Current weather in London, UK: Sunny, 20°C (68°F). Feels like 19°C. Humidity: 50%. Wind: 10 km/h N."
        )
        assert upstream_calls[0].url.params.get("key") == "valid-key"

    @pytest.mark.parametrize("name", TOOL_NAMES + ["noSuchTool", None])
    @pytest.mark.parametrize("credential", [None, ""])
    async def test_missing_credential_is_unauthorized(self, dispatcher_for, upstream_calls, name, credential) -> None:
        resp = await dispatcher_for().handle(
            _request("tools/call", {"name": name, "arguments": {"location": 5}}), credential
        )
        assert resp.error["code"] == -32001
        assert resp.error["message"] == "WeatherAPI.com API key required"
        assert "Bearer" in resp.error["data"]["hint"]
        assert upstream_calls == []

    async def test_unknown_tool(self, dispatcher_for) -> None:
        resp = await dispatcher_for().handle(_request("tools/call", {"name": "getWeather"}), "k")
        assert resp.error["code"] == -32601
        assert resp.error["message"] == 'Tool "getWeather" not found'
        assert resp.error["data"]["availableTools"] == TOOL_NAMES

    async def test_absent_params(self, dispatcher_for) -> None:
        resp = await dispatcher_for().handle(_request("tools/call", None), "k")
        assert resp.error["code"] == -32601
        assert resp.error["data"]["availableTools"] == TOOL_NAMES

    @pytest.mark.parametrize(
        "name,arguments",
        [
            ("getWeatherForecast", {"location": "London", "days": 4}),
            ("getWeatherForecast", {"location": "London", "days": 0}),
            ("getCurrentWeather", {}),
            ("getCurrentWeather", None),
            ("searchLocations", {"query": 12}),
            ("searchLocations", ["Paris"]),
        ],
    )
    async def test_invalid_arguments(self, dispatcher_for, upstream_calls, name, arguments) -> None:
        resp = await dispatcher_for().handle(_request("tools/call", {"name": name, "arguments": arguments}), "k")
        assert resp.error["code"] == -32602
        assert resp.error["message"] == "Invalid input parameters"
        assert resp.error["data"]["validationErrors"]
        assert upstream_calls == []

    async def test_forecast_defaults_days(self, dispatcher_for, london_forecast, upstream_calls) -> None:
        resp = await dispatcher_for(payload=london_forecast).handle(
            _request("tools/call", {"name": "getWeatherForecast", "arguments": {"location": "London"}}), "k"
        )
        assert not resp.is_error
        assert upstream_calls[0].url.params.get("days") == "3"

    @pytest.mark.parametrize(
        "status,code",
        [(400, -32602), (401, -32001), (403, -32002), (404, -32003), (429, -32004), (500, -32603), (503, -32603)],
    )
    async def test_upstream_failures(self, dispatcher_for, status, code) -> None:
        resp = await dispatcher_for(status=status, payload={"error": {"message": "provider says no"}}).handle(
            _request("tools/call", {"name": "searchLocations", "arguments": {"query": "x"}}), "k"
        )
        assert resp.error["code"] == code
        assert resp.error["data"]["status"] == status

    async def test_unexpected_payload_is_internal_error(self, dispatcher_for) -> None:
        resp = await dispatcher_for(payload={"unexpected": True}).handle(
            _request("tools/call", {"name": "getCurrentWeather", "arguments": {"location": "London"}}), "k"
        )
        assert resp.error["code"] == -32603
        assert resp.error["message"] == "Internal server error"
        assert "detail" in resp.error["data"]

    async def test_network_failure_is_internal_error(self, make_weather_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        dispatcher = McpDispatcher(
            build_registry(),
            make_weather_client(handler),
            server_info=ServerInfo(name="weatherapi-mcp", version="1.0.0"),
        )
        resp = await dispatcher.handle(
            _request("tools/call", {"name": "searchLocations", "arguments": {"query": "x"}}), "k"
        )
        assert resp.error["code"] == -32603
        assert resp.error["data"]["detail"] == "connection refused"


class TestDispatcherLevelFailure:
    async def test_failure_outside_tool_boundary_is_internal_error(self, dispatcher_for) -> None:
        dispatcher = dispatcher_for()
        with patch.object(dispatcher._registry, "descriptors", side_effect=RuntimeError("registry exploded")):
            resp = await dispatcher.handle(_request("tools/list"))

        assert resp.error["code"] == -32603
        assert resp.error["message"] == "Request processing failed"
        assert resp.error["data"] == {"detail": "registry exploded"}
