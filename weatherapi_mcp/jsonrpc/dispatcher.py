"""JSON-RPC method dispatcher.

`McpDispatcher.handle` is the single entry point of the gateway core: it takes
one validated request plus the caller's credential (or None) and always
returns exactly one `JsonRpcResponse`. It holds no per-request state, so one
instance serves any number of concurrent requests.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

from pydantic import ValidationError

from weatherapi_mcp.core.logging_config import get_logger
from weatherapi_mcp.core.monitoring import log_error, log_tool_call
from weatherapi_mcp.schemas import InitializeResult, ServerInfo, ToolsListResult
from weatherapi_mcp.tools import ToolHandlerRegistry
from weatherapi_mcp.upstream import UpstreamError, WeatherApiClient

from .errors import ErrorCode, JsonRpcError, from_upstream_error, from_validation_error
from .models import JsonRpcRequest, JsonRpcResponse

logger = get_logger(__name__)

DEFAULT_SIGNUP_URL = "https://www.weatherapi.com/signup.aspx"


class McpDispatcher:
    """
    Route MCP methods (``initialize``, ``tools/list``, ``tools/call``) to their handlers.

    Error policy:
        - Failures inside a tool handler are classified (validation, upstream
          status, anything else) and returned as the matching JSON-RPC error.
        - Failures anywhere else in dispatch become INTERNAL_ERROR.
        - Nothing is retried and nothing escapes ``handle``.
    """

    def __init__(
        self,
        registry: ToolHandlerRegistry,
        client: WeatherApiClient,
        *,
        server_info: ServerInfo,
        protocol_version: str = "2024-11-05",
        signup_url: str = DEFAULT_SIGNUP_URL,
    ) -> None:
        self._registry = registry
        self._client = client
        self._server_info = server_info
        self._protocol_version = protocol_version
        self._signup_url = signup_url
        self._methods: Dict[str, Callable[[JsonRpcRequest, Optional[str]], Awaitable[Any]]] = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    @property
    def methods(self) -> List[str]:
        return list(self._methods)

    async def handle(self, request: JsonRpcRequest, credential: Optional[str] = None) -> JsonRpcResponse:
        """Dispatch one request and build its response."""
        try:
            method = self._methods.get(request.method)
            if method is None:
                raise JsonRpcError(
                    ErrorCode.METHOD_NOT_FOUND,
                    f'Method "{request.method}" not found',
                    {"availableMethods": self.methods},
                )
            result = await method(request, credential)
            return JsonRpcResponse.success(request.id, result)
        except JsonRpcError as e:
            return JsonRpcResponse.failure(request.id, e)
        except Exception as e:
            logger.exception(f"Request handler error: method={request.method}")
            log_error(type(e).__name__, str(e), {"method": request.method})
            return JsonRpcResponse.failure(
                request.id,
                JsonRpcError(ErrorCode.INTERNAL_ERROR, "Request processing failed", {"detail": str(e)}),
            )

    async def _initialize(self, request: JsonRpcRequest, credential: Optional[str]) -> Dict[str, Any]:
        return InitializeResult(
            protocol_version=self._protocol_version,
            server_info=self._server_info,
        ).to_wire()

    async def _list_tools(self, request: JsonRpcRequest, credential: Optional[str]) -> Dict[str, Any]:
        return ToolsListResult(tools=self._registry.descriptors()).to_wire()

    async def _call_tool(self, request: JsonRpcRequest, credential: Optional[str]) -> Dict[str, Any]:
        params = request.params or {}
        name = params.get("name")
        arguments = params.get("arguments")

        if not credential:
            raise JsonRpcError(
                ErrorCode.UNAUTHORIZED,
                "WeatherAPI.com API key required",
                {
                    "hint": 'Include your API key in the Authorization header: "Bearer your-api-key"',
                    "signup": f"Get a free API key at {self._signup_url}",
                },
            )

        handler = self._registry.get(name)
        if handler is None:
            raise JsonRpcError(
                ErrorCode.METHOD_NOT_FOUND,
                f'Tool "{name}" not found',
                {"availableTools": self._registry.names()},
            )

        start = time.perf_counter()
        try:
            result = await handler(self._client, credential, arguments)
        except Exception as e:
            error = self._classify_tool_failure(name, e)
            log_tool_call(name, "error", (time.perf_counter() - start) * 1000, int(error.code))
            raise error from e

        log_tool_call(name, "ok", (time.perf_counter() - start) * 1000)
        return result.to_wire()

    @staticmethod
    def _classify_tool_failure(name: str, exc: Exception) -> JsonRpcError:
        if isinstance(exc, UpstreamError):
            logger.warning(f'Tool "{name}" upstream error: status={exc.status_code}')
            return from_upstream_error(exc)
        if isinstance(exc, ValidationError):
            logger.warning(f'Tool "{name}" rejected arguments: {exc.error_count()} validation error(s)')
            return from_validation_error(exc)
        logger.error(f'Tool "{name}" error: {exc}', exc_info=exc)
        log_error(type(exc).__name__, str(exc), {"tool_name": name})
        return JsonRpcError(ErrorCode.INTERNAL_ERROR, "Internal server error", {"detail": str(exc)})
