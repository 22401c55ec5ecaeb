"""
MCP Endpoint.

This module exposes the JSON-RPC 2.0 endpoint MCP clients talk to. It reads
the raw body itself so that malformed input can be answered with JSON-RPC
``PARSE_ERROR`` / ``INVALID_REQUEST`` objects and HTTP 400, while every
well-formed exchange, successful or not, is answered with HTTP 200.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from weatherapi_mcp.core.logging_config import get_logger
from weatherapi_mcp.jsonrpc import JsonRpcError, JsonRpcResponse, parse_request
from weatherapi_mcp.server.services.deps import ApiKeyDep, DispatcherDep

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "/mcp",
    summary="MCP JSON-RPC Endpoint",
    description="Accepts a single JSON-RPC 2.0 request (initialize, tools/list, tools/call).",
    response_description="JSON-RPC 2.0 response object.",
)
async def handle_mcp(request: Request, api_key: ApiKeyDep, dispatcher: DispatcherDep) -> JSONResponse:
    """
    Handle one MCP request.

    The WeatherAPI.com key travels in ``Authorization: Bearer <key>`` and is
    only required for ``tools/call``.
    """
    raw = await request.body()
    try:
        rpc_request = parse_request(raw)
    except JsonRpcError as e:
        logger.info(f"Rejected malformed MCP request: {e.message}")
        return JSONResponse(status_code=400, content=JsonRpcResponse.failure(e.request_id, e).to_dict())

    logger.debug(f"MCP request: method={rpc_request.method} id={rpc_request.id}")
    response = await dispatcher.handle(rpc_request, api_key)
    return JSONResponse(status_code=200, content=response.to_dict())
