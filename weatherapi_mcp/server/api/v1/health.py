"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from weatherapi_mcp.server.core.config import settings

router = APIRouter()


@router.get(
    "/healthz",
    summary="Health Check",
    description="Check the operational status of the MCP server.",
    response_class=PlainTextResponse,
    response_description="Plain-text OK.",
)
async def health_check() -> str:
    """
    Health check endpoint.

    Returns a plain ``OK`` to confirm the server is running and reachable.
    """
    return "OK"


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve the server identity advertised to MCP clients.",
    response_description="Version object.",
)
async def version():
    """
    Get server version.

    Returns the server name, its version and the MCP protocol revision it speaks.
    """
    mcp_server = settings.mcp_server
    return {
        "name": mcp_server.name,
        "version": mcp_server.version,
        "protocolVersion": mcp_server.protocol_version,
    }
