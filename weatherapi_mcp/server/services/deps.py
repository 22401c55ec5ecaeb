"""
Request Dependencies.

Provides the process-wide `McpDispatcher` (and the upstream client it owns)
and extracts the caller's WeatherAPI.com key from the Authorization header.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, Header

from weatherapi_mcp.core.logging_config import get_logger
from weatherapi_mcp.jsonrpc import McpDispatcher
from weatherapi_mcp.schemas import ServerInfo
from weatherapi_mcp.server.core.config import settings
from weatherapi_mcp.tools import build_registry
from weatherapi_mcp.upstream import WeatherApiClient

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


def extract_api_key(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the API key from an ``Authorization: Bearer <key>`` header value.

    Returns:
        The trimmed key, or None when the header is absent, uses another
        scheme, or carries an empty key.
    """
    if not authorization:
        logger.debug("No Authorization header found")
        return None

    if not authorization.startswith(BEARER_PREFIX):
        logger.debug('Authorization header does not start with "Bearer "')
        return None

    api_key = authorization[len(BEARER_PREFIX):].strip()
    if not api_key:
        logger.debug("Empty API key in Authorization header")
        return None

    logger.debug("API key found in Authorization header")
    return api_key


async def get_api_key(authorization: Annotated[Optional[str], Header()] = None) -> Optional[str]:
    return extract_api_key(authorization)


@lru_cache(maxsize=1)
def get_weather_client() -> WeatherApiClient:
    """Get the shared WeatherAPI.com client."""
    weather_api = settings.weather_api
    return WeatherApiClient(weather_api.base_url, timeout=weather_api.timeout)


@lru_cache(maxsize=1)
def get_dispatcher() -> McpDispatcher:
    """Get the shared dispatcher instance."""
    mcp_server = settings.mcp_server
    return McpDispatcher(
        build_registry(),
        get_weather_client(),
        server_info=ServerInfo(name=mcp_server.name, version=mcp_server.version),
        protocol_version=mcp_server.protocol_version,
        signup_url=settings.weather_api.signup_url,
    )


async def close_weather_client() -> None:
    """Close the shared upstream client if it was created."""
    if get_weather_client.cache_info().currsize:
        await get_weather_client().aclose()
        get_weather_client.cache_clear()
        get_dispatcher.cache_clear()


ApiKeyDep = Annotated[Optional[str], Depends(get_api_key)]
DispatcherDep = Annotated[McpDispatcher, Depends(get_dispatcher)]
