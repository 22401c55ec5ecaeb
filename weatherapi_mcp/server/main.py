"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers exception handlers and includes the API routers.
``run()`` starts it under uvicorn.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weatherapi_mcp.core.logging_config import get_logger, setup_logging
from weatherapi_mcp.core.monitoring import initialize_logfire

from .api.v1 import health, mcp
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.deps import close_weather_client

setup_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Logs the startup banner and closes the shared upstream HTTP client on shutdown.
    """
    mcp_server = settings.mcp_server
    logger.info(f"Starting {mcp_server.name} {mcp_server.version} (MCP {mcp_server.protocol_version})")
    logger.info("Authentication via Authorization header: Bearer token")
    logger.info(f"WeatherAPI.com integration ready: {settings.weather_api.base_url}")

    yield

    logger.info(f"Shutting down {mcp_server.name}...")
    await close_weather_client()


app = FastAPI(
    title="WeatherAPI.com MCP Server",
    description="""
    Model Context Protocol server wrapping the WeatherAPI.com REST API.

    POST JSON-RPC 2.0 requests to /mcp. Tool calls require the caller's
    WeatherAPI.com key in an Authorization: Bearer header.
    """,
    version=settings.mcp_server.version,
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(mcp.router, tags=["mcp"])


def run() -> None:
    """Serve the application on the configured host and port."""
    logger.info(f"Listening on {settings.server_host}:{settings.server_port}")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
