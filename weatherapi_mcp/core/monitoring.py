"""
Monitoring and Tracing Configuration Module.

Optional Pydantic Logfire integration for the gateway:
- FastAPI endpoint spans and outbound WeatherAPI.com (httpx) spans
- per-request and per-tool-call events with latency
- error events

Nothing is exported unless LOGFIRE_ENABLED is true and LOGFIRE_TOKEN is set.
The ``log_*`` helpers are no-ops until ``initialize_logfire`` succeeds and
never raise.
"""

import os
from typing import Any, Optional

import logfire
from fastapi import FastAPI

from weatherapi_mcp.core.logging_config import get_logger

logger = get_logger(__name__)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


LOGFIRE_ENABLED = _env_flag("LOGFIRE_ENABLED", "false")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "weatherapi-mcp")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "1.0.0")

# Instrumentation switches
LOGFIRE_TRACE_HTTPX = _env_flag("LOGFIRE_TRACE_HTTPX", "true")
LOGFIRE_TRACE_FASTAPI = _env_flag("LOGFIRE_TRACE_FASTAPI", "true")

_active = False


def initialize_logfire(app: Optional[FastAPI] = None) -> bool:
    """
    Configure Logfire and instrument httpx and, when given, the FastAPI app.

    Returns:
        True once Logfire is configured. False when it is disabled, has no
        token, or ``logfire.configure`` fails. Instrumentation failures are
        logged and do not change the result.
    """
    global _active

    if not LOGFIRE_ENABLED:
        logger.info("Logfire disabled (set LOGFIRE_ENABLED=true to enable)")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning("LOGFIRE_ENABLED is set but LOGFIRE_TOKEN is empty; Logfire stays off")
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )
    except Exception as e:
        logger.error(f"Logfire configuration failed: {e}", exc_info=True)
        return False

    _active = True

    if LOGFIRE_TRACE_HTTPX:
        try:
            logfire.instrument_httpx()
            logger.info("Logfire: tracing outbound httpx requests")
        except Exception as e:
            logger.warning(f"Could not instrument httpx: {e}")

    if LOGFIRE_TRACE_FASTAPI and app is not None:
        try:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: tracing FastAPI endpoints")
        except Exception as e:
            logger.warning(f"Could not instrument FastAPI: {e}")

    logger.info(f"Logfire active: service={LOGFIRE_SERVICE_NAME} environment={LOGFIRE_ENVIRONMENT}")
    return True


def _emit(level: str, event: str, **attributes: Any) -> None:
    if not _active:
        return
    try:
        getattr(logfire, level)(event, **attributes)
    except Exception:
        logger.debug(f"Logfire event dropped: {event}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """Record one HTTP request handled by the server."""
    _emit(
        "info",
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_tool_call(tool_name: str, outcome: str, duration_ms: float, error_code: Optional[int] = None) -> None:
    """
    Record the outcome of a ``tools/call`` invocation.

    Args:
        tool_name: Name of the invoked tool
        outcome: "ok" or "error"
        duration_ms: Handler duration in milliseconds, upstream call included
        error_code: JSON-RPC error code when the call failed
    """
    _emit(
        "info",
        "Tool call completed",
        tool_name=tool_name,
        outcome=outcome,
        duration_ms=duration_ms,
        error_code=error_code,
    )


def log_error(error_type: str, error_message: str, context: Optional[dict[str, Any]] = None) -> None:
    """Record an error event; ``context`` keys become event attributes."""
    _emit("error", "Error occurred", error_type=error_type, error_message=error_message, **(context or {}))
