"""
Global Exception Handler for FastAPI Application.

The dispatcher converts every failure it sees into a JSON-RPC error, so this
handler only fires for exceptions raised outside it (dependency wiring,
middleware, framework). It logs the failure with an error id and answers with
a JSON-RPC ``INTERNAL_ERROR`` object and HTTP 500.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weatherapi_mcp.core.logging_config import get_logger
from weatherapi_mcp.core.monitoring import log_error
from weatherapi_mcp.jsonrpc import ErrorCode, JsonRpcError, JsonRpcResponse

logger = get_logger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unhandled exception and return a JSON-RPC error body.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with status 500 carrying the error id
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    error = JsonRpcError(
        ErrorCode.INTERNAL_ERROR,
        "Internal server error",
        {"error_id": error_id, "error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=500, content=JsonRpcResponse.failure(None, error).to_dict())


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
