"""JSON-RPC error taxonomy.

Purpose:
- Name the JSON-RPC 2.0 codes the gateway emits, including the
  implementation-defined range (-32000 to -32099) used for provider failures.
- Provide `JsonRpcError`, raised inside the JSON-RPC layer and rendered as a
  response ``error`` member.
- Map `UpstreamError` and pydantic `ValidationError` onto that taxonomy.
"""

from __future__ import annotations

import json
from enum import IntEnum
from typing import Any, Dict, Optional

from pydantic import ValidationError

from weatherapi_mcp.upstream.errors import UpstreamError


class ErrorCode(IntEnum):
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    UNAUTHORIZED = -32001
    FORBIDDEN = -32002
    NOT_FOUND = -32003
    RATE_LIMITED = -32004


class JsonRpcError(Exception):
    """Error carried back to the caller as a JSON-RPC ``error`` object.

    Args:
        code: JSON-RPC error code.
        message: Human-readable error description.
        data: Optional diagnostic payload; omitted from the wire when empty.
        request_id: Id of the offending request, when the error is raised before a
            request object exists (envelope parsing).
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        data: Optional[Any] = None,
        *,
        request_id: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.data = data
        self.request_id = request_id

    def to_dict(self) -> Dict[str, Any]:
        error: Dict[str, Any] = {"code": int(self.code), "message": self.message}
        if self.data:
            error["data"] = self.data
        return error

    def __repr__(self) -> str:
        return f"JsonRpcError(code={int(self.code)}, message={self.message!r})"


# status -> (code, message, fixed detail); None detail means "use the provider's message"
_UPSTREAM_STATUS_MAP: Dict[int, tuple[ErrorCode, str, Optional[str]]] = {
    400: (ErrorCode.INVALID_PARAMS, "Invalid request parameters", None),
    401: (
        ErrorCode.UNAUTHORIZED,
        "Invalid WeatherAPI.com API key",
        "Check your API key and make sure it's active",
    ),
    403: (
        ErrorCode.FORBIDDEN,
        "WeatherAPI.com access denied",
        "Your API key may have exceeded its quota or lacks required permissions",
    ),
    404: (ErrorCode.NOT_FOUND, "Location not found", "The specified location could not be found"),
    429: (
        ErrorCode.RATE_LIMITED,
        "Rate limit exceeded",
        "Too many requests to WeatherAPI.com. Please wait before trying again.",
    ),
}


def from_upstream_error(error: UpstreamError) -> JsonRpcError:
    """Classify a provider failure by its HTTP status.

    Unlisted statuses (5xx and anything else non-2xx) become INTERNAL_ERROR.
    """
    mapped = _UPSTREAM_STATUS_MAP.get(error.status_code)
    if mapped is None:
        return JsonRpcError(
            ErrorCode.INTERNAL_ERROR,
            "WeatherAPI.com service error",
            {"status": error.status_code, "detail": error.message},
        )
    code, message, detail = mapped
    return JsonRpcError(
        code,
        message,
        {"status": error.status_code, "detail": detail if detail is not None else error.detail()},
    )


def from_validation_error(error: ValidationError) -> JsonRpcError:
    """Report tool-argument validation failures as INVALID_PARAMS."""
    # Round-trip through JSON so every error entry is wire-safe
    errors = json.loads(error.json(include_url=False))
    return JsonRpcError(
        ErrorCode.INVALID_PARAMS,
        "Invalid input parameters",
        {
            "validationErrors": errors,
            "hint": "Check the tool's input schema for required parameters",
        },
    )
