"""JSON-RPC 2.0 envelope models.

`JsonRpcRequest` is what the transport hands to the dispatcher;
`JsonRpcResponse` is what the dispatcher hands back. A response carries
exactly one of ``result`` / ``error``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ErrorCode, JsonRpcError

JSONRPC_VERSION = "2.0"
UNKNOWN_ID = "unknown"

RequestId = Union[int, float, str]


class JsonRpcRequest(BaseModel):
    """Inbound request object.

    Examples:
        >>> JsonRpcRequest.model_validate({"jsonrpc": "2.0", "id": 1, "method": "tools/list"}).method
        'tools/list'
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = Field(..., description="Protocol version; must be exactly '2.0'")
    id: Optional[RequestId] = Field(default=None, description="Request identifier echoed in the response")
    method: str = Field(..., min_length=1, description="Method to invoke")
    params: Optional[Dict[str, Any]] = Field(default=None, description="Method parameters")

    @field_validator("jsonrpc")
    @classmethod
    def _check_version(cls, v: str) -> str:
        if v != JSONRPC_VERSION:
            raise ValueError(f"jsonrpc must be '{JSONRPC_VERSION}'")
        return v


class JsonRpcResponse(BaseModel):
    """Outbound response object."""

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = UNKNOWN_ID
    result: Optional[Any] = None
    error: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, request_id: Optional[RequestId], result: Any) -> "JsonRpcResponse":
        return cls(id=_response_id(request_id), result=result)

    @classmethod
    def failure(cls, request_id: Optional[RequestId], error: JsonRpcError) -> "JsonRpcResponse":
        return cls(id=_response_id(request_id), error=error.to_dict())

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            body["error"] = self.error
        else:
            body["result"] = self.result
        return body


def _response_id(request_id: Optional[RequestId]) -> RequestId:
    return UNKNOWN_ID if request_id is None else request_id


def _raw_id(body: Any) -> Optional[RequestId]:
    raw = body.get("id") if isinstance(body, dict) else None
    if isinstance(raw, (int, float, str)) and not isinstance(raw, bool):
        return raw
    return None


def parse_request(raw: Union[bytes, str]) -> JsonRpcRequest:
    """Decode and validate an HTTP body as a single JSON-RPC request.

    Raises:
        JsonRpcError: PARSE_ERROR for invalid JSON; INVALID_REQUEST for a body that is
            not a request object. ``request_id`` on the error is the body's id, if any.
    """
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise JsonRpcError(
            ErrorCode.PARSE_ERROR,
            "Invalid JSON in request body",
            {"hint": "Make sure your request body is valid JSON"},
        ) from e

    try:
        if not isinstance(body, dict):
            raise ValueError("request body must be a JSON object")
        return JsonRpcRequest.model_validate(body)
    except (ValidationError, ValueError) as e:
        raise JsonRpcError(
            ErrorCode.INVALID_REQUEST,
            "Invalid JSON-RPC request",
            {"hint": 'Request must include jsonrpc: "2.0" and method fields'},
            request_id=_raw_id(body),
        ) from e
