"""JSON-RPC 2.0 layer: envelope models, error taxonomy and the MCP dispatcher."""

from .dispatcher import McpDispatcher
from .errors import ErrorCode, JsonRpcError, from_upstream_error, from_validation_error
from .models import JSONRPC_VERSION, UNKNOWN_ID, JsonRpcRequest, JsonRpcResponse, parse_request

__all__ = [
    "McpDispatcher",
    "ErrorCode",
    "JsonRpcError",
    "from_upstream_error",
    "from_validation_error",
    "JSONRPC_VERSION",
    "UNKNOWN_ID",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "parse_request",
]
