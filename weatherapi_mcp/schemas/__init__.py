"""Pydantic models shared by the MCP tool layer and the JSON-RPC layer."""

from .base import BaseSchema
from .mcp import (
    InitializeResult,
    ServerCapabilities,
    ServerInfo,
    TextContent,
    ToolCallResult,
    ToolDescriptor,
    ToolsCapability,
    ToolsListResult,
)

__all__ = [
    "BaseSchema",
    "InitializeResult",
    "ServerCapabilities",
    "ServerInfo",
    "TextContent",
    "ToolCallResult",
    "ToolDescriptor",
    "ToolsCapability",
    "ToolsListResult",
]
