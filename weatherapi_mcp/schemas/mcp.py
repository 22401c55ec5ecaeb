"""MCP result payloads returned inside JSON-RPC ``result`` members."""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import Field

from .base import BaseSchema


class ToolDescriptor(BaseSchema):
    """Catalog entry published through ``tools/list``.

    Examples:
        >>> ToolDescriptor(name="searchLocations", title="Search for locations",
        ...                description="...", input_schema={"type": "object", "properties": {}}).to_wire()
        {'name': 'searchLocations', 'title': 'Search for locations', 'description': '...', 'inputSchema': {'type': 'object', 'properties': {}}}
    """

    name: str = Field(..., description="Unique tool name used by tools/call")
    title: str = Field(..., description="Short human-readable title")
    description: str = Field(..., description="What the tool does")
    input_schema: Dict[str, Any] = Field(..., description="JSON Schema of the accepted arguments")

    model_config = {"frozen": True}


class TextContent(BaseSchema):
    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseSchema):
    """Result of a successful ``tools/call``: a summary and the raw payload, in that order."""

    content: List[TextContent]


class ToolsListResult(BaseSchema):
    tools: List[ToolDescriptor]


class ToolsCapability(BaseSchema):
    list_changed: bool = True


class ServerCapabilities(BaseSchema):
    tools: ToolsCapability = Field(default_factory=ToolsCapability)


class ServerInfo(BaseSchema):
    name: str
    version: str


class InitializeResult(BaseSchema):
    protocol_version: str
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: ServerInfo
