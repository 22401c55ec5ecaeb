"""Pydantic base schema utilities.

Provides a common `BaseSchema` that enforces aliasing and extra-field policy
for the MCP wire models under `weatherapi_mcp.schemas`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


def _to_camel(s: str) -> str:
    """Convert snake_case to camelCase for JSON aliasing."""
    parts = s.split("_")
    return parts[0] + "".join(p.capitalize() or "_" for p in parts[1:])


class BaseSchema(BaseModel):
    """Shared base for MCP wire models.

    - Forbids extra fields
    - Enables populate_by_name for using either snake_case or camelCase
    - Uses a snake->camel alias generator for JSON interop
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        alias_generator=_to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase keys, as sent to MCP clients."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
