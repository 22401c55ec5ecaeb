"""JSON Schema generation for tool input models.

Pydantic's ``model_json_schema()`` output is reshaped into the plain form MCP
clients expect: no titles, ``Optional[T]`` collapsed to ``T``, and a
``required`` list holding only fields that have neither a default nor an
``Optional`` type.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type

from pydantic import BaseModel


def _collapse_nullable(prop: Dict[str, Any]) -> Dict[str, Any]:
    """Turn ``{"anyOf": [T, {"type": "null"}], ...}`` into ``{**T, ...}``."""
    variants = prop.get("anyOf")
    if not variants:
        return dict(prop)
    non_null = [v for v in variants if v.get("type") != "null"]
    if len(non_null) != 1:
        return dict(prop)
    collapsed = {k: v for k, v in prop.items() if k != "anyOf"}
    collapsed.update(non_null[0])
    # A null default only restates that the field is optional
    if "default" in collapsed and collapsed["default"] is None:
        del collapsed["default"]
    return collapsed


def required_fields(model: Type[BaseModel]) -> List[str]:
    """Names of fields a caller must always supply."""
    return [name for name, field in model.model_fields.items() if field.is_required()]


def to_input_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """Build the ``inputSchema`` published for a tool.

    Args:
        model: Pydantic model validating the tool's arguments

    Returns:
        JSON Schema object; ``required`` is omitted when no field is required
    """
    raw = model.model_json_schema()
    properties: Dict[str, Any] = {}
    for name, prop in raw.get("properties", {}).items():
        prop = _collapse_nullable(prop)
        prop.pop("title", None)
        properties[name] = prop

    schema: Dict[str, Any] = {
        "type": "object",
        "properties": properties,
    }

    required = required_fields(model)
    if required:
        schema["required"] = required

    return schema
