from __future__ import annotations

from typing import Optional

import pytest
from pydantic import BaseModel, Field

from weatherapi_mcp.tools import (
    current_weather_tool,
    search_locations_tool,
    to_input_schema,
    weather_forecast_tool,
)


class TestPublishedInputSchemas:
    def test_current_weather_schema(self) -> None:
        schema = current_weather_tool.input_schema
        assert schema["type"] == "object"
        assert schema["required"] == ["location"]
        assert schema["properties"]["location"] == {
            "type": "string",
            "description": "Any location: city name, ZIP code, coordinates, or IP address",
        }
        assert schema["properties"]["language"] == {
            "type": "string",
            "description": "Language code for weather conditions text (e.g., en, es, fr)",
        }

    def test_forecast_days_is_bounded_and_not_required(self) -> None:
        schema = weather_forecast_tool.input_schema
        assert schema["required"] == ["location"]
        days = schema["properties"]["days"]
        assert days["type"] == "integer"
        assert days["minimum"] == 1
        assert days["maximum"] == 3
        assert days["default"] == 3

    def test_search_locations_schema(self) -> None:
        schema = search_locations_tool.input_schema
        assert list(schema["properties"]) == ["query"]
        assert schema["required"] == ["query"]

    @pytest.mark.parametrize("tool", [current_weather_tool, weather_forecast_tool, search_locations_tool])
    def test_no_titles_leak_into_properties(self, tool) -> None:
        for prop in tool.input_schema["properties"].values():
            assert "title" not in prop
            assert "anyOf" not in prop


class TestToInputSchema:
    def test_required_omitted_when_every_field_is_optional_or_defaulted(self) -> None:
        class AllOptional(BaseModel):
            a: Optional[str] = None
            b: int = Field(default=5)

        schema = to_input_schema(AllOptional)
        assert "required" not in schema
        assert schema["properties"]["b"] == {"type": "integer", "default": 5}
        assert schema["properties"]["a"] == {"type": "string"}

    def test_required_keeps_declaration_order(self) -> None:
        class Mixed(BaseModel):
            second: str
            optional: Optional[int] = None
            first: str

        assert to_input_schema(Mixed)["required"] == ["second", "first"]
