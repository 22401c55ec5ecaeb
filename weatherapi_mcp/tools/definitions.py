"""Tool definitions for the weather MCP gateway.

This module declares the closed set of tool names and, per tool, the pydantic
input model that validates ``tools/call`` arguments and from which the
published ``inputSchema`` is derived.
"""

from enum import Enum
from typing import Any, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weatherapi_mcp.schemas import ToolDescriptor

from .schema import to_input_schema

LOCATION_DESCRIPTION = "Any location: city name, ZIP code, coordinates, or IP address"
LANGUAGE_DESCRIPTION = "Language code for weather conditions text (e.g., en, es, fr)"

DEFAULT_FORECAST_DAYS = 3


class ToolName(str, Enum):
    get_current_weather = "getCurrentWeather"
    get_weather_forecast = "getWeatherForecast"
    search_locations = "searchLocations"


class ToolInput(BaseModel):
    """Base for tool argument models.

    Types are strict (no str<->int coercion) and unknown keys are dropped.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    @field_validator("language", mode="before", check_fields=False)
    @classmethod
    def _language_not_null(cls, v: Any) -> Any:
        # Optional means "may be omitted", not "may be null"
        if v is None:
            raise ValueError("language must be a string when provided")
        return v


class CurrentWeatherInput(ToolInput):
    """Input schema for the current conditions lookup."""

    location: str = Field(..., description=LOCATION_DESCRIPTION)
    language: Optional[str] = Field(default=None, description=LANGUAGE_DESCRIPTION)


class WeatherForecastInput(ToolInput):
    """Input schema for the multi-day forecast lookup."""

    location: str = Field(..., description=LOCATION_DESCRIPTION)
    days: int = Field(
        default=DEFAULT_FORECAST_DAYS,
        ge=1,
        le=3,
        description="Number of forecast days (1-3 for free accounts)",
    )
    language: Optional[str] = Field(default=None, description=LANGUAGE_DESCRIPTION)

    @field_validator("days", mode="before")
    @classmethod
    def _integral_float_days(cls, v: Any) -> Any:
        # JSON has one number type; 2.0 is the integer 2
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


class SearchLocationsInput(ToolInput):
    """Input schema for the location autocomplete search."""

    query: str = Field(..., description="Search query for location names - partial matches work")


def build_descriptor(name: ToolName, title: str, description: str, input_model: Type[BaseModel]) -> ToolDescriptor:
    return ToolDescriptor(
        name=name.value,
        title=title,
        description=description,
        input_schema=to_input_schema(input_model),
    )


current_weather_tool = build_descriptor(
    ToolName.get_current_weather,
    "Get current weather conditions",
    "Get real-time weather for any location - like checking if it's raining right now in Paris",
    CurrentWeatherInput,
)

weather_forecast_tool = build_descriptor(
    ToolName.get_weather_forecast,
    "Get weather forecast",
    "Get weather predictions for the next 1-3 days - perfect for planning weekend trips",
    WeatherForecastInput,
)

search_locations_tool = build_descriptor(
    ToolName.search_locations,
    "Search for locations",
    "Find the right location name - useful when you're not sure how to spell \"Albuquerque\"",
    SearchLocationsInput,
)
