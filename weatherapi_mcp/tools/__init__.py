"""MCP Tools Module.

Tool definitions (names, input models, published descriptors) and the
handlers that serve them.
"""

from .definitions import (
    CurrentWeatherInput,
    SearchLocationsInput,
    ToolName,
    WeatherForecastInput,
    current_weather_tool,
    search_locations_tool,
    weather_forecast_tool,
)
from .handlers import (
    CurrentWeatherHandler,
    SearchLocationsHandler,
    ToolHandler,
    ToolHandlerRegistry,
    WeatherForecastHandler,
    build_registry,
)
from .schema import to_input_schema

__all__ = [
    # Tool definitions
    "ToolName",
    "CurrentWeatherInput",
    "WeatherForecastInput",
    "SearchLocationsInput",
    "current_weather_tool",
    "weather_forecast_tool",
    "search_locations_tool",
    "to_input_schema",
    # Handlers
    "ToolHandler",
    "CurrentWeatherHandler",
    "WeatherForecastHandler",
    "SearchLocationsHandler",
    "ToolHandlerRegistry",
    "build_registry",
]
