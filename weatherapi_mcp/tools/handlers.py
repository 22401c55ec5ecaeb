"""Tool handlers for the weather MCP gateway.

Each handler validates raw ``tools/call`` arguments against its input model,
makes one WeatherAPI.com request and renders the payload as MCP content: a
plain-text summary followed by the full JSON payload.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from weatherapi_mcp.core.logging_config import get_logger
from weatherapi_mcp.schemas import TextContent, ToolCallResult, ToolDescriptor
from weatherapi_mcp.upstream import WeatherApiClient

from .definitions import (
    CurrentWeatherInput,
    SearchLocationsInput,
    ToolInput,
    ToolName,
    WeatherForecastInput,
    current_weather_tool,
    search_locations_tool,
    weather_forecast_tool,
)

logger = get_logger(__name__)

InputType = TypeVar("InputType", bound=ToolInput)


def _fmt(value: Any) -> str:
    """Render a JSON scalar the way it appears in the provider's payload."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ToolHandler(ABC, Generic[InputType]):
    """Abstract base class for tool handlers.

    Subclasses declare the tool's descriptor and input model and implement
    the upstream call and the summary rendering.
    """

    descriptor: ToolDescriptor
    input_model: Type[InputType]

    @property
    def name(self) -> ToolName:
        return ToolName(self.descriptor.name)

    def validate(self, arguments: Any) -> InputType:
        """Validate raw arguments, applying field defaults first.

        Raises:
            pydantic.ValidationError: Arguments do not satisfy the input model.
        """
        return self.input_model.model_validate({} if arguments is None else arguments)

    @abstractmethod
    async def fetch(self, client: WeatherApiClient, credential: str, args: InputType) -> Any:
        """Call the provider endpoint bound to this tool."""

    @abstractmethod
    def summarize(self, args: InputType, payload: Any) -> str:
        """Render the human-readable summary line(s)."""

    async def execute(self, client: WeatherApiClient, credential: str, arguments: Any) -> ToolCallResult:
        """Validate, call upstream and format the result.

        Raises:
            pydantic.ValidationError: Invalid arguments; the provider is not called.
            UpstreamError: The provider answered with a non-2xx status.
        """
        args = self.validate(arguments)
        payload = await self.fetch(client, credential, args)
        return ToolCallResult(
            content=[
                TextContent(text=self.summarize(args, payload)),
                TextContent(text=json.dumps(payload, indent=2, ensure_ascii=False)),
            ]
        )

    async def __call__(self, client: WeatherApiClient, credential: str, arguments: Any) -> ToolCallResult:
        return await self.execute(client, credential, arguments)


class CurrentWeatherHandler(ToolHandler[CurrentWeatherInput]):
    """Handler for ``getCurrentWeather``."""

    descriptor = current_weather_tool
    input_model = CurrentWeatherInput

    async def fetch(self, client: WeatherApiClient, credential: str, args: CurrentWeatherInput) -> Any:
        return await client.current(credential, location=args.location, language=args.language)

    def summarize(self, args: CurrentWeatherInput, payload: Any) -> str:
        location = payload["location"]
        current = payload["current"]
        return (
            f"Current weather in {_fmt(location['name'])}, {_fmt(location['country'])}: "
            f"{_fmt(current['condition']['text'])}, {_fmt(current['temp_c'])}°C ({_fmt(current['temp_f'])}°F). "
            f"Feels like {_fmt(current['feelslike_c'])}°C. Humidity: {_fmt(current['humidity'])}%. "
            f"Wind: {_fmt(current['wind_kph'])} km/h {_fmt(current['wind_dir'])}."
        )


class WeatherForecastHandler(ToolHandler[WeatherForecastInput]):
    """Handler for ``getWeatherForecast``."""

    descriptor = weather_forecast_tool
    input_model = WeatherForecastInput

    async def fetch(self, client: WeatherApiClient, credential: str, args: WeatherForecastInput) -> Any:
        return await client.forecast(credential, location=args.location, days=args.days, language=args.language)

    def summarize(self, args: WeatherForecastInput, payload: Any) -> str:
        location = payload["location"]
        summary = f"{args.days}-day forecast for {_fmt(location['name'])}, {_fmt(location['country'])}:\n"
        for forecast_day in payload["forecast"]["forecastday"]:
            day = forecast_day["day"]
            summary += (
                f"{_fmt(forecast_day['date'])}: {_fmt(day['condition']['text'])}, "
                f"High: {_fmt(day['maxtemp_c'])}°C, Low: {_fmt(day['mintemp_c'])}°C\n"
            )
        return summary


class SearchLocationsHandler(ToolHandler[SearchLocationsInput]):
    """Handler for ``searchLocations``."""

    descriptor = search_locations_tool
    input_model = SearchLocationsInput

    async def fetch(self, client: WeatherApiClient, credential: str, args: SearchLocationsInput) -> Any:
        return await client.search(credential, query=args.query)

    def summarize(self, args: SearchLocationsInput, payload: Any) -> str:
        summary = f'Found {len(payload)} locations matching "{args.query}":\n'
        for location in payload:
            summary += (
                f"{_fmt(location['name'])}, {_fmt(location['region'])}, {_fmt(location['country'])} "
                f"({_fmt(location['lat'])}, {_fmt(location['lon'])})\n"
            )
        return summary


class ToolHandlerRegistry:
    """Registry mapping every ``ToolName`` to its handler.

    Notes:
        - Iteration order is the registration order, which is also the
          ``tools/list`` order.
        - ``get`` returns None for names outside the ``ToolName`` enumeration.
    """

    def __init__(self) -> None:
        self._handlers: Dict[ToolName, ToolHandler[Any]] = {}

    def register(self, handler: ToolHandler[Any]) -> None:
        self._handlers[handler.name] = handler
        logger.debug(f"Registered tool handler: {handler.name.value}")

    def get(self, name: Any) -> Optional[ToolHandler[Any]]:
        try:
            return self._handlers.get(ToolName(name))
        except ValueError:
            return None

    def names(self) -> List[str]:
        return [name.value for name in self._handlers]

    def descriptors(self) -> List[ToolDescriptor]:
        return [handler.descriptor for handler in self._handlers.values()]

    def check_complete(self) -> None:
        """Fail fast if a ``ToolName`` has no handler."""
        missing = [name.value for name in ToolName if name not in self._handlers]
        if missing:
            raise RuntimeError(f"No handler registered for tools: {', '.join(missing)}")


def build_registry() -> ToolHandlerRegistry:
    """Create the registry holding the three weather tools."""
    registry = ToolHandlerRegistry()
    registry.register(CurrentWeatherHandler())
    registry.register(WeatherForecastHandler())
    registry.register(SearchLocationsHandler())
    registry.check_complete()
    return registry
