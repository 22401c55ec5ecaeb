"""WeatherAPI.com REST client."""

from .client import WeatherApiClient
from .errors import UpstreamError

__all__ = ["WeatherApiClient", "UpstreamError"]
