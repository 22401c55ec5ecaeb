"""WeatherAPI.com MCP gateway.

Exposes the WeatherAPI.com REST endpoints as Model Context Protocol tools
over JSON-RPC 2.0.
"""

__version__ = "1.0.0"
