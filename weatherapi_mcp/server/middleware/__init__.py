"""
Middleware modules for the weather MCP server.

This package contains middleware for request timing and tracing.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
