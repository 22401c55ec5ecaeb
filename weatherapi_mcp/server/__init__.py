"""
Weather MCP Server Package.

This package contains the HTTP transport for the gateway: it extracts the
caller's credential, parses JSON-RPC bodies, hands them to the dispatcher and
serializes the response.

Subpackages:
    api: FastAPI route definitions (MCP endpoint, health and version).
    core: Configuration settings.
    services: Dependency wiring (dispatcher, upstream client, credential).
    middleware: Request metrics.
    exception_handlers: Last-resort error handling.
"""
