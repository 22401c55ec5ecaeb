"""Error types raised by the WeatherAPI.com client.

Purpose:
- Carry the HTTP context of a failed upstream call (status code, reason
  phrase, decoded body) so the JSON-RPC layer can classify it.

Usage:
- Catch `UpstreamError` around `WeatherApiClient` calls and inspect
  `status_code` or `body`.
"""

from __future__ import annotations

from typing import Any


class UpstreamError(Exception):
    """Non-2xx response from the weather provider.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code returned by the provider.
        status_text: HTTP reason phrase returned by the provider.
        body: Decoded JSON body, or ``{"message": raw_text}`` when the body is not JSON.
    """

    def __init__(self, message: str, *, status_code: int, status_text: str = "", body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text
        self.body = body

    @property
    def message(self) -> str:
        return str(self)

    def detail(self) -> str:
        """Return the provider's own error message when it sent one."""
        if isinstance(self.body, dict):
            error = self.body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return self.message
