from __future__ import annotations

from typing import Any

import httpx


class GeographicClientError(Exception):
    """Base client error."""


class MissingParameterError(GeographicClientError, ValueError):
    def __init__(self, parameter: str):
        super().__init__(f"Missing required parameter: {parameter}")
        self.parameter = parameter


class NetworkError(GeographicClientError):
    """Transport/network layer error."""


class ApiError(GeographicClientError):
    def __init__(
            self,
            status_code: int,
            message: str,
            details: str | None = None,
            *,
            response: httpx.Response | None = None,
            body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.details = details
        self.response = response
        self.body = body


class AuthError(ApiError):
    """Auth-related API error."""
