"""
Custom exceptions for the XBoard SDK.

Every failure raised by the request pipeline is one of a closed set of kinds,
so callers can branch on the exception type and status code instead of
matching on message text:

- ConfigError: invalid construction input (e.g. an empty base URL)
- NetworkError: the transport could not complete, no response was received
- ApiException: the server answered with a non-2xx status
- DecodeError: the response body was not valid JSON or had an unexpected shape
"""

from http import HTTPStatus
from typing import Any, Optional


class XBoardError(Exception):
    """
    Base exception for all SDK-level failures.

    Args:
        message (str): Short explanation of the error.
        details (Any | None): Optional structured details (e.g., validation errors).
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigError(XBoardError):
    """Raised when the SDK is constructed with invalid input."""


class NetworkError(XBoardError):
    """Raised when no response was received (connection, DNS, TLS, timeout)."""


class ApiException(XBoardError):
    """
    Raised when the server responds with a non-2xx status.

    Args:
        status_code (int): HTTP status returned by the server.
        message (str): Message from the error envelope, or the status line.
        details (Any | None): Decoded error body when it was JSON.
    """

    def __init__(self, status_code: int, message: str, details: Optional[Any] = None):
        super().__init__(message, details=details)
        self.status_code = status_code

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == HTTPStatus.UNAUTHORIZED

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == HTTPStatus.TOO_MANY_REQUESTS

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"


class DecodeError(XBoardError):
    """Raised when a successful response body is not JSON or not the expected shape."""

    def __init__(self, message: str, status_code: int, text: str = ""):
        super().__init__(message, details=text)
        self.status_code = status_code
        self.text = text
