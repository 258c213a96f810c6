"""
Logging middleware for XBoard SDK.

This module provides LoggingMiddleware, a built-in middleware that logs
all HTTP requests and responses with timing information. Useful for
debugging, monitoring, and understanding SDK behavior.

The Authorization header and password fields are redacted before logging.
"""

import logging
import time
from contextvars import ContextVar

from xboard_sdk.auth_interceptor import AUTHORIZATION_HEADER
from xboard_sdk.transport.base import UnifiedResponse

logger = logging.getLogger("xboard_sdk.middleware.logging")

# Each asyncio task runs in its own context copy, so concurrent requests keep
# separate start times.
_request_started: ContextVar[float | None] = ContextVar(
    "xboard_request_started", default=None
)


def redact_headers(headers: dict) -> dict:
    return {
        key: ("***" if key.lower() == AUTHORIZATION_HEADER.lower() else value)
        for key, value in headers.items()
    }


def redact_payload(payload):
    if isinstance(payload, dict) and "password" in payload:
        return {**payload, "password": "***"}
    return payload


class LoggingMiddleware:
    """
    Middleware for logging HTTP requests and responses in HttpService.
    Uses standard Python logging.
    """

    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict,
        params,
        json,
    ):
        _request_started.set(time.monotonic())
        logger.info(
            f"Request: {method} {url} | headers={redact_headers(headers)} | params={params} | json={redact_payload(json)}"
        )

    async def on_response(self, response: UnifiedResponse):
        started = _request_started.get()
        _request_started.set(None)
        elapsed = (time.monotonic() - started) if started is not None else None
        logger.info(
            f"Response: {response.status_code}"
            + (f" | elapsed={elapsed:.3f}s" if elapsed is not None else "")
        )
