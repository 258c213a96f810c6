"""
Middleware interface for HttpService.

This module defines the `Middleware` protocol used in XBoard SDK.
It allows hooking into the request/response lifecycle of every HTTP call
dispatched by `HttpService`.

Any class that implements this interface can be passed to the service as a
middleware. The service always runs `AuthInterceptor` first, then the
user-supplied middlewares in order.

Current implementations:
- Credential injection (see: AuthInterceptor)
- Logging (see: LoggingMiddleware) - logs requests/responses with timing
"""

from typing import Any
from typing import Protocol

from xboard_sdk.transport.base import UnifiedResponse


class Middleware(Protocol):
    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: dict[str, Any] | None,
        json: Any,
    ) -> None:
        """
        Called before the HTTP request is executed.

        This can be used to:
        - Add or modify headers (current: AuthInterceptor)
        - Log request details (current: LoggingMiddleware)
        - Cancel or abort execution (by raising)

        Args:
            method (str): HTTP method, e.g., 'GET', 'POST'
            url (str): Full URL of the request
            headers (dict): Request headers (modifiable)
            params (dict | None): Query parameters
            json (Any): JSON body payload
        """

    async def on_response(self, response: UnifiedResponse) -> None:
        """
        Called after the HTTP response is received (but before it's parsed).

        Args:
            response (UnifiedResponse): Unified response object from transport layer
        """
