"""
Credential injection for outgoing requests.

AuthInterceptor is the middleware HttpService runs before every request. It
attaches the stored bearer token as the Authorization header and reports
401 responses. It never clears or refreshes the token: the panel issues
tokens that stay valid until revoked, and deciding whether a 401 means
"log out" is left to the caller.
"""

import logging
from http import HTTPStatus
from typing import Any

from xboard_sdk.token_manager import TokenManager
from xboard_sdk.transport.base import UnifiedResponse

logger = logging.getLogger("xboard_sdk.auth_interceptor")

AUTHORIZATION_HEADER = "Authorization"


class AuthInterceptor:
    def __init__(self, token_manager: TokenManager):
        self.token_manager = token_manager

    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: dict[str, Any] | None,
        json: Any,
    ) -> None:
        token = await self.token_manager.get_token()
        if token is None:
            # public endpoints (login, register, guest config) work without one
            logger.debug(f"No token for {method} {url}; sending unauthenticated")
            return
        headers[AUTHORIZATION_HEADER] = token

    async def on_response(self, response: UnifiedResponse) -> None:
        if response.status_code == HTTPStatus.UNAUTHORIZED:
            logger.warning(
                "Server rejected the credentials (401); token left in place"
            )
