"""
Async-first XBoard SDK facade.

This module provides the XBoardSDK class, the entry point a host
application constructs once and passes to whatever needs panel access.
There is no global instance.

Features include:

- Bearer token storage (file or memory) with auth state broadcasting
- Credential injection and typed error mapping for every request
- Multiple HTTP transport backends (httpx, aiohttp, requests)
- Pluggable middleware for request/response processing

Example usage:
    from xboard_sdk import XBoardSDK, HttpConfig

    sdk = await XBoardSDK.create(
        "https://your-xboard-domain.com",
        http_config=HttpConfig.production(user_agent="MyApp/1.0"),
    )

    if await sdk.login_with_credentials("user@example.com", "password"):
        info = await sdk.user_info.get_user_info()

    subscription = sdk.auth_state_stream()
    ...
    await sdk.aclose()
"""

import logging

from xboard_sdk.api import LoginApi
from xboard_sdk.api import UserInfoApi
from xboard_sdk.auth_state import AuthState
from xboard_sdk.auth_state import AuthStateSubscription
from xboard_sdk.config import DEFAULT_TOKEN_PATH
from xboard_sdk.config import HttpConfig
from xboard_sdk.config import XBoardSettings
from xboard_sdk.exceptions import ConfigError
from xboard_sdk.exceptions import XBoardError
from xboard_sdk.http_service import HttpService
from xboard_sdk.middleware import Middleware
from xboard_sdk.token_manager import TokenManager
from xboard_sdk.token_store import FileTokenStore
from xboard_sdk.token_store import MemoryTokenStore
from xboard_sdk.token_store import TokenStore
from xboard_sdk.transport import get_transport
from xboard_sdk.transport.base import BaseTransport

logger = logging.getLogger("xboard_sdk.sdk")


def build_token_store(settings: XBoardSettings) -> TokenStore:
    if settings.token_storage == "memory":
        return MemoryTokenStore()
    return FileTokenStore(settings.token_path)


class XBoardSDK:
    """
    Facade over the token manager, the HTTP service and the resource APIs.

    Build it with ``await XBoardSDK.create(...)`` or
    ``await XBoardSDK.from_settings(settings)``; both check the token store
    before returning, so ``is_authenticated`` is already correct after a
    restart.

    Attributes:
        token_manager (TokenManager): Token storage and auth state.
        http_service (HttpService): Shared request pipeline.
        login (LoginApi): Passport endpoints.
        user_info (UserInfoApi): User account endpoints.
    """

    def __init__(self, token_manager: TokenManager, http_service: HttpService):
        self.token_manager = token_manager
        self.http_service = http_service
        self.login = LoginApi(http_service)
        self.user_info = UserInfoApi(http_service)

    @classmethod
    async def create(
        cls,
        base_url: str,
        http_config: HttpConfig | None = None,
        token_store: TokenStore | None = None,
        transport: BaseTransport | None = None,
        timeout: float = 30.0,
        middlewares: list[Middleware] | None = None,
    ) -> "XBoardSDK":
        """
        Args:
            base_url (str): XBoard panel root URL.
            http_config (HttpConfig | None): User-Agent, headers, proxy, TLS.
            token_store (TokenStore | None): Storage backend. Defaults to a
                FileTokenStore at the settings' default path.
            transport (BaseTransport | None): Transport; httpx by default.
            timeout (float): Request timeout in seconds.
            middlewares (list[Middleware] | None): Extra request hooks.

        Raises:
            ConfigError: If ``base_url`` is empty or malformed.
        """
        if token_store is None:
            token_store = FileTokenStore(DEFAULT_TOKEN_PATH)
        token_manager = await TokenManager.create(token_store)
        http_service = HttpService(
            base_url,
            token_manager,
            http_config=http_config,
            transport=transport,
            timeout=timeout,
            middlewares=middlewares,
        )
        return cls(token_manager, http_service)

    @classmethod
    async def from_settings(
        cls,
        settings: XBoardSettings,
        middlewares: list[Middleware] | None = None,
    ) -> "XBoardSDK":
        if not settings.base_url.strip():
            raise ConfigError("Base URL cannot be empty (set XBOARD_BASE_URL)")
        http_config = settings.http_config()
        return await cls.create(
            settings.base_url,
            http_config=http_config,
            token_store=build_token_store(settings),
            transport=get_transport(
                settings.transport, timeout=settings.timeout, http_config=http_config
            ),
            timeout=settings.timeout,
            middlewares=middlewares,
        )

    @property
    def base_url(self) -> str:
        return self.http_service.base_url

    async def save_token(self, token: str) -> None:
        await self.token_manager.save_token(token)

    async def get_token(self) -> str | None:
        return await self.token_manager.get_token()

    async def clear_token(self) -> None:
        await self.token_manager.clear_token()

    async def has_token(self) -> bool:
        return await self.token_manager.has_token()

    @property
    def auth_state(self) -> AuthState:
        return self.token_manager.current_state

    @property
    def is_authenticated(self) -> bool:
        return self.token_manager.is_authenticated

    def auth_state_stream(self) -> AuthStateSubscription:
        return self.token_manager.auth_state_stream()

    async def login_with_credentials(self, email: str, password: str) -> bool:
        """
        Logs in and stores the returned token.

        ``auth_data`` is preferred over ``token`` since it already carries
        the Bearer scheme.

        Returns:
            bool: True if a token was stored, False if the login was rejected
            or the request failed.
        """
        try:
            response = await self.login.login(email, password)
        except XBoardError as e:
            logger.warning(f"Login failed: {e}")
            return False
        if not response.success or response.data is None:
            logger.warning(f"Login rejected: {response.message}")
            return False
        token = response.data.auth_data or response.data.token
        if not token:
            logger.warning("Login response carried no token")
            return False
        await self.save_token(token)
        return True

    async def logout(self) -> None:
        await self.clear_token()

    async def aclose(self) -> None:
        """Ends the auth event stream and closes the transport."""
        self.token_manager.dispose()
        await self.http_service.aclose()

    async def __aenter__(self) -> "XBoardSDK":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
