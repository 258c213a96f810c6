"""
This module provides the TokenManager class, the single authority for:
- storing, reading and clearing the bearer token
- knowing whether the SDK is currently authenticated
- broadcasting authentication state transitions to subscribers.

Tokens issued by the panel do not expire, so there is no refresh flow here:
a token stays valid until it is cleared.
"""

import logging
from pathlib import Path

from xboard_sdk.auth_state import AuthState
from xboard_sdk.auth_state import AuthStateEmitter
from xboard_sdk.auth_state import AuthStateSubscription
from xboard_sdk.token_store import FileTokenStore
from xboard_sdk.token_store import MemoryTokenStore
from xboard_sdk.token_store import TokenStore

logger = logging.getLogger("xboard_sdk.token_manager")

BEARER_PREFIX = "Bearer "


def with_bearer_prefix(token: str) -> str:
    """Returns ``token`` with exactly one ``Bearer `` prefix."""
    return token if token.startswith(BEARER_PREFIX) else f"{BEARER_PREFIX}{token}"


class TokenManager:
    """
    Owns the token store and the auth state emitter.

    Use ``await TokenManager.create(store)`` rather than the constructor: it
    checks the store first, so a token persisted by a previous run is reported
    as AUTHENTICATED right away. The constructor does no I/O and trusts the
    ``initial_state`` it is given, which must match what the store holds.

    Attributes:
        store (TokenStore): Backend the token is persisted in.
    """

    def __init__(
        self,
        store: TokenStore,
        *,
        initial_state: AuthState,
    ):
        self.store = store
        self._emitter = AuthStateEmitter(initial_state)

    @classmethod
    async def create(cls, store: TokenStore) -> "TokenManager":
        has_token = await store.has()
        initial = AuthState.AUTHENTICATED if has_token else AuthState.UNAUTHENTICATED
        logger.debug(f"Token manager starting {initial.value}")
        return cls(store, initial_state=initial)

    @classmethod
    async def file(cls, path: Path) -> "TokenManager":
        return await cls.create(FileTokenStore(path))

    @classmethod
    async def memory(cls) -> "TokenManager":
        return await cls.create(MemoryTokenStore())

    async def save_token(self, token: str) -> None:
        """
        Stores the token and marks the manager as authenticated.

        Args:
            token (str): Raw token, with or without the ``Bearer `` prefix.

        Raises:
            ValueError: If the token is empty.
        """
        if not token or not token.strip():
            raise ValueError("Token must not be empty")
        await self.store.save(with_bearer_prefix(token))
        logger.debug("Token saved")
        self._emitter.emit(AuthState.AUTHENTICATED)

    async def get_token(self) -> str | None:
        token = await self.store.read()
        if token is None:
            return None
        return with_bearer_prefix(token)

    async def clear_token(self) -> None:
        await self.store.clear()
        logger.debug("Token cleared")
        self._emitter.emit(AuthState.UNAUTHENTICATED)

    async def has_token(self) -> bool:
        return await self.store.has()

    @property
    def current_state(self) -> AuthState:
        return self._emitter.current

    @property
    def is_authenticated(self) -> bool:
        return self.current_state is AuthState.AUTHENTICATED

    def auth_state_stream(self) -> AuthStateSubscription:
        """
        Subscribes to state transitions.

        Raises:
            RuntimeError: If the manager has been disposed.
        """
        return self._emitter.subscribe()

    @property
    def disposed(self) -> bool:
        return self._emitter.closed

    def dispose(self) -> None:
        """
        Ends the auth event stream. The stored token is left untouched and
        get_token/has_token keep working.
        """
        self._emitter.close()
