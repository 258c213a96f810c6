import logging

import pytest

from xboard_sdk.auth_interceptor import AuthInterceptor
from xboard_sdk.auth_state import AuthState
from xboard_sdk.token_manager import TokenManager
from xboard_sdk.transport.base import UnifiedResponse


@pytest.mark.asyncio
async def test_attaches_token_when_present():
    manager = await TokenManager.memory()
    await manager.save_token("abc")
    interceptor = AuthInterceptor(manager)
    headers = {"User-Agent": "test"}

    await interceptor.on_request("GET", "https://x/api", headers, None, None)

    assert headers == {"User-Agent": "test", "Authorization": "Bearer abc"}


@pytest.mark.asyncio
async def test_forwards_unauthenticated_without_token():
    manager = await TokenManager.memory()
    interceptor = AuthInterceptor(manager)
    headers = {}

    await interceptor.on_request("POST", "https://x/login", headers, None, {})

    assert "Authorization" not in headers


@pytest.mark.asyncio
async def test_unauthorized_response_leaves_state_alone(caplog):
    """
    GIVEN: a stored token
    WHEN: the server answers 401
    THEN: a warning is logged and the token and state are unchanged
    """
    manager = await TokenManager.memory()
    await manager.save_token("abc")
    subscription = manager.auth_state_stream()
    interceptor = AuthInterceptor(manager)
    caplog.set_level(logging.WARNING, logger="xboard_sdk.auth_interceptor")

    await interceptor.on_response(UnifiedResponse(401, '{"message":"Unauthenticated."}'))

    assert "401" in caplog.text
    assert manager.current_state is AuthState.AUTHENTICATED
    assert await manager.get_token() == "Bearer abc"
    assert subscription.pending == 0
