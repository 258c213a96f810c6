import asyncio
import logging
from types import SimpleNamespace

import pytest

from xboard_sdk import logging_middleware
from xboard_sdk.logging_middleware import LoggingMiddleware
from xboard_sdk.logging_middleware import redact_headers
from xboard_sdk.transport.base import UnifiedResponse


@pytest.mark.asyncio
async def test_logging_middleware_logs(caplog: pytest.LogCaptureFixture):
    """
    Request and response lines are logged with timing, and secrets are
    redacted.
    """
    middleware = LoggingMiddleware()
    caplog.set_level(logging.INFO, logger="xboard_sdk.middleware.logging")

    await middleware.on_request(
        method="POST",
        url="https://panel.test/api/v1/passport/auth/login",
        headers={"Authorization": "Bearer secret-token", "User-Agent": "t"},
        params=None,
        json={"email": "user@example.com", "password": "hunter2"},
    )
    await middleware.on_response(UnifiedResponse(200, "{}"))

    logs = caplog.text
    assert "Request: POST https://panel.test/api/v1/passport/auth/login" in logs
    assert "'Authorization': '***'" in logs
    assert "secret-token" not in logs
    assert "hunter2" not in logs
    assert "user@example.com" in logs
    assert "Response: 200" in logs
    assert "elapsed=" in logs


def test_redact_headers_is_case_insensitive():
    assert redact_headers({"authorization": "x", "Accept": "a"}) == {
        "authorization": "***",
        "Accept": "a",
    }


@pytest.mark.asyncio
async def test_overlapping_requests_keep_their_own_timing(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
):
    """
    GIVEN: request B starts while request A is still in flight
    WHEN: both responses arrive
    THEN: each elapsed time is measured from its own request start
    """
    ticks = iter([0.0, 10.0, 15.0, 20.0])
    monkeypatch.setattr(
        logging_middleware, "time", SimpleNamespace(monotonic=lambda: next(ticks))
    )
    caplog.set_level(logging.INFO, logger="xboard_sdk.middleware.logging")
    middleware = LoggingMiddleware()

    async def call(name, started, proceed):
        await middleware.on_request(
            method="GET",
            url=f"https://panel.test/{name}",
            headers={},
            params=None,
            json=None,
        )
        started.set()
        await proceed.wait()
        await middleware.on_response(UnifiedResponse(200, "{}"))

    a_started, a_proceed = asyncio.Event(), asyncio.Event()
    b_started, b_proceed = asyncio.Event(), asyncio.Event()

    task_a = asyncio.create_task(call("a", a_started, a_proceed))
    await a_started.wait()
    task_b = asyncio.create_task(call("b", b_started, b_proceed))
    await b_started.wait()
    a_proceed.set()
    await task_a
    b_proceed.set()
    await task_b

    responses = [
        record.getMessage()
        for record in caplog.records
        if record.getMessage().startswith("Response:")
    ]
    assert responses == [
        "Response: 200 | elapsed=15.000s",
        "Response: 200 | elapsed=10.000s",
    ]


@pytest.mark.asyncio
async def test_response_without_request_logs_no_timing(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="xboard_sdk.middleware.logging")

    async def respond_only():
        await LoggingMiddleware().on_response(UnifiedResponse(204, ""))

    await asyncio.create_task(respond_only())

    assert "Response: 204" in caplog.text
    assert "elapsed=" not in caplog.text
