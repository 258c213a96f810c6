import pytest

from xboard_sdk.exceptions import ApiException
from xboard_sdk.exceptions import NetworkError
from xboard_sdk.retry import network_retrying


@pytest.mark.asyncio
async def test_retries_network_errors_only():
    calls = []

    async def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise NetworkError("connection reset")
        return "ok"

    async for attempt in network_retrying(attempts=3, min_wait=0, max_wait=0):
        with attempt:
            result = await flaky()

    assert result == "ok"
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_api_errors_are_not_retried():
    calls = []

    with pytest.raises(ApiException):
        async for attempt in network_retrying(attempts=3, min_wait=0, max_wait=0):
            with attempt:
                calls.append(1)
                raise ApiException(500, "Server Error")

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_gives_up_with_last_network_error():
    with pytest.raises(NetworkError):
        async for attempt in network_retrying(attempts=2, min_wait=0, max_wait=0):
            with attempt:
                raise NetworkError("down")
