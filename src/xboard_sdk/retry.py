"""
Opt-in retry helper for callers of the SDK.

HttpService never retries. Callers that want to ride out flaky networks
wrap their calls with ``network_retrying``; only NetworkError is retried, so
API errors (4xx/5xx responses) and decode errors surface immediately.

Example:
    async for attempt in network_retrying(attempts=3):
        with attempt:
            info = await sdk.user_info.get_user_info()
"""

from tenacity import AsyncRetrying
from tenacity import retry_if_exception_type
from tenacity import stop_after_attempt
from tenacity import wait_exponential

from xboard_sdk.exceptions import NetworkError


def network_retrying(
    attempts: int = 3, min_wait: float = 1, max_wait: float = 5
) -> AsyncRetrying:
    return AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.5, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(NetworkError),
        reraise=True,
    )
