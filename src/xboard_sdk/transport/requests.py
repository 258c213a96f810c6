import asyncio
import functools
from typing import Any

import requests

from xboard_sdk.config import HttpConfig
from xboard_sdk.exceptions import NetworkError

from .base import BaseTransport
from .base import UnifiedResponse


class RequestsTransport(BaseTransport):
    """
    Sync transport implementation using requests.Session.

    This transport wraps the synchronous requests library in an async interface
    to provide compatibility with the async-first SDK design.

    Note: This is a compatibility layer for users who need to use requests
    in an async context. For best performance, use httpx or aiohttp.
    """

    def __init__(self, timeout: float = 30.0, http_config: HttpConfig | None = None):
        config = http_config or HttpConfig.default()
        self._timeout = timeout
        self._session = requests.Session()
        if config.proxy_url:
            self._session.proxies = {"http": config.proxy_url, "https": config.proxy_url}
        if not config.verify_ssl:
            self._session.verify = False
        elif config.ca_bundle is not None:
            self._session.verify = str(config.ca_bundle)

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        """
        Async wrapper around synchronous requests.

        This method runs the synchronous requests call in a thread pool
        to avoid blocking the event loop.
        """
        loop = asyncio.get_running_loop()
        make_request = functools.partial(
            self._session.request,
            method=method,
            url=url,
            headers=headers or {},
            params=params or {},
            json=json,
            timeout=timeout or self._timeout,
        )
        try:
            response = await loop.run_in_executor(None, make_request)
        except requests.RequestException as e:
            raise NetworkError(f"{method} {url} failed: {e!r}", details=e) from e
        return UnifiedResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            reason=response.reason,
        )

    async def close(self):
        """
        Async wrapper for closing the session.
        """
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._session.close)
