"""
Aiohttp transport implementation for XBoard SDK.

This module provides AiohttpTransport, an alternative async HTTP client for the SDK.
Aiohttp is a mature async HTTP client with connection pooling and
comprehensive timeout handling.

The session is created lazily on the first request, inside the running
event loop.
"""

import asyncio
from typing import Any

import aiohttp

from xboard_sdk.config import HttpConfig
from xboard_sdk.exceptions import NetworkError

from .base import BaseTransport
from .base import UnifiedResponse


class AiohttpTransport(BaseTransport):
    """
    Async transport implementation using aiohttp.ClientSession.
    """

    def __init__(self, timeout: float = 30.0, http_config: HttpConfig | None = None):
        self._timeout = timeout
        self._config = http_config or HttpConfig.default()
        self._session: aiohttp.ClientSession | None = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            verify = self._config.ssl_verify()
            connector = aiohttp.TCPConnector(ssl=verify)
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            )
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        session = self._get_session()
        timeout_obj = aiohttp.ClientTimeout(total=timeout or self._timeout)
        try:
            async with session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
                proxy=self._config.proxy_url,
                timeout=timeout_obj,
            ) as response:
                text = await response.text()
                return UnifiedResponse(
                    status_code=response.status,
                    text=text,
                    headers=dict(response.headers),
                    reason=response.reason,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"{method} {url} failed: {e!r}", details=e) from e

    async def close(self):
        if self._session:
            await self._session.close()
