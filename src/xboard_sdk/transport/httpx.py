from typing import Any

import httpx

from xboard_sdk.config import HttpConfig
from xboard_sdk.exceptions import ConfigError
from xboard_sdk.exceptions import NetworkError

from .base import BaseTransport
from .base import UnifiedResponse


class HttpxTransport(BaseTransport):
    """
    Async transport implementation using httpx.AsyncClient.

    Args:
        timeout (float): Default request timeout in seconds.
        http_config (HttpConfig | None): Proxy and TLS trust settings.
        transport (httpx.AsyncBaseTransport | None): Low-level httpx transport,
            e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        http_config: HttpConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        config = http_config or HttpConfig.default()
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            proxy=config.proxy_url,
            verify=config.ssl_verify(),
            transport=transport,
        )

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
        timeout: float | None = None,
    ) -> UnifiedResponse:
        try:
            response = await self._client.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
                timeout=timeout or self._timeout,
            )
        except httpx.InvalidURL as e:
            raise ConfigError(f"Invalid request URL {url!r}: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {url} failed: {e!r}", details=e) from e
        return UnifiedResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            reason=response.reason_phrase,
        )

    async def close(self):
        await self._client.aclose()
