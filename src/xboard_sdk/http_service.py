"""
HTTP dispatch service for the XBoard SDK.

HttpService is the single path every resource API call takes:

1. build the full URL from the base URL, the optional obfuscation prefix and
   the request path
2. run AuthInterceptor and any extra middlewares over the request
3. execute it on the configured transport
4. map the outcome to a NormalizedResponse or one of the typed errors in
   xboard_sdk.exceptions

The service performs no retries, no caching and no request coalescing.
Callers that want retries wrap their calls (see xboard_sdk.retry).

Example usage:
    token_manager = await TokenManager.memory()
    service = HttpService("https://panel.example.com", token_manager)

    result = await service.get("/api/v1/user/info")
    print(result.status_code, result.data)

    await service.aclose()
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from xboard_sdk.auth_interceptor import AuthInterceptor
from xboard_sdk.config import HttpConfig
from xboard_sdk.exceptions import ApiException
from xboard_sdk.exceptions import ConfigError
from xboard_sdk.exceptions import DecodeError
from xboard_sdk.middleware import Middleware
from xboard_sdk.token_manager import TokenManager
from xboard_sdk.transport import get_transport
from xboard_sdk.transport.base import BaseTransport
from xboard_sdk.transport.base import UnifiedResponse

logger = logging.getLogger("xboard_sdk.http_service")


@dataclass(frozen=True)
class NormalizedResponse:
    status_code: int
    data: Any


def extract_error_message(payload: Any) -> str | None:
    """
    Pulls a human-readable message out of an error envelope.

    The panel answers with ``{"message": ...}`` for most failures and with
    ``{"message": ..., "errors": {"field": ["..."]}}`` for validation errors.
    """
    if not isinstance(payload, dict):
        return None
    for key in ("message", "error"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    errors = payload.get("errors")
    if isinstance(errors, dict):
        for messages in errors.values():
            if isinstance(messages, list) and messages:
                return str(messages[0])
            if isinstance(messages, str):
                return messages
    return None


def _check_base_url(base_url: str) -> None:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ConfigError(f"Invalid base URL {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"Base URL must be an absolute http(s) URL: {base_url!r}")

class HttpService:
    """
    Async dispatcher that attaches credentials and normalizes results.

    Args:
        base_url (str): Panel root URL. One trailing slash is stripped.
        token_manager (TokenManager): Source of the bearer token.
        http_config (HttpConfig | None): Headers, proxy and TLS settings.
        transport (BaseTransport | None): Transport instance. Defaults to an
            httpx transport built from ``http_config``.
        timeout (float): Request timeout in seconds for the default transport.
        middlewares (list[Middleware] | None): Extra hooks run after the
            AuthInterceptor.

    Raises:
        ConfigError: If ``base_url`` is empty or not an absolute http(s) URL.
    """

    def __init__(
        self,
        base_url: str,
        token_manager: TokenManager,
        http_config: HttpConfig | None = None,
        transport: BaseTransport | None = None,
        timeout: float = 30.0,
        middlewares: list[Middleware] | None = None,
    ):
        if not base_url or not base_url.strip():
            raise ConfigError("Base URL cannot be empty")
        base_url = base_url.strip()
        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url
        _check_base_url(self.base_url)
        self.token_manager = token_manager
        self.http_config = http_config or HttpConfig.default()
        self.transport = transport or get_transport(
            "httpx", timeout=timeout, http_config=self.http_config
        )
        self.auth_interceptor = AuthInterceptor(token_manager)
        self.middlewares: list[Middleware] = [self.auth_interceptor]
        self.middlewares.extend(middlewares or [])

    def build_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{self.http_config.path_prefix()}{path}"

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> NormalizedResponse:
        """
        Sends one request through the pipeline.

        Args:
            method (str): HTTP method.
            path (str): API path starting with ``/``.
            json (Any): Optional JSON body.
            params (dict | None): Optional query parameters.

        Returns:
            NormalizedResponse: Status code and decoded JSON body.

        Raises:
            NetworkError: If no response was received.
            ApiException: If the server answered with a non-2xx status.
            DecodeError: If a successful response is not valid JSON.
        """
        method = method.upper()
        url = self.build_url(path)
        headers = self.http_config.default_headers()

        for mw in self.middlewares:
            await mw.on_request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json,
            )

        response = await self.transport.request(
            method=method,
            url=url,
            headers=headers,
            params=params,
            json=json,
        )

        for mw in self.middlewares:
            await mw.on_response(response)

        if not response.is_success:
            raise self._api_exception(response)
        return NormalizedResponse(
            status_code=response.status_code, data=self._decode(response)
        )

    @staticmethod
    def _api_exception(response: UnifiedResponse) -> ApiException:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = extract_error_message(payload) or response.status_line
        logger.debug(f"API error {response.status_code}: {message}")
        return ApiException(
            response.status_code,
            message,
            details=payload if payload is not None else response.text,
        )

    @staticmethod
    def _decode(response: UnifiedResponse) -> Any:
        if not response.text.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON in response ({response.status_code}): {e}",
                status_code=response.status_code,
                text=response.text,
            ) from e

    async def get(self, path: str, params: dict[str, Any] | None = None):
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None):
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None):
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None):
        return await self.request("DELETE", path, params=params)

    async def aclose(self):
        await self.transport.close()
