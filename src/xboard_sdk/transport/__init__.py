"""
Transport layer for XBoard SDK.

This module provides a unified transport interface that abstracts different HTTP clients.
The SDK supports multiple transport backends for flexibility:

- httpx: Modern async HTTP client (default, recommended)
- aiohttp: Async HTTP client with advanced features
- requests: Sync HTTP client wrapped in async interface

All transports implement the same interface, making them interchangeable,
and all of them report connection failures as NetworkError.
"""

from xboard_sdk.config import HttpConfig
from xboard_sdk.exceptions import ConfigError

from .base import BaseTransport
from .base import UnifiedResponse
from .httpx import HttpxTransport

__all__ = ["BaseTransport", "HttpxTransport", "UnifiedResponse", "get_transport"]


def get_transport(
    name: str, timeout: float = 30.0, http_config: HttpConfig | None = None
) -> BaseTransport:
    """
    Get transport instance by name.

    Available transports:
    - httpx: Async HTTP client (default)
    - aiohttp: Async HTTP client
    - requests: Sync HTTP client (wrapped in async interface)
    """
    name = name.lower()
    if name == "httpx":
        return HttpxTransport(timeout, http_config=http_config)
    elif name == "aiohttp":
        from .aiohttp import AiohttpTransport

        return AiohttpTransport(timeout, http_config=http_config)
    elif name == "requests":
        from .requests import RequestsTransport

        return RequestsTransport(timeout, http_config=http_config)
    else:
        raise ConfigError(
            f"Unknown transport: {name}. Available: httpx, aiohttp, requests"
        )
