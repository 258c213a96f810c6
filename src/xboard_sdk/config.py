"""
Configuration management for XBoard SDK.

This module provides two classes:

- HttpConfig: transport options shared by every request (User-Agent, extra
  headers, path obfuscation prefix, outbound proxy, TLS trust policy).
- XBoardSettings: SDK settings loaded from environment variables, .env files
  and sensible defaults.

Environment variables are automatically loaded with XBOARD_ prefix.
Example: XBOARD_BASE_URL=https://panel.example.com
"""

import ssl
from pathlib import Path
from typing import Literal

from pydantic import BaseModel
from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

DEFAULT_USER_AGENT = "xboard-sdk-python/1.0"
DEFAULT_TOKEN_PATH = Path.home() / ".xboard_sdk" / "token.json"


class HttpConfig(BaseModel):
    """
    Transport options applied to every request.

    Attributes:
        user_agent: Value of the User-Agent header.
        headers: Extra headers sent with every request.
        obfuscation_prefix: Path segment inserted between the base URL and the
            API path, for panels served behind an obfuscated route.
        proxy_url: Outbound proxy, e.g. ``http://127.0.0.1:7890``.
        verify_ssl: Set to False to accept any server certificate.
        ca_bundle: PEM file with extra trusted certificates.
    """

    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = Field(default_factory=dict)
    obfuscation_prefix: str | None = None
    proxy_url: str | None = None
    verify_ssl: bool = True
    ca_bundle: Path | None = None

    @classmethod
    def default(cls) -> "HttpConfig":
        return cls()

    @classmethod
    def production(cls, user_agent: str, **kwargs) -> "HttpConfig":
        return cls(user_agent=user_agent, **kwargs)

    def default_headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        headers.update(self.headers)
        return headers

    def path_prefix(self) -> str:
        if not self.obfuscation_prefix:
            return ""
        return "/" + self.obfuscation_prefix.strip("/")

    def ssl_verify(self) -> bool | ssl.SSLContext:
        """Returns the trust policy in the form httpx and aiohttp accept."""
        if not self.verify_ssl:
            return False
        if self.ca_bundle is not None:
            return ssl.create_default_context(cafile=str(self.ca_bundle))
        return True


class XBoardSettings(BaseSettings):
    """
    Configuration settings for XBoard SDK with environment variable support.

    This class automatically loads configuration from:
    - Environment variables (with XBOARD_ prefix)
    - .env files
    - Default values for optional settings

    Example:
        # From environment
        export XBOARD_BASE_URL=https://panel.example.com
        export XBOARD_TIMEOUT=60.0

        # In code
        settings = XBoardSettings()
    """

    base_url: str = ""
    timeout: float = 30.0
    transport: str = "httpx"  # default, can be 'aiohttp' or 'requests'
    token_storage: Literal["file", "memory"] = "file"
    token_path: Path = DEFAULT_TOKEN_PATH
    user_agent: str = DEFAULT_USER_AGENT
    obfuscation_prefix: str | None = None
    proxy_url: str | None = None
    verify_ssl: bool = True
    ca_bundle: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="XBOARD_", env_file=".env", extra="ignore"
    )

    def http_config(self) -> HttpConfig:
        return HttpConfig(
            user_agent=self.user_agent,
            obfuscation_prefix=self.obfuscation_prefix,
            proxy_url=self.proxy_url,
            verify_ssl=self.verify_ssl,
            ca_bundle=self.ca_bundle,
        )
