import json
from http import HTTPStatus
from typing import Any


class UnifiedResponse:
    """
    Unified response wrapper that hides the differences between HTTP clients.

    Transports read the whole body before building this object, so it stays
    usable after the underlying connection has been released.
    """

    def __init__(
        self,
        status_code: int,
        text: str = "",
        headers: dict[str, str] | None = None,
        reason: str | None = None,
    ):
        self.status_code = status_code
        self.text = text
        self.headers = headers or {}
        self.reason = reason or _default_reason(status_code)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def status_line(self) -> str:
        return f"HTTP {self.status_code} {self.reason}".rstrip()

    def json(self) -> Any:
        """
        Parses the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.text)


def _default_reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class BaseTransport:
    """
    Abstract transport layer interface for XBoard SDK.
    All HTTP client backends should inherit from this class.

    Implementations must raise NetworkError when no response was received,
    and return a UnifiedResponse for every HTTP status, including errors.

    Supported transports:
    - httpx: Native async HTTP client
    - aiohttp: Native async HTTP client
    - requests: Sync HTTP client wrapped in async interface
    """

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
        Async request method for all transports.
        Override this method in transport implementations.
        """
        raise NotImplementedError(
            "Transport implementations must override this method."
        )

    async def close(self):
        pass
