"""
User account endpoints: profile, subscription link and reminder toggles.
"""

import logging

from xboard_sdk.api.models import ApiResponse
from xboard_sdk.api.models import UserInfo
from xboard_sdk.exceptions import XBoardError
from xboard_sdk.http_service import HttpService

logger = logging.getLogger("xboard_sdk.api.user_info")


def _subscribe_url(data) -> str | None:
    if isinstance(data, dict):
        return data.get("subscribe_url")
    return None


class UserInfoApi:
    def __init__(self, http_service: HttpService):
        self._http = http_service

    async def get_user_info(self) -> ApiResponse[UserInfo]:
        result = await self._http.get("/api/v1/user/info")
        return ApiResponse.from_payload(
            result.data, UserInfo.model_validate, status_code=result.status_code
        )

    async def validate_token(self) -> ApiResponse[bool]:
        """
        Checks the stored token by fetching the subscription link.

        Never raises for API or network failures; those come back as
        ``success=False`` with ``data=False``.
        """
        try:
            result = await self._http.get("/api/v1/user/getSubscribe")
        except XBoardError as e:
            logger.debug(f"Token validation failed: {e}")
            return ApiResponse(
                success=False, message="Token validation failed", data=False
            )
        return ApiResponse.from_payload(
            result.data,
            lambda data: _subscribe_url(data) is not None,
            status_code=result.status_code,
        )

    async def get_subscription_link(self) -> ApiResponse[str]:
        result = await self._http.get("/api/v1/user/getSubscribe")
        return ApiResponse.from_payload(
            result.data, _subscribe_url, status_code=result.status_code
        )

    async def reset_subscription_link(self) -> ApiResponse[str]:
        result = await self._http.get("/api/v1/user/resetSecurity")
        return ApiResponse.from_payload(
            result.data,
            lambda data: data if isinstance(data, str) else None,
            status_code=result.status_code,
        )

    async def toggle_traffic_reminder(self, enabled: bool) -> ApiResponse[None]:
        result = await self._http.post(
            "/api/v1/user/update", json={"remind_traffic": 1 if enabled else 0}
        )
        return ApiResponse.from_payload(
            result.data, lambda data: None, status_code=result.status_code
        )

    async def toggle_expire_reminder(self, enabled: bool) -> ApiResponse[None]:
        result = await self._http.post(
            "/api/v1/user/update", json={"remind_expire": 1 if enabled else 0}
        )
        return ApiResponse.from_payload(
            result.data, lambda data: None, status_code=result.status_code
        )
