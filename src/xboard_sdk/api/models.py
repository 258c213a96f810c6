"""
Response envelope and payload models shared by the resource APIs.
"""

import json
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from xboard_sdk.exceptions import DecodeError

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    The panel's standard envelope: ``{"status": ..., "message": ..., "data": ...}``.

    Older panel versions only send ``data``; a missing status counts as success.
    """

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None

    @classmethod
    def from_payload(
        cls, payload: Any, parse: Callable[[Any], T], status_code: int = 200
    ) -> "ApiResponse[T]":
        """
        Raises:
            DecodeError: If the payload does not match the expected model.
        """
        try:
            return cls._from_payload(payload, parse)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response shape: {e.error_count()} validation error(s)",
                status_code=status_code,
                text=json.dumps(payload, default=str),
            ) from e

    @classmethod
    def _from_payload(cls, payload: Any, parse: Callable[[Any], T]) -> "ApiResponse[T]":
        if not isinstance(payload, dict):
            return cls(success=True, data=parse(payload))
        if "success" in payload:
            success = bool(payload["success"])
        else:
            success = payload.get("status", "success") in ("success", True)
        data = payload.get("data")
        return cls(
            success=success,
            message=payload.get("message"),
            data=parse(data) if data is not None else None,
        )


class LoginData(BaseModel):
    model_config = ConfigDict(extra="allow")

    token: Optional[str] = None
    auth_data: Optional[str] = None
    is_admin: Optional[bool] = None


class UserInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str
    uuid: Optional[str] = None
    plan_id: Optional[int] = None
    balance: Optional[int] = None
    commission_balance: Optional[int] = None
    transfer_enable: Optional[int] = None
    expired_at: Optional[int] = None
    created_at: Optional[int] = None
    last_login_at: Optional[int] = None
    banned: Optional[bool] = None
    remind_expire: Optional[bool] = None
    remind_traffic: Optional[bool] = None
    telegram_id: Optional[int] = None
    avatar_url: Optional[str] = None
