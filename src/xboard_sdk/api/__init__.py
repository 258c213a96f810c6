"""Resource APIs built on top of HttpService."""

from .login import LoginApi
from .models import ApiResponse
from .models import LoginData
from .models import UserInfo
from .user_info import UserInfoApi

__all__ = ["ApiResponse", "LoginApi", "LoginData", "UserInfo", "UserInfoApi"]
