"""
XBoard SDK - Async-first SDK for XBoard panel APIs.

This SDK provides:
- Token management with file or memory storage
- Auth state broadcasting to any number of subscribers
- Credential injection and typed error mapping for every request
- Multiple HTTP transport support
- Middleware support
"""

from .api import ApiResponse
from .api import LoginApi
from .api import UserInfoApi
from .auth_interceptor import AuthInterceptor
from .auth_state import AuthState
from .auth_state import AuthStateEmitter
from .auth_state import AuthStateSubscription
from .config import HttpConfig
from .config import XBoardSettings
from .exceptions import ApiException
from .exceptions import ConfigError
from .exceptions import DecodeError
from .exceptions import NetworkError
from .exceptions import XBoardError
from .http_service import HttpService
from .http_service import NormalizedResponse
from .middleware import Middleware
from .sdk import XBoardSDK
from .token_manager import TokenManager
from .token_store import FileTokenStore
from .token_store import MemoryTokenStore
from .token_store import TokenStore

__version__ = "1.0.0"

__all__ = [
    "XBoardSDK",
    "XBoardSettings",
    "HttpConfig",
    "HttpService",
    "NormalizedResponse",
    "AuthInterceptor",
    "AuthState",
    "AuthStateEmitter",
    "AuthStateSubscription",
    "TokenManager",
    "TokenStore",
    "FileTokenStore",
    "MemoryTokenStore",
    "Middleware",
    "ApiResponse",
    "LoginApi",
    "UserInfoApi",
    "XBoardError",
    "ConfigError",
    "NetworkError",
    "ApiException",
    "DecodeError",
]
