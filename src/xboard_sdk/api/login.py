from xboard_sdk.api.models import ApiResponse
from xboard_sdk.api.models import LoginData
from xboard_sdk.http_service import HttpService

LOGIN_PATH = "/api/v1/passport/auth/login"


class LoginApi:
    def __init__(self, http_service: HttpService):
        self._http = http_service

    async def login(self, email: str, password: str) -> ApiResponse[LoginData]:
        """
        Exchanges credentials for a token. The token is not stored here;
        XBoardSDK.login_with_credentials does that.
        """
        result = await self._http.post(
            LOGIN_PATH, json={"email": email, "password": password}
        )
        return ApiResponse.from_payload(
            result.data, LoginData.model_validate, status_code=result.status_code
        )
