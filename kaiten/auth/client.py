"""后端认证接口：校验令牌、登录、注册、获取当前用户。

接口（base URL 见 config.API_BASE_URL）：
- POST /api/auth/checkout  Bearer 令牌，200 表示有效
- POST /api/auth/signin    JSON {login, password}，200 返回用户
- POST /api/auth/signup    JSON {login, password, email}，200 返回用户
- GET  /api/auth/user      Bearer 令牌，200 返回用户

每个动作只发一次请求，不重试。网络错误、非 200、响应解析失败都收敛为
AuthResult(success=False, message=...)，message 直接给界面展示。
"""
import sys
from typing import Any, Optional

import requests
from pydantic import ValidationError

from kaiten.auth.models import AuthResult, User
from kaiten.config import API_BASE_URL, REQUEST_TIMEOUT

CHECKOUT_PATH = "/api/auth/checkout"
SIGNIN_PATH = "/api/auth/signin"
SIGNUP_PATH = "/api/auth/signup"
USER_PATH = "/api/auth/user"

DECODE_ERROR = "Cannot decode user data."
INVALID_TOKEN = "Session expired. Please log in again."


def _log(msg: str) -> None:
    print(f"[kaiten-auth] {msg}", file=sys.stderr, flush=True)


def _error_message(response: requests.Response, label: str) -> str:
    """非 200 响应：优先取 JSON 里的 message 字段，否则给出带状态码的通用提示。"""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return f"{label} error (status {response.status_code})."


class AuthClient:
    """认证接口客户端；http 可注入（测试时替换为假的 requests.Session）。"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self._http = http or requests.Session()
        self.timeout = REQUEST_TIMEOUT if timeout is None else timeout

    def _send(self, method: str, path: str, token: str = "", body: Optional[dict] = None) -> requests.Response:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        kwargs: dict[str, Any] = {"headers": headers, "timeout": self.timeout}
        if body is not None:
            kwargs["json"] = body
        return self._http.request(method, self.base_url + path, **kwargs)

    def _user_call(self, method: str, path: str, label: str, token: str = "", body: Optional[dict] = None) -> AuthResult:
        try:
            r = self._send(method, path, token=token, body=body)
        except requests.RequestException as e:
            _log(f"{method} {path} 请求失败: {e}")
            return AuthResult.fail(str(e) or f"{label} request failed.")
        _log(f"{method} {path} 响应 HTTP {r.status_code}")
        if r.status_code != 200:
            return AuthResult.fail(_error_message(r, label))
        try:
            user = User.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            _log(f"{path} 用户数据解析失败: {e}")
            return AuthResult.fail(DECODE_ERROR)
        return AuthResult.ok(user.without_password())

    def check_token(self, token: str) -> bool:
        """令牌是否仍有效；空令牌不发请求直接无效。"""
        if not token:
            return False
        try:
            r = self._send("POST", CHECKOUT_PATH, token=token)
        except requests.RequestException as e:
            _log(f"校验令牌失败: {e}")
            return False
        _log(f"POST {CHECKOUT_PATH} 响应 HTTP {r.status_code}")
        return r.status_code == 200

    def sign_in(self, login: str, password: str) -> AuthResult:
        return self._user_call("POST", SIGNIN_PATH, "Login", body={"login": login, "password": password})

    def sign_up(self, login: str, password: str, email: str) -> AuthResult:
        return self._user_call(
            "POST", SIGNUP_PATH, "Sign up", body={"login": login, "password": password, "email": email}
        )

    def fetch_user(self, token: str) -> AuthResult:
        if not token:
            return AuthResult.fail("No token.")
        return self._user_call("GET", USER_PATH, "Fetch user", token=token)

    def validate(self, token: str) -> AuthResult:
        """启动恢复的网络部分：先校验令牌，有效再拉取用户。令牌无效时 expired=True。"""
        if not self.check_token(token):
            return AuthResult(success=False, message=INVALID_TOKEN, expired=True)
        return self.fetch_user(token)

    def close(self) -> None:
        self._http.close()
