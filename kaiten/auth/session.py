"""当前登录会话：令牌持久化到本地偏好文件，用户与授权状态只在进程内。"""
import sys
from typing import Callable, Optional

from kaiten.auth.client import AuthClient
from kaiten.auth.models import AuthResult, User
from kaiten.config import TOKEN_KEY
from kaiten.events import Subscribers
from kaiten.storage import KeyValueFile


class SessionStore:
    """会话上下文对象：由入口创建后显式传给需要它的组件。

    所有状态修改都应在界面线程进行；后台线程只跑 AuthClient 的网络调用，
    结果经 Qt 信号回到界面线程后再交给 apply_auth / apply_restore。
    """

    def __init__(self, client: AuthClient, storage: KeyValueFile):
        self._client = client
        self._storage = storage
        self._user: Optional[User] = None
        self._authorized = False
        self._subscribers: Subscribers["SessionStore"] = Subscribers()

    @property
    def client(self) -> AuthClient:
        return self._client

    @property
    def token(self) -> str:
        return self._storage.get_str(TOKEN_KEY)

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_authorized(self) -> bool:
        return self._authorized

    def subscribe(self, callback: Callable[["SessionStore"], None]) -> Callable[[], None]:
        return self._subscribers.subscribe(callback)

    def _set_token(self, token: str) -> None:
        if self._storage.get_str(TOKEN_KEY) != token:
            self._storage.set(TOKEN_KEY, token)

    def restore(self) -> bool:
        """启动时恢复会话。无本地令牌则不发请求；返回是否已授权。"""
        token = self.token
        if not token:
            return False
        return self.apply_restore(token, self._client.validate(token))

    def apply_restore(self, token: str, result: AuthResult) -> bool:
        """令牌无效则等同退出登录；有效但拉取用户失败则保留令牌、保持未授权。

        token 为本次校验的令牌；期间已重新登录或令牌已变更时丢弃该结果。
        """
        if self._authorized or self.token != token:
            print("[kaiten-auth] 会话已变更，忽略过期的恢复结果", file=sys.stderr, flush=True)
            return self._authorized
        if result.expired:
            print("[kaiten-auth] 本地令牌已失效，清除会话", file=sys.stderr, flush=True)
            self.logout()
            return False
        if not result.success or result.user is None or not token:
            print(f"[kaiten-auth] 恢复会话失败: {result.message}", file=sys.stderr, flush=True)
            self._user = None
            self._authorized = False
            self._subscribers.notify(self)
            return False
        # 以已校验过的本地令牌为准
        self._user = result.user.model_copy(update={"token": token, "password": None})
        self._authorized = True
        self._subscribers.notify(self)
        return True

    def sign_in(self, login: str, password: str) -> AuthResult:
        return self.apply_auth(self._client.sign_in(login, password))

    def sign_up(self, login: str, password: str, email: str) -> AuthResult:
        return self.apply_auth(self._client.sign_up(login, password, email))

    def apply_auth(self, result: AuthResult) -> AuthResult:
        """登录/注册结果落到会话上；失败不改变现有状态。"""
        if not result.success:
            return result
        user = result.user
        if user is None or not user.token:
            return AuthResult.fail("Server returned no token.")
        self._user = user.without_password()
        self._set_token(user.token)
        self._authorized = True
        self._subscribers.notify(self)
        return AuthResult.ok(self._user)

    def logout(self) -> None:
        """清除令牌、用户与授权状态；不调用后端注销接口。"""
        self._set_token("")
        self._user = None
        self._authorized = False
        self._subscribers.notify(self)

    def update_profile(self, login: str, email: str) -> Optional[User]:
        """仅本地修改当前用户的登录名与邮箱。"""
        if self._user is None:
            return None
        self._user = self._user.model_copy(update={"login": login.strip(), "email": email.strip()})
        self._subscribers.notify(self)
        return self._user
