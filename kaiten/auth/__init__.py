"""登录与会话：认证接口客户端、当前用户、令牌持久化。"""
from kaiten.auth.models import AuthResult, User
from kaiten.auth.client import AuthClient
from kaiten.auth.session import SessionStore

__all__ = ["AuthResult", "User", "AuthClient", "SessionStore"]
