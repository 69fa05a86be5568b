"""用户与登录结果数据模型。"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """后端返回的用户；password 只出现在接口报文里，不长期持有。"""
    id: int = Field(..., description="用户 ID")
    login: str = Field(..., description="登录名")
    password: Optional[str] = Field(None, exclude=True, description="密码（仅报文）")
    email: str = Field(..., description="邮箱")
    token: str = Field(..., description="Bearer 令牌")

    model_config = ConfigDict(extra="ignore")

    def without_password(self) -> "User":
        return self.model_copy(update={"password": None})


class AuthResult(BaseModel):
    """一次认证请求的结果：成功带 user，失败带可展示的 message。"""
    success: bool = Field(..., description="是否成功")
    message: str = Field("", description="失败时给用户看的错误信息")
    user: Optional[User] = Field(None, description="成功时返回的用户")
    expired: bool = Field(False, description="令牌校验未通过（需清除本地令牌）")

    @classmethod
    def ok(cls, user: Optional[User] = None) -> "AuthResult":
        return cls(success=True, user=user)

    @classmethod
    def fail(cls, message: str) -> "AuthResult":
        return cls(success=False, message=message)
