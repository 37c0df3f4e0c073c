# cinefav/schemas/user.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """비밀번호를 제외한 사용자 정보"""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: int = Field(description="사용자 ID")
    name: str = Field(description="사용자 이름")
    email: str = Field(description="이메일")
    photo_url: Optional[str] = Field(default=None, description="프로필 사진 URL")


class UserCreate(BaseModel):
    name: str = Field(description="사용자 이름", min_length=1)
    email: str = Field(description="이메일", min_length=3)
    password: str = Field(description="비밀번호", min_length=1)


class UserLogin(BaseModel):
    email: str = Field(description="이메일")
    password: str = Field(description="비밀번호")


class TokenUser(BaseModel):
    """토큰에서 복원한 사용자 claims"""

    id: int = Field(description="사용자 ID")
    email: str = Field(description="이메일")


class AuthData(BaseModel):
    user: User = Field(description="사용자 정보")
    token: str = Field(description="세션 토큰")


class AuthResponse(BaseModel):
    status: str = Field(default="success")
    data: AuthData


class UserData(BaseModel):
    user: User


class UserResponse(BaseModel):
    status: str = Field(default="success")
    data: UserData
