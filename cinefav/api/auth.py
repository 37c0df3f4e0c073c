# cinefav/api/auth.py

from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session
from cinefav.core.auth import create_user_token
from cinefav.core.dependencies import get_current_user
from cinefav.core.exceptions import BadRequestError
from cinefav.database import get_db
from cinefav.schemas.user import (
    AuthResponse,
    TokenUser,
    UserCreate,
    UserLogin,
    UserResponse,
)
from cinefav.services.user_service import UserService

router = APIRouter()


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


# 이메일 회원가입
@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
    description="이름, 이메일, 비밀번호로 가입하고 세션 토큰을 발급합니다.",
)
async def register(
    user_data: UserCreate, user_service: UserService = Depends(get_user_service)
):
    user = await user_service.create_user(user_data)
    token = create_user_token(user.id, user.email)
    return {"status": "success", "data": {"user": user, "token": token}}


# 이메일 로그인
@router.post(
    "/login",
    response_model=AuthResponse,
    summary="로그인",
    description="이메일과 비밀번호로 로그인합니다.",
)
async def login(
    login_data: UserLogin, user_service: UserService = Depends(get_user_service)
):
    user = await user_service.authenticate_user(
        email=login_data.email, password=login_data.password
    )
    token = create_user_token(user.id, user.email)
    return {"status": "success", "data": {"user": user, "token": token}}


# 프로필 사진 변경
@router.post(
    "/update-photo",
    response_model=UserResponse,
    summary="프로필 사진 변경",
    description="multipart 'photo' 필드의 이미지(5MB 이하)를 저장하고 사용자 사진 URL을 갱신합니다.",
)
async def update_photo(
    photo: Optional[UploadFile] = File(default=None),
    current_user: TokenUser = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    if photo is None or not photo.filename:
        raise BadRequestError("No photo uploaded")

    user = await user_service.update_photo(current_user.id, photo)
    return {"status": "success", "data": {"user": user}}
