# cinefav/services/user_service.py

import logging
import uuid
from pathlib import Path
from typing import Optional
from fastapi import UploadFile
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from cinefav.core.auth import get_password_hash, verify_password
from cinefav.core.config import get_settings
from cinefav.core.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    UnsupportedMediaTypeError,
)
from cinefav.models.user import UserModel
from cinefav.schemas.user import User, UserCreate

logger = logging.getLogger(__name__)

# 이메일 존재 여부를 드러내지 않도록 두 경우 모두 같은 메시지
INVALID_CREDENTIALS = "Invalid email or password"


class UserService:

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()

    def _get_model_by_email(self, email: str) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    async def create_user(self, user_data: UserCreate) -> User:
        """회원가입"""
        # 이메일 중복 체크
        if self._get_model_by_email(user_data.email):
            raise ConflictError("User already exists with this email")

        user_model = UserModel(
            name=user_data.name,
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
        )

        self.db.add(user_model)
        try:
            self.db.commit()
        except IntegrityError:
            # 동시 가입으로 unique 제약에 걸린 경우
            self.db.rollback()
            raise ConflictError("User already exists with this email")
        self.db.refresh(user_model)

        logger.info(f"회원가입 완료: user_id={user_model.id}")
        return User.model_validate(user_model)

    async def authenticate_user(self, email: str, password: str) -> User:
        """이메일 로그인"""
        user_model = self._get_model_by_email(email)

        if not user_model or not verify_password(password, user_model.password_hash):
            logger.info("로그인 실패: 잘못된 자격 증명")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        return User.model_validate(user_model)

    async def update_photo(self, user_id: int, image_file: UploadFile) -> User:
        """프로필 사진 업데이트"""
        user_model = self.db.get(UserModel, user_id)
        if not user_model:
            raise NotFoundError("User not found")

        filename = await self._save_profile_image(image_file)
        user_model.photo_url = f"{self.settings.api_url.rstrip('/')}/uploads/{filename}"

        self.db.commit()
        self.db.refresh(user_model)

        logger.info(f"프로필 사진 변경: user_id={user_id}, file={filename}")
        return User.model_validate(user_model)

    async def _save_profile_image(self, image_file: UploadFile) -> str:
        """프로필 이미지 파일 저장 후 파일명 반환"""
        # 파일 유효성 검사
        if not image_file.content_type or not image_file.content_type.startswith("image/"):
            raise UnsupportedMediaTypeError("Not an image! Please upload only images.")

        # 파일 크기 제한 (5MB), 한도 + 1 byte 까지만 읽는다
        content = await image_file.read(self.settings.max_upload_size + 1)
        if not content:
            raise BadRequestError("No photo uploaded")
        if len(content) > self.settings.max_upload_size:
            raise BadRequestError("File too large. Maximum size is 5MB.")

        # 저장 디렉토리 생성
        upload_dir = Path(self.settings.upload_dir)
        upload_dir.mkdir(parents=True, exist_ok=True)

        # 고유한 파일명 생성
        file_extension = Path(image_file.filename or "").suffix or ".jpg"
        unique_filename = f"{uuid.uuid4().hex}{file_extension.lower()}"

        # 파일 저장
        with open(upload_dir / unique_filename, "wb") as buffer:
            buffer.write(content)

        return unique_filename
