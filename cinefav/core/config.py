# cinefav/core/config.py

from functools import lru_cache
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """서버 설정 클래스"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # 애플리케이션 설정
    app_name: str = Field(default="Favorite Movies API", description="애플리케이션 이름")
    debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")
    port: int = Field(default=3000, description="서버 포트")
    api_url: str = Field(default="http://localhost:3000", description="외부에 노출되는 서버 URL")
    allowed_origins: List[str] = Field(default=["*"], description="CORS 허용 origin")

    # 데이터베이스
    database_url: str = Field(default="sqlite:///./cinefav.db", description="DB 접속 URL")

    # JWT 인증 설정
    jwt_secret: str = Field(default="secret-jwt-key", description="JWT 토큰 서명 키")
    algorithm: str = Field(default="HS256", description="JWT 알고리즘")
    access_token_expire_minutes: int = Field(default=60 * 24 * 30, description="JWT 토큰 만료 시간(분)")
    bcrypt_rounds: int = Field(default=12, description="bcrypt cost factor")

    # 업로드 설정
    upload_dir: str = Field(default="uploads", description="프로필 사진 저장 경로")
    max_upload_size: int = Field(default=5 * 1024 * 1024, description="업로드 최대 크기(byte)")

    # TMDB API 설정
    tmdb_api_key: str = Field(default="", description="TMDB API Key")
    tmdb_access_token: Optional[str] = Field(default=None, description="TMDB Access Token")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDB API URL")
    tmdb_timeout: float = Field(default=10.0, description="요청 타임아웃")

    @property
    def tmdb_headers(self) -> dict[str, str]:
        """TMDB API 요청 헤더"""
        headers = {"Accept": "application/json"}
        if self.tmdb_access_token:
            headers["Authorization"] = f"Bearer {self.tmdb_access_token}"
        return headers


@lru_cache()
def get_settings() -> Settings:
    return Settings()
