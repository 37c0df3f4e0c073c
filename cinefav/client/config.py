# cinefav/client/config.py

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """모바일 클라이언트 설정 (CINEFAV_ 접두사 환경 변수)"""

    model_config = SettingsConfigDict(
        env_prefix="CINEFAV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    api_url: str = Field(default="http://localhost:3000/api", description="서버 API URL")
    timeout: float = Field(default=10.0, description="요청 타임아웃")

    tmdb_api_key: str = Field(default="", description="TMDB API Key")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDB API URL")
    image_base_url: str = Field(default="https://image.tmdb.org/t/p/", description="TMDB 이미지 URL")

    storage_path: str = Field(default="~/.cinefav/storage.json", description="로컬 저장소 파일")

    search_debounce_seconds: float = Field(default=0.5, description="검색 입력 debounce")
    search_preview_limit: int = Field(default=5, description="검색 드롭다운 최대 개수")


@lru_cache()
def get_client_settings() -> ClientSettings:
    return ClientSettings()
