# cinefav/services/tmdb_service.py

import logging
from typing import Optional
import httpx
from cinefav.core.config import get_settings
from cinefav.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class TMDBService:
    """서버 보관 API 키로 TMDB를 그대로 중계"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = get_settings()
        self.timeout = httpx.Timeout(self.settings.tmdb_timeout)
        self.default_language = "en-US"
        self.transport = transport

    def _params(self, **params) -> dict:
        if self.settings.tmdb_api_key:
            params["api_key"] = self.settings.tmdb_api_key
        return params

    async def get_movie_details(self, movie_id: int, language: Optional[str] = None) -> dict:
        if language is None:
            language = self.default_language

        url = f"{self.settings.tmdb_base_url}/movie/{movie_id}"

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    url,
                    params=self._params(language=language),
                    headers=self.settings.tmdb_headers
                )
                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                logger.warning(f"TMDB 영화 상세 조회 실패: movie_id={movie_id}, status={status_code}")
                # TMDB 인증 실패는 서버 설정 문제, 사용자 세션의 401/403 과 구분한다
                if status_code in (401, 403):
                    status_code = UpstreamError.status_code
                raise UpstreamError(self._upstream_message(e.response), status_code=status_code)
            except httpx.RequestError as e:
                logger.error(f"TMDB 요청 실패: {str(e)}")
                raise UpstreamError()

    @staticmethod
    def _upstream_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        message = data.get("status_message") if isinstance(data, dict) else None
        return message or f"Movie catalog error: {response.status_code}"
