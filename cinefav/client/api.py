# cinefav/client/api.py

import logging
from typing import Any, List, Optional
import httpx
from cinefav.client.config import ClientSettings
from cinefav.client.errors import ApiError, SessionExpiredError
from cinefav.client.session import SessionStore
from cinefav.schemas.user_movie import Favorite

logger = logging.getLogger(__name__)


class ApiClient:
    """즐겨찾기/인증 서버 API 클라이언트"""

    def __init__(
        self,
        settings: ClientSettings,
        session: SessionStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.session = session
        self.timeout = httpx.Timeout(settings.timeout)
        self.transport = transport

    async def _request(self, method: str, path: str, auth: bool = True, **kwargs) -> Any:
        headers = {"Accept": "application/json"}
        if auth:
            if not self.session.token:
                raise SessionExpiredError("You are not logged in")
            headers["Authorization"] = f"Bearer {self.session.token}"

        async with httpx.AsyncClient(
            base_url=self.settings.api_url, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.request(method, path, headers=headers, **kwargs)
            except httpx.RequestError as e:
                logger.warning(f"{method} {path} 요청 실패: {str(e)}")
                raise ApiError(0, "Network error")

        if response.is_error:
            message = self._error_message(response)
            logger.info(f"{method} {path} -> {response.status_code}: {message}")
            if auth and response.status_code == 401:
                raise SessionExpiredError(message)
            raise ApiError(response.status_code, message)

        try:
            body = response.json()
        except ValueError:
            logger.warning(f"{method} {path} 응답 파싱 실패")
            raise ApiError(response.status_code, "Invalid response from server")
        if not isinstance(body, dict):
            raise ApiError(response.status_code, "Invalid response from server")
        return body.get("data")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return body["message"]
        return f"Request failed with status {response.status_code}"

    async def register(self, name: str, email: str, password: str) -> dict:
        return await self._request(
            "POST", "/auth/register", auth=False,
            json={"name": name, "email": email, "password": password},
        )

    async def login(self, email: str, password: str) -> dict:
        return await self._request(
            "POST", "/auth/login", auth=False, json={"email": email, "password": password}
        )

    async def update_photo(self, content: bytes, filename: str, content_type: str) -> dict:
        data = await self._request(
            "POST", "/auth/update-photo", files={"photo": (filename, content, content_type)}
        )
        return data["user"]

    async def list_favorites(self) -> List[Favorite]:
        data = await self._request("GET", "/movies/favorites")
        return [Favorite.model_validate(item) for item in data["favorites"]]

    async def add_favorite(
        self, movie_id: int, title: str, poster_path: Optional[str], overview: Optional[str]
    ) -> Favorite:
        data = await self._request(
            "POST", "/movies/favorites",
            json={"movieId": movie_id, "title": title, "posterPath": poster_path, "overview": overview},
        )
        return Favorite.model_validate(data["favorite"])

    async def remove_favorite(self, movie_id: int) -> None:
        await self._request("DELETE", f"/movies/favorites/{movie_id}")

    async def check_favorite(self, movie_id: int) -> bool:
        data = await self._request("GET", f"/movies/favorites/{movie_id}")
        return bool(data["isFavorite"])

    async def get_movie_details(self, movie_id: int, language: str = "en-US") -> dict:
        return await self._request("GET", f"/movies/{movie_id}", params={"language": language})
