# cinefav/client/catalog.py

import logging
from typing import Dict, List, Optional
import httpx
from cinefav.client.config import ClientSettings
from cinefav.client.errors import CatalogError
from cinefav.schemas.movie import Genre, Movie

logger = logging.getLogger(__name__)

UNKNOWN_GENRE = "Unknown"


class CatalogGateway:
    """TMDB 응답을 앱의 Movie 형태로 변환하는 경계 컴포넌트"""

    def __init__(self, settings: ClientSettings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.timeout = httpx.Timeout(settings.timeout)
        self.transport = transport

    def image_url(self, path: Optional[str], size: str = "w500") -> Optional[str]:
        if not path:
            return None
        return f"{self.settings.image_base_url}{size}{path}"

    async def _get(self, path: str, **params) -> dict:
        url = f"{self.settings.tmdb_base_url}{path}"
        params["api_key"] = self.settings.tmdb_api_key

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                logger.warning(f"TMDB 호출 실패: {path} status={e.response.status_code}")
                raise CatalogError(
                    f"TMDB API error: {e.response.status_code}", status_code=e.response.status_code
                )
            except httpx.RequestError as e:
                logger.warning(f"TMDB 요청 실패: {path} {str(e)}")
                raise CatalogError(f"Request failed: {str(e)}")
            except ValueError:
                logger.warning(f"TMDB 응답 파싱 실패: {path}")
                raise CatalogError("Invalid response from TMDB", status_code=response.status_code)

    async def get_genres(self, language: str) -> Dict[int, Genre]:
        """장르 ID → 장르"""
        data = await self._get("/genre/movie/list", language=language)
        return {genre["id"]: Genre(**genre) for genre in data.get("genres", [])}

    def attach_genres(self, movies: List[dict], genres: Dict[int, Genre]) -> List[Movie]:
        """genre_ids 를 장르 이름으로 치환, 모르는 ID 는 Unknown"""
        result = []
        for movie_data in movies:
            movie_genres = [
                genres.get(genre_id) or Genre(id=genre_id, name=UNKNOWN_GENRE)
                for genre_id in movie_data.get("genre_ids", [])
            ]
            result.append(Movie.model_validate({**movie_data, "genres": movie_genres}))
        return result

    async def get_popular(self, page: int = 1, language: str = "en-US") -> List[Movie]:
        genres = await self.get_genres(language)
        data = await self._get("/movie/popular", language=language, page=page)
        return self.attach_genres(data.get("results", []), genres)

    async def search(self, query: str, language: str = "en-US", limit: Optional[int] = None) -> List[Movie]:
        if not query.strip():
            return []
        genres = await self.get_genres(language)
        data = await self._get("/search/movie", language=language, query=query, page=1)
        movies = self.attach_genres(data.get("results", []), genres)
        return movies[:limit] if limit is not None else movies

    async def get_movie(self, movie_id: int, language: str = "en-US") -> Movie:
        data = await self._get(f"/movie/{movie_id}", language=language)
        return Movie.model_validate(data)
