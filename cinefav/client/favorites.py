# cinefav/client/favorites.py

import json
import logging
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from cinefav.client.storage import LocalStorage
from cinefav.schemas.movie import Movie

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


class LocalFavorite(BaseModel):
    """기기에만 저장되는 즐겨찾기 항목"""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: int = Field(description="항목 ID")
    movie_id: int = Field(description="TMDB 영화 ID")
    title: str = Field(default="")
    overview: Optional[str] = Field(default=None)
    poster_path: Optional[str] = Field(default=None)

    @classmethod
    def from_movie(cls, movie: Movie) -> "LocalFavorite":
        return cls(
            id=movie.id,
            movie_id=movie.id,
            title=movie.title,
            overview=movie.overview,
            poster_path=movie.poster_path,
        )


class FavoritesCache:
    """로컬 즐겨찾기 목록

    서버의 즐겨찾기 테이블과 동기화하지 않는 오프라인용 목록이다.
    """

    def __init__(self, storage: LocalStorage):
        self._storage = storage
        self._favorites: List[LocalFavorite] = []

    @property
    def favorites(self) -> List[LocalFavorite]:
        return list(self._favorites)

    def load(self) -> None:
        raw = self._storage.get_item(FAVORITES_KEY)
        if not raw:
            self._favorites = []
            return
        try:
            self._favorites = [LocalFavorite.model_validate(item) for item in json.loads(raw)]
        except ValueError as e:
            logger.error(f"로컬 즐겨찾기 로드 실패: {str(e)}")
            self._favorites = []

    def _save(self, favorites: List[LocalFavorite]) -> bool:
        payload = [fav.model_dump(by_alias=True) for fav in favorites]
        try:
            self._storage.set_item(FAVORITES_KEY, json.dumps(payload))
        except OSError as e:
            logger.error(f"로컬 즐겨찾기 저장 실패: {str(e)}")
            return False
        self._favorites = favorites
        return True

    def add(self, favorite: LocalFavorite) -> bool:
        if self.is_favorite(favorite.movie_id):
            return False
        return self._save(self._favorites + [favorite])

    def remove(self, movie_id: int) -> bool:
        remaining = [fav for fav in self._favorites if fav.movie_id != movie_id]
        if len(remaining) == len(self._favorites):
            return False
        return self._save(remaining)

    def is_favorite(self, movie_id: int) -> bool:
        return any(fav.movie_id == movie_id for fav in self._favorites)
