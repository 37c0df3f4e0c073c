# cinefav/client/screens/favorites.py

import asyncio
import logging
from typing import List
from cinefav.client.alerts import AlertCenter
from cinefav.client.api import ApiClient
from cinefav.client.catalog import CatalogGateway
from cinefav.client.errors import CatalogError, ClientError, SessionExpiredError
from cinefav.client.favorites import FavoritesCache, LocalFavorite
from cinefav.client.language import LanguageStore
from cinefav.client.navigation import Navigator, Route
from cinefav.client.session import SessionStore
from cinefav.schemas.user_movie import Favorite

logger = logging.getLogger(__name__)


class FavoriteMoviesScreen:
    """서버 즐겨찾기 목록, 현재 언어로 제목/줄거리를 다시 불러온다"""

    def __init__(
        self,
        api: ApiClient,
        catalog: CatalogGateway,
        session: SessionStore,
        language: LanguageStore,
        alerts: AlertCenter,
        navigator: Navigator,
    ):
        self.api = api
        self.catalog = catalog
        self.session = session
        self.language = language
        self.alerts = alerts
        self.navigator = navigator

        self.favorites: List[Favorite] = []
        self.loading = False

    async def refresh(self) -> None:
        if not self.session.is_authenticated:
            self.navigator.navigate(Route.LOGIN)
            return

        self.loading = True
        try:
            favorites = await self.api.list_favorites()
            self.favorites = list(await asyncio.gather(*(self._localize(fav) for fav in favorites)))
        except ClientError as e:
            self._handle_error(e)
        finally:
            self.loading = False

    async def _localize(self, favorite: Favorite) -> Favorite:
        try:
            movie = await self.catalog.get_movie(favorite.movie_id, self.language.catalog_language)
        except CatalogError as e:
            # 카탈로그 조회 실패 시 저장된 값을 그대로 사용
            logger.info(f"즐겨찾기 영화 {favorite.movie_id} 상세 조회 실패: {e.message}")
            return favorite
        return favorite.model_copy(
            update={"title": movie.title, "overview": movie.overview, "poster_path": movie.poster_path}
        )

    async def remove(self, movie_id: int) -> bool:
        if not self.session.is_authenticated:
            self.navigator.navigate(Route.LOGIN)
            return False
        try:
            await self.api.remove_favorite(movie_id)
        except ClientError as e:
            self._handle_error(e)
            return False

        self.favorites = [fav for fav in self.favorites if fav.movie_id != movie_id]
        return True

    def open_details(self, movie_id: int) -> None:
        self.navigator.navigate(Route.MOVIE_DETAILS, movie_id=movie_id)

    def _handle_error(self, error: ClientError) -> None:
        t = self.language.translate
        if isinstance(error, SessionExpiredError):
            self.session.logout()
            self.alerts.show(t("auth.sessionExpired"), t("auth.pleaseLoginAgain"))
            return
        logger.warning(f"즐겨찾기 요청 실패: {error.message}")
        self.alerts.show(t("errors.unexpectedError"), t("errors.tryAgain"))


class LocalFavoritesScreen:
    """기기에 저장된 즐겨찾기 목록"""

    def __init__(self, cache: FavoritesCache):
        self.cache = cache

    @property
    def favorites(self) -> List[LocalFavorite]:
        return self.cache.favorites

    @property
    def is_empty(self) -> bool:
        return not self.cache.favorites

    def remove(self, movie_id: int) -> bool:
        return self.cache.remove(movie_id)
