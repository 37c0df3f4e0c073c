# cinefav/client/screens/details.py

import logging
from typing import Optional
from cinefav.client.alerts import AlertCenter
from cinefav.client.api import ApiClient
from cinefav.client.catalog import CatalogGateway
from cinefav.client.errors import CatalogError, ClientError, SessionExpiredError
from cinefav.client.language import LanguageStore
from cinefav.client.navigation import Navigator, Route
from cinefav.client.session import SessionStore
from cinefav.schemas.movie import Movie

logger = logging.getLogger(__name__)


class MovieDetailsScreen:
    """영화 상세 + 서버 즐겨찾기 토글"""

    def __init__(
        self,
        catalog: CatalogGateway,
        api: ApiClient,
        session: SessionStore,
        language: LanguageStore,
        alerts: AlertCenter,
        navigator: Navigator,
    ):
        self.catalog = catalog
        self.api = api
        self.session = session
        self.language = language
        self.alerts = alerts
        self.navigator = navigator

        self.movie_id: Optional[int] = None
        self.movie: Optional[Movie] = None
        self.is_favorite = False
        self.loading = False

    async def load(self, movie_id: int) -> None:
        self.movie_id = movie_id
        self.loading = True
        try:
            self.movie = await self.catalog.get_movie(movie_id, self.language.catalog_language)
        except CatalogError as e:
            logger.warning(f"영화 상세 조회 실패: movie_id={movie_id}, {e.message}")
            t = self.language.translate
            self.alerts.show(t("errors.loadDetailsFailed"), t("errors.tryAgain"))
            return
        finally:
            self.loading = False

        self.is_favorite = await self._check_favorite(movie_id)

    async def _check_favorite(self, movie_id: int) -> bool:
        if not self.session.is_authenticated:
            return False
        try:
            return await self.api.check_favorite(movie_id)
        except ClientError as e:
            logger.info(f"즐겨찾기 여부 확인 실패: {e.message}")
            return False

    def _session_expired(self, title_key: str, message_key: str) -> None:
        t = self.language.translate
        self.session.logout()
        self.alerts.show(t(title_key), t(message_key))
        self.navigator.navigate(Route.LOGIN)

    async def toggle_favorite(self) -> bool:
        """성공하면 True, 실패 시 is_favorite 는 그대로 유지"""
        t = self.language.translate
        if self.movie_id is None:
            return False
        if not self.session.is_authenticated:
            self._session_expired("auth.authRequired", "auth.loginToFavorite")
            return False

        try:
            if self.is_favorite:
                await self.api.remove_favorite(self.movie_id)
                self.is_favorite = False
                self.alerts.show(t("movies.success"), t("movies.removedFromFavorites"), kind="success")
            else:
                if self.movie is None:
                    self.alerts.show(t("errors.unexpectedError"), t("movies.dataUnavailable"))
                    return False
                await self.api.add_favorite(
                    self.movie_id, self.movie.title, self.movie.poster_path, self.movie.overview
                )
                self.is_favorite = True
                self.alerts.show(t("movies.success"), t("movies.addedToFavorites"), kind="success")
        except SessionExpiredError:
            self._session_expired("auth.sessionExpired", "auth.pleaseLoginAgain")
            return False
        except ClientError as e:
            logger.warning(f"즐겨찾기 변경 실패: movie_id={self.movie_id}, {e.message}")
            self.alerts.show(t("errors.unexpectedError"), t("errors.tryAgain"))
            return False

        return True
