# cinefav/client/app.py

import logging
from typing import Optional
import httpx
from cinefav.client.alerts import AlertCenter
from cinefav.client.api import ApiClient
from cinefav.client.catalog import CatalogGateway
from cinefav.client.config import ClientSettings, get_client_settings
from cinefav.client.favorites import FavoritesCache
from cinefav.client.language import LanguageStore
from cinefav.client.navigation import Navigator, Stack
from cinefav.client.screens import (
    FavoriteMoviesScreen,
    LocalFavoritesScreen,
    LoginScreen,
    MovieDetailsScreen,
    PopularMoviesScreen,
    RegisterScreen,
    SettingsScreen,
)
from cinefav.client.session import SessionStore
from cinefav.client.storage import LocalStorage

logger = logging.getLogger(__name__)


class MobileApp:
    """클라이언트 구성 요소 조립

    각 저장소(Session, Favorites, Language)는 자기 key 만 다루고
    화면들은 저장소의 공개 메서드로만 상태를 바꾼다.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        api_transport: Optional[httpx.AsyncBaseTransport] = None,
        catalog_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_client_settings()
        self.storage = LocalStorage(self.settings.storage_path)

        self.session = SessionStore(self.storage)
        self.favorites = FavoritesCache(self.storage)
        self.language = LanguageStore(self.storage)

        self.alerts = AlertCenter()
        self.catalog = CatalogGateway(self.settings, transport=catalog_transport)
        self.api = ApiClient(self.settings, self.session, transport=api_transport)
        self.navigator: Optional[Navigator] = None

        self.login_screen: Optional[LoginScreen] = None
        self.register_screen: Optional[RegisterScreen] = None
        self.popular_screen: Optional[PopularMoviesScreen] = None
        self.details_screen: Optional[MovieDetailsScreen] = None
        self.favorites_screen: Optional[FavoriteMoviesScreen] = None
        self.local_favorites_screen: Optional[LocalFavoritesScreen] = None
        self.settings_screen: Optional[SettingsScreen] = None

    def start(self) -> None:
        """저장소 로드 후 화면 구성"""
        self.session.load()
        self.favorites.load()
        self.language.load()
        self.navigator = Navigator(self.session)

        common = dict(language=self.language, alerts=self.alerts, navigator=self.navigator)
        self.login_screen = LoginScreen(self.api, self.session, **common)
        self.register_screen = RegisterScreen(self.api, **common)
        self.popular_screen = PopularMoviesScreen(self.catalog, settings=self.settings, **common)
        self.details_screen = MovieDetailsScreen(self.catalog, self.api, self.session, **common)
        self.favorites_screen = FavoriteMoviesScreen(self.api, self.catalog, self.session, **common)
        self.local_favorites_screen = LocalFavoritesScreen(self.favorites)
        self.settings_screen = SettingsScreen(self.api, self.session, **common)

        logger.info(
            f"앱 시작: stack={self.navigator.current_stack().value}, language={self.language.language}"
        )

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    @property
    def stack(self) -> Stack:
        return self.navigator.current_stack()

    async def change_language(self, language: str) -> bool:
        """언어 변경 후 인기 영화 목록을 새 언어로 다시 로드"""
        if not self.settings_screen.change_language(language):
            return False
        if self.popular_screen.page > 0:
            await self.popular_screen.refresh()
        return True
