# cinefav/client/screens/popular.py

import asyncio
import logging
from typing import List
from cinefav.client.alerts import AlertCenter
from cinefav.client.catalog import CatalogGateway
from cinefav.client.config import ClientSettings
from cinefav.client.debounce import Debouncer
from cinefav.client.errors import CatalogError
from cinefav.client.language import LanguageStore
from cinefav.client.navigation import Navigator, Route
from cinefav.schemas.movie import Movie

logger = logging.getLogger(__name__)


class PopularMoviesScreen:
    """인기 영화 목록 + 검색 드롭다운"""

    def __init__(
        self,
        catalog: CatalogGateway,
        language: LanguageStore,
        alerts: AlertCenter,
        navigator: Navigator,
        settings: ClientSettings,
    ):
        self.catalog = catalog
        self.language = language
        self.alerts = alerts
        self.navigator = navigator
        self.preview_limit = settings.search_preview_limit
        self._debouncer = Debouncer(settings.search_debounce_seconds)

        self.movies: List[Movie] = []
        self.page = 0
        self.has_more = True
        self.loading = False
        self.loading_more = False

        self.search_query = ""
        self.search_results: List[Movie] = []
        self.show_dropdown = False
        self.searching = False

    async def refresh(self) -> None:
        """첫 페이지부터 다시 로드 (최초 진입, 언어 변경)"""
        self.loading = True
        self.has_more = True
        await self._fetch(1)

    async def load_more(self) -> None:
        if self.loading or self.loading_more or not self.has_more:
            return
        self.loading_more = True
        await self._fetch(self.page + 1)

    async def _fetch(self, page_number: int) -> None:
        language = self.language.catalog_language
        try:
            movies = await self.catalog.get_popular(page_number, language)
        except CatalogError as e:
            logger.warning(f"인기 영화 조회 실패: page={page_number}, {e.message}")
            t = self.language.translate
            self.alerts.show(t("errors.unexpectedError"), t("errors.tryAgain"))
        else:
            if page_number == 1:
                self.movies = movies
            else:
                self.movies = self.movies + movies
            self.page = page_number
            self.has_more = len(movies) > 0
        finally:
            self.loading = False
            self.loading_more = False

    def on_search_text(self, text: str) -> asyncio.Task:
        """검색어 입력, 이전 검색은 취소된다"""
        self.search_query = text
        self.searching = True
        return self._debouncer.call(self._search, text)

    async def _search(self, query: str) -> None:
        if not query.strip():
            self.search_results = []
            self.show_dropdown = False
            self.searching = False
            return

        try:
            results = await self.catalog.search(
                query, self.language.catalog_language, limit=self.preview_limit
            )
        except CatalogError as e:
            logger.warning(f"영화 검색 실패: {e.message}")
            self.searching = False
            return

        self.search_results = results
        self.show_dropdown = True
        self.searching = False

    def select_movie(self, movie_id: int) -> None:
        self._debouncer.cancel()
        self.search_query = ""
        self.show_dropdown = False
        self.searching = False
        self.navigator.navigate(Route.MOVIE_DETAILS, movie_id=movie_id)
