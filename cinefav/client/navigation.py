# cinefav/client/navigation.py

import logging
from enum import Enum
from typing import Any, Dict, List, Tuple
from cinefav.client.session import SessionStore

logger = logging.getLogger(__name__)


class Stack(str, Enum):
    AUTH = "auth"
    MAIN = "main"


class Route(str, Enum):
    LOGIN = "Login"
    REGISTER = "Register"
    POPULAR = "Popular"
    FAVORITES = "Favorites"
    SETTINGS = "Settings"
    MOVIE_DETAILS = "MovieDetails"


STACK_ROUTES = {
    Stack.AUTH: (Route.LOGIN, Route.REGISTER),
    Stack.MAIN: (Route.POPULAR, Route.FAVORITES, Route.SETTINGS, Route.MOVIE_DETAILS),
}

MAIN_TABS = (Route.POPULAR, Route.FAVORITES, Route.SETTINGS)


class Navigator:
    """인증 여부만으로 스택을 결정하는 화면 이동 상태"""

    def __init__(self, session: SessionStore):
        self.session = session
        self._stack = self.current_stack()
        self._history: List[Tuple[Route, Dict[str, Any]]] = [(self._root(self._stack), {})]

    def current_stack(self) -> Stack:
        return Stack.MAIN if self.session.is_authenticated else Stack.AUTH

    @staticmethod
    def _root(stack: Stack) -> Route:
        return STACK_ROUTES[stack][0]

    def _sync(self) -> None:
        stack = self.current_stack()
        if stack != self._stack:
            logger.info(f"스택 전환: {self._stack.value} -> {stack.value}")
            self._stack = stack
            self._history = [(self._root(stack), {})]

    @property
    def current(self) -> Tuple[Route, Dict[str, Any]]:
        self._sync()
        route, params = self._history[-1]
        return route, dict(params)

    @property
    def current_route(self) -> Route:
        return self.current[0]

    def navigate(self, route: Route, **params: Any) -> None:
        self._sync()
        if route not in STACK_ROUTES[self._stack]:
            raise ValueError(f"{route.value} is not available in the {self._stack.value} stack")
        if route in MAIN_TABS or route in STACK_ROUTES[Stack.AUTH]:
            # 탭/인증 화면은 히스토리에 중복으로 쌓지 않는다
            self._history = [entry for entry in self._history if entry[0] != route]
        self._history.append((route, params))

    def go_back(self) -> bool:
        self._sync()
        if len(self._history) <= 1:
            return False
        self._history.pop()
        return True

    def reset(self) -> None:
        self._stack = self.current_stack()
        self._history = [(self._root(self._stack), {})]
