# cinefav/client/screens/__init__.py

from .auth import LoginScreen, RegisterScreen
from .details import MovieDetailsScreen
from .favorites import FavoriteMoviesScreen, LocalFavoritesScreen
from .popular import PopularMoviesScreen
from .settings import SettingsScreen

__all__ = [
    "LoginScreen",
    "RegisterScreen",
    "MovieDetailsScreen",
    "FavoriteMoviesScreen",
    "LocalFavoritesScreen",
    "PopularMoviesScreen",
    "SettingsScreen",
]
