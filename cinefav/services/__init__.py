# cinefav/services/__init__.py

from .tmdb_service import TMDBService
from .user_service import UserService
from .favorite_service import FavoriteService

__all__ = ["TMDBService", "UserService", "FavoriteService"]
