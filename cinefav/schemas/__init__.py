# cinefav/schemas/__init__.py

from .movie import Genre, Movie
from .user import (
    User,
    UserCreate,
    UserLogin,
    TokenUser,
    AuthResponse,
    UserResponse,
)
from .user_movie import (
    Favorite,
    FavoriteCreate,
    FavoriteResponse,
    FavoriteListResponse,
    FavoriteCheckResponse,
)

__all__ = [
    "Genre",
    "Movie",
    "User",
    "UserCreate",
    "UserLogin",
    "TokenUser",
    "AuthResponse",
    "UserResponse",
    "Favorite",
    "FavoriteCreate",
    "FavoriteResponse",
    "FavoriteListResponse",
    "FavoriteCheckResponse",
]
