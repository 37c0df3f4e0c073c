# cinefav/models/__init__.py

from .user import UserModel
from .user_movie import UserMovieModel


__all__ = [
    "UserModel",
    "UserMovieModel",
]
