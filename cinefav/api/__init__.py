# cinefav/api/__init__.py

from fastapi import APIRouter
from . import auth, movies, system

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["인증"])
api_router.include_router(movies.router, prefix="/movies", tags=["영화"])

__all__ = ["api_router", "system"]
