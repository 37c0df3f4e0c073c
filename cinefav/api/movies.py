# cinefav/api/movies.py

from typing import Any, Dict
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from cinefav.core.dependencies import get_current_user
from cinefav.database import get_db
from cinefav.schemas.user import TokenUser
from cinefav.schemas.user_movie import (
    FavoriteCheckResponse,
    FavoriteCreate,
    FavoriteListResponse,
    FavoriteResponse,
)
from cinefav.services.favorite_service import FavoriteService
from cinefav.services.tmdb_service import TMDBService

router = APIRouter()


def get_favorite_service(db: Session = Depends(get_db)) -> FavoriteService:
    return FavoriteService(db)


def get_tmdb_service() -> TMDBService:
    return TMDBService()


# /favorites 경로는 /{movie_id} 보다 먼저 등록해야 한다
@router.get(
    "/favorites",
    response_model=FavoriteListResponse,
    summary="즐겨찾기 목록",
    description="현재 사용자의 즐겨찾기 영화를 최근 추가 순으로 조회합니다.",
)
async def list_favorites(
    current_user: TokenUser = Depends(get_current_user),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    favorites = await favorite_service.list_favorites(current_user.id)
    return {"status": "success", "data": {"favorites": favorites}}


@router.post(
    "/favorites",
    response_model=FavoriteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="즐겨찾기 추가",
    description="영화를 즐겨찾기에 추가합니다. 이미 추가된 영화인 경우 400을 반환합니다.",
)
async def add_favorite(
    favorite_data: FavoriteCreate,
    current_user: TokenUser = Depends(get_current_user),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    favorite = await favorite_service.add_favorite(current_user.id, favorite_data)
    return {"status": "success", "data": {"favorite": favorite}}


@router.delete(
    "/favorites/{movie_id}",
    summary="즐겨찾기 삭제",
    description="즐겨찾기에서 영화를 제거합니다. 없는 영화인 경우 404를 반환합니다.",
)
async def remove_favorite(
    movie_id: int = Path(description="TMDB 영화 ID"),
    current_user: TokenUser = Depends(get_current_user),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    await favorite_service.remove_favorite(current_user.id, movie_id)
    return {"status": "success", "data": None}


@router.get(
    "/favorites/{movie_id}",
    response_model=FavoriteCheckResponse,
    summary="즐겨찾기 여부",
)
async def check_favorite(
    movie_id: int = Path(description="TMDB 영화 ID"),
    current_user: TokenUser = Depends(get_current_user),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    is_favorite = await favorite_service.is_favorite(current_user.id, movie_id)
    return {"status": "success", "data": {"is_favorite": is_favorite}}


@router.get(
    "/{movie_id}",
    response_model=Dict[str, Any],
    summary="영화 상세 정보",
    description="TMDB 영화 상세 정보를 그대로 중계합니다.",
)
async def get_movie_details(
    movie_id: int = Path(description="TMDB 영화 ID"),
    language: str = Query(default="en-US", description="언어 코드 (pt-BR, en-US)"),
    current_user: TokenUser = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    data = await tmdb_service.get_movie_details(movie_id, language=language)
    return {"status": "success", "data": data}
