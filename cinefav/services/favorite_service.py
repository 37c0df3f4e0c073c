# cinefav/services/favorite_service.py

import logging
from typing import List, Optional
from sqlalchemy import select, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from cinefav.core.exceptions import ConflictError, NotFoundError
from cinefav.models.user_movie import UserMovieModel
from cinefav.schemas.user_movie import Favorite, FavoriteCreate

logger = logging.getLogger(__name__)


class FavoriteService:
    """사용자별 즐겨찾기 영화 관리"""

    def __init__(self, db: Session):
        self.db = db

    def _find(self, user_id: int, movie_id: int) -> Optional[UserMovieModel]:
        stmt = select(UserMovieModel).where(
            and_(
                UserMovieModel.user_id == user_id,
                UserMovieModel.movie_id == movie_id
            )
        )
        return self.db.execute(stmt).scalar_one_or_none()

    async def list_favorites(self, user_id: int) -> List[Favorite]:
        """즐겨찾기 목록 (최근 추가 순)"""
        stmt = select(UserMovieModel).where(
            UserMovieModel.user_id == user_id
        ).order_by(
            UserMovieModel.created_at.desc(),
            UserMovieModel.id.desc()
        )
        result = self.db.execute(stmt).scalars()
        return [Favorite.model_validate(row) for row in result]

    async def add_favorite(self, user_id: int, data: FavoriteCreate) -> Favorite:
        """즐겨찾기 추가, (user, movie) 중복은 unique 제약으로 판별"""
        favorite = UserMovieModel(
            user_id=user_id,
            movie_id=data.movie_id,
            title=data.title,
            poster_path=data.poster_path,
            overview=data.overview,
        )

        self.db.add(favorite)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Movie already in favorites")
        self.db.refresh(favorite)

        logger.info(f"즐겨찾기 추가: user_id={user_id}, movie_id={data.movie_id}")
        return Favorite.model_validate(favorite)

    async def remove_favorite(self, user_id: int, movie_id: int) -> None:
        """즐겨찾기 삭제"""
        favorite = self._find(user_id, movie_id)
        if not favorite:
            raise NotFoundError("Movie not found in favorites")

        self.db.delete(favorite)
        self.db.commit()
        logger.info(f"즐겨찾기 삭제: user_id={user_id}, movie_id={movie_id}")

    async def is_favorite(self, user_id: int, movie_id: int) -> bool:
        return self._find(user_id, movie_id) is not None
