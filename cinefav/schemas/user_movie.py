# cinefav/schemas/user_movie.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from pydantic.alias_generators import to_camel


class FavoriteCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    movie_id: int = Field(description="TMDB 영화 ID")
    title: str = Field(description="영화 제목")
    poster_path: Optional[str] = Field(default=None, description="포스터 경로")
    overview: Optional[str] = Field(default=None, description="줄거리")


class Favorite(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: int = Field(description="즐겨찾기 ID")
    user_id: int = Field(description="사용자 ID")
    movie_id: int = Field(description="TMDB 영화 ID")
    title: str = Field(description="영화 제목")
    poster_path: Optional[str] = Field(default=None, description="포스터 경로")
    overview: Optional[str] = Field(default=None, description="줄거리")
    created_at: Optional[datetime] = Field(default=None, description="추가일시")


class FavoriteListData(BaseModel):
    favorites: List[Favorite]


class FavoriteListResponse(BaseModel):
    status: str = Field(default="success")
    data: FavoriteListData


class FavoriteData(BaseModel):
    favorite: Favorite


class FavoriteResponse(BaseModel):
    status: str = Field(default="success")
    data: FavoriteData


class FavoriteCheckData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    is_favorite: bool


class FavoriteCheckResponse(BaseModel):
    status: str = Field(default="success")
    data: FavoriteCheckData
