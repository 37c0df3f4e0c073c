# cinefav/schemas/movie.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Genre(BaseModel):
    id: int = Field(description="장르 ID")
    name: str = Field(description="장르 이름")


class Movie(BaseModel):
    """카탈로그 API 영화 projection"""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="TMDB 영화 ID")
    title: str = Field(default="", description="영화 제목")
    overview: Optional[str] = Field(default=None, description="줄거리")
    poster_path: Optional[str] = Field(default=None, description="포스터 경로")
    vote_average: float = Field(default=0.0, description="평균 평점")
    release_date: Optional[str] = Field(default=None, description="개봉일 (YYYY-MM-DD)")
    genres: List[Genre] = Field(default_factory=list, description="장르 목록")
    runtime: Optional[int] = Field(default=None, description="상영시간(분)")
    backdrop_path: Optional[str] = Field(default=None, description="배경 이미지 경로")
    tagline: Optional[str] = Field(default=None, description="태그라인")
