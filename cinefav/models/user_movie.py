# cinefav/models/user_movie.py

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    UniqueConstraint,
    ForeignKey,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from cinefav.database import Base


class UserMovieModel(Base):
    """사용자 즐겨찾기 영화"""

    __tablename__ = "user_movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    movie_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    poster_path = Column(String(255), nullable=True)
    overview = Column(Text, nullable=True)
    created_at = Column(DateTime, default=func.current_timestamp())

    user = relationship("UserModel", back_populates="favorites")

    __table_args__ = (UniqueConstraint("user_id", "movie_id", name="unique_user_movie"),)

    def __repr__(self):
        return f"<UserMovieModel(user_id={self.user_id}, movie_id={self.movie_id})>"
