# cinefav/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from cinefav.core.config import get_settings

settings = get_settings()

DATABASE_URL = settings.database_url


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {
            "pool_pre_ping": True,  # 연결 상태 확인
            "pool_recycle": 300,  # 5분마다 연결 재사용
        }
    options = {"connect_args": {"check_same_thread": False}}
    # 인메모리 DB는 모든 세션이 같은 연결을 공유해야 한다
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


# 엔진 생성
engine = create_engine(
    DATABASE_URL,
    echo=settings.debug,  # SQL 로그 출력
    **_engine_options(DATABASE_URL),
)

# 세션 팩토리 생성
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base 클래스 생성
Base = declarative_base()


def init_db():
    """모델을 등록하고 테이블 생성"""
    from cinefav import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


# 의존성 주입용 함수
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
