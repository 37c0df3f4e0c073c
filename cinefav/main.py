# cinefav/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from cinefav.api import api_router, system
from cinefav.core.config import get_settings
from cinefav.core.exceptions import register_exception_handlers
from cinefav.core.logging import add_request_logging, setup_logging
from cinefav.database import init_db

# 설정 로드
settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# 데이터베이스 테이블 생성
init_db()

# 업로드 디렉토리 준비
upload_dir = Path(settings.upload_dir)
upload_dir.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.app_name} 시작 (port={settings.port})")
    yield
    logger.info(f"{settings.app_name} 종료")


# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    description="Favorite Movies Service",
    version="1.0.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS 미들웨어
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)
add_request_logging(app)
register_exception_handlers(app)

# 업로드된 프로필 사진 정적 서빙
app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

# API 라우터 등록
app.include_router(api_router, prefix="/api")
app.include_router(system.router, tags=["시스템"])


def run():
    """uvicorn 서버 실행"""
    import uvicorn

    uvicorn.run("cinefav.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
