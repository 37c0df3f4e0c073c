# cinefav/core/logging.py

import logging
import time
from fastapi import FastAPI, Request

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

request_logger = logging.getLogger("cinefav.request")


def setup_logging(level: str = "INFO") -> None:
    """루트 로거 설정"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def add_request_logging(app: FastAPI) -> None:
    """요청마다 METHOD path status 소요시간을 기록"""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        request_logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
        )
        return response
