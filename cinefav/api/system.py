# cinefav/api/system.py

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    """서비스 헬스체크"""
    return {"status": "ok"}
