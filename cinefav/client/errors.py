# cinefav/client/errors.py

from typing import Optional


class ClientError(Exception):
    """클라이언트 호출 실패 기본 클래스"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ApiError(ClientError):
    """서버 API 오류 응답 (status_code 0 은 네트워크 실패)"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class SessionExpiredError(ApiError):
    """토큰이 없거나 서버가 401을 반환"""

    def __init__(self, message: str = "Session expired"):
        super().__init__(401, message)


class CatalogError(ClientError):
    """카탈로그 API 호출 실패"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
