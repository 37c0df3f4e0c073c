# cinefav/core/dependencies.py

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from cinefav.core.auth import verify_token
from cinefav.core.exceptions import UnauthorizedError
from cinefav.schemas.user import TokenUser

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenUser:
    """Bearer 토큰에서 현재 사용자 추출"""
    if not credentials or not credentials.credentials:
        raise UnauthorizedError("You are not logged in. Please log in to get access.")

    claims = verify_token(credentials.credentials)
    if not claims:
        raise UnauthorizedError("Invalid token. Please log in again.")

    return TokenUser(**claims)
