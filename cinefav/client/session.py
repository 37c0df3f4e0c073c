# cinefav/client/session.py

import json
import logging
from typing import Any, Dict, Optional
from cinefav.client.storage import LocalStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "authToken"
USER_KEY = "userData"


class SessionStore:
    """인증 토큰과 사용자 스냅샷을 보관하는 세션 저장소"""

    def __init__(self, storage: LocalStorage):
        self._storage = storage
        self._token: Optional[str] = None
        self._user: Optional[Dict[str, Any]] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return dict(self._user) if self._user is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None and self._user is not None

    def load(self) -> None:
        """저장소에서 세션 복원"""
        token = self._storage.get_item(TOKEN_KEY)
        user_data = self._storage.get_item(USER_KEY)

        self._token, self._user = None, None
        if not token or not user_data:
            return
        try:
            user = json.loads(user_data)
        except ValueError as e:
            logger.error(f"세션 사용자 정보 파싱 실패: {str(e)}")
            return
        if isinstance(user, dict):
            self._token, self._user = token, user

    def login(self, token: str, user: Dict[str, Any]) -> None:
        try:
            self._storage.set_item(TOKEN_KEY, token)
            self._storage.set_item(USER_KEY, json.dumps(user))
        except OSError as e:
            logger.error(f"세션 저장 실패: {str(e)}")
            return
        self._token, self._user = token, dict(user)
        logger.info(f"로그인: user_id={user.get('id')}")

    def logout(self) -> None:
        try:
            self._storage.remove_item(TOKEN_KEY)
            self._storage.remove_item(USER_KEY)
        except OSError as e:
            logger.error(f"세션 삭제 실패: {str(e)}")
        self._token, self._user = None, None

    def update_user(self, **fields: Any) -> None:
        """사용자 스냅샷 일부 갱신, 로그아웃 상태면 무시"""
        if self._user is None:
            return
        updated = {**self._user, **fields}
        try:
            self._storage.set_item(USER_KEY, json.dumps(updated))
        except OSError as e:
            logger.error(f"사용자 정보 갱신 실패: {str(e)}")
            return
        self._user = updated
