# cinefav/client/screens/settings.py

import logging
import mimetypes
from pathlib import Path
from typing import Any, Dict, Optional, Union
from cinefav.client.alerts import AlertCenter
from cinefav.client.api import ApiClient
from cinefav.client.errors import ClientError, SessionExpiredError
from cinefav.client.language import LanguageStore
from cinefav.client.navigation import Navigator
from cinefav.client.session import SessionStore

logger = logging.getLogger(__name__)


class SettingsScreen:

    def __init__(
        self,
        api: ApiClient,
        session: SessionStore,
        language: LanguageStore,
        alerts: AlertCenter,
        navigator: Navigator,
    ):
        self.api = api
        self.session = session
        self.language = language
        self.alerts = alerts
        self.navigator = navigator

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self.session.user

    def change_language(self, language: str) -> bool:
        try:
            self.language.set_language(language)
        except ValueError as e:
            logger.warning(f"언어 변경 실패: {str(e)}")
            self.alerts.show("Error", self.language.translate("errors.languageChangeFailed"))
            return False
        return True

    def logout(self) -> None:
        self.session.logout()
        self.navigator.reset()

    async def upload_photo(self, path: Union[str, Path]) -> bool:
        """프로필 사진 업로드 후 세션 사용자 정보의 photoUrl 갱신"""
        t = self.language.translate
        path = Path(path)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        try:
            content = path.read_bytes()
        except OSError as e:
            logger.warning(f"사진 파일 읽기 실패: {str(e)}")
            self.alerts.show(t("errors.uploadFailed"), t("errors.tryAgain"))
            return False

        try:
            user = await self.api.update_photo(content, path.name, content_type)
        except SessionExpiredError:
            self.session.logout()
            self.alerts.show(t("auth.sessionExpired"), t("auth.pleaseLoginAgain"))
            return False
        except ClientError as e:
            logger.warning(f"사진 업로드 실패: {e.message}")
            self.alerts.show(t("errors.uploadFailed"), t("errors.tryAgain"))
            return False

        if user.get("photoUrl"):
            self.session.update_user(photoUrl=user["photoUrl"])
        return True
