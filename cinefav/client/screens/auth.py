# cinefav/client/screens/auth.py

import logging
from typing import Optional
from cinefav.client.alerts import AlertCenter
from cinefav.client.api import ApiClient
from cinefav.client.errors import ApiError, ClientError
from cinefav.client.language import LanguageStore
from cinefav.client.navigation import Navigator, Route
from cinefav.client.session import SessionStore

logger = logging.getLogger(__name__)


class LoginScreen:

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

    async def submit(self, email: str, password: str) -> bool:
        t = self.language.translate
        try:
            data = await self.api.login(email, password)
        except ApiError as e:
            self.alerts.show(t("auth.loginFailed"), e.message or t("auth.invalidCredentials"))
            return False
        except ClientError:
            self.alerts.show(t("errors.unexpectedError"), t("errors.tryAgain"))
            return False

        self.session.login(data["token"], data["user"])
        self.navigator.reset()
        return self.session.is_authenticated

    def go_to_register(self) -> None:
        self.navigator.navigate(Route.REGISTER)


class RegisterScreen:

    def __init__(
        self,
        api: ApiClient,
        language: LanguageStore,
        alerts: AlertCenter,
        navigator: Navigator,
    ):
        self.api = api
        self.language = language
        self.alerts = alerts
        self.navigator = navigator

    async def submit(
        self, name: str, email: str, password: str, confirm_password: Optional[str] = None
    ) -> bool:
        t = self.language.translate
        if not name.strip() or not email.strip() or not password:
            self.alerts.show(t("errors.unexpectedError"), t("errors.requiredField"))
            return False
        if confirm_password is not None and confirm_password != password:
            self.alerts.show(t("errors.unexpectedError"), t("errors.passwordMismatch"))
            return False

        try:
            await self.api.register(name, email, password)
        except ClientError as e:
            logger.info(f"회원가입 실패: {e.message}")
            message = e.message if isinstance(e, ApiError) and e.status_code else t("errors.tryAgain")
            self.alerts.show(t("errors.unexpectedError"), message)
            return False

        # 가입 후 바로 로그인하지 않고 로그인 화면으로 보낸다
        self.alerts.show(t("auth.registerSuccess"), t("auth.pleaseLogin"), kind="success")
        self.navigator.navigate(Route.LOGIN)
        return True
