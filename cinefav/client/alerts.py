# cinefav/client/alerts.py

import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Alert:
    title: str
    message: str
    kind: str = "error"


class AlertCenter:
    """화면에 띄울 알림(alert/toast) 모음"""

    def __init__(self):
        self.alerts: List[Alert] = []

    def show(self, title: str, message: str, kind: str = "error") -> Alert:
        alert = Alert(title=title, message=message, kind=kind)
        self.alerts.append(alert)
        logger.info(f"[{kind}] {title}: {message}")
        return alert

    @property
    def latest(self) -> Optional[Alert]:
        return self.alerts[-1] if self.alerts else None

    def clear(self) -> None:
        self.alerts.clear()
