"""
Concrete implementation of NotificationPort that logs every notice and keeps
the most recent ones in memory for GET /notifications.
"""

import logging
from collections import deque

from jobboard.domain.enums import NotificationVariant
from jobboard.domain.models import Notification
from jobboard.ports.notification_port import NotificationPort

logger = logging.getLogger(__name__)


class LoggingNotificationAdapter(NotificationPort):
    """Bounded history of notifications, newest last."""

    def __init__(self, history: int = 50) -> None:
        self._recent: deque[Notification] = deque(maxlen=history)

    async def notify(self, notification: Notification) -> None:
        level = (
            logging.WARNING
            if notification.variant == NotificationVariant.DESTRUCTIVE
            else logging.INFO
        )
        logger.log(level, "🔔 %s — %s", notification.title, notification.description)
        self._recent.append(notification)

    def recent(self) -> list[Notification]:
        return list(self._recent)
