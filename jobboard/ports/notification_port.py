"""
Abstract interface for user-visible notifications.
"""

from abc import ABC, abstractmethod

from jobboard.domain.models import Notification


class NotificationPort(ABC):
    """Port for surfacing success/failure notices to the acting user."""

    @abstractmethod
    async def notify(self, notification: Notification) -> None:
        """
        Deliver a notification.

        Args:
            notification: title, description and variant
                (`destructive` for failures and rejections).
        """
        ...
