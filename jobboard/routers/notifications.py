"""
Notification endpoints — the recent success/failure notices emitted by the store.
"""

from fastapi import APIRouter, Depends

from jobboard.adapters.logging_notification_adapter import LoggingNotificationAdapter
from jobboard.dependencies import get_notifier
from jobboard.domain.models import Notification

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[Notification])
async def list_notifications(notifier: LoggingNotificationAdapter = Depends(get_notifier)):
    """Most recent notifications, oldest first."""
    return notifier.recent()
