"""Background delivery of notification events."""

from .dispatcher import (
    DispatcherStats,
    NotificationDispatcher,
    build_notification_dispatcher,
)
from .store import SqlAlchemyNotificationStore

__all__ = [
    "DispatcherStats",
    "NotificationDispatcher",
    "build_notification_dispatcher",
    "SqlAlchemyNotificationStore",
]
