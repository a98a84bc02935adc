"""Writer for the in-app notification rows."""

from __future__ import annotations

from app.domain.entities import Notification, NotificationEventKind
from app.utils import now_in_app_timezone

from .errors import StorageError
from .store import NotificationStore


class NotificationRecordWriter:
    """Persist one unread notification per recipient and event."""

    def __init__(self, store: NotificationStore) -> None:
        self._store = store

    def record(
        self,
        user_id: int,
        event_kind: NotificationEventKind,
        summary: str,
        related_id: int | None = None,
    ) -> Notification:
        """Insert the row for ``user_id``; raises :class:`StorageError` on failure."""

        notification = Notification(
            id=None,
            user_id=user_id,
            type=NotificationEventKind(event_kind).notification_type,
            message=summary,
            related_id=related_id,
            is_read=False,
            created_at=now_in_app_timezone(),
        )
        try:
            return self._store.insert_notification(notification)
        except StorageError:
            raise
        except Exception as exc:
            msg = f"Could not store {notification.type} notification for user {user_id}"
            raise StorageError(msg) from exc


__all__ = ["NotificationRecordWriter"]
