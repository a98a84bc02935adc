"""Public helpers for emitting domain notifications."""

from .errors import (
    DeliveryError,
    NotificationError,
    RenderError,
    ResolutionError,
    StorageError,
)
from .events import (
    EventDispatcher,
    notify_account_status,
    notify_collab_invite,
    notify_incident,
    notify_invite_response,
    notify_new_user,
    notify_ticket_created,
    notify_ticket_reply,
)
from .recipients import RecipientResolver
from .records import NotificationRecordWriter
from .store import NotificationStore
from .templates import TemplateRenderer

__all__ = [
    "DeliveryError",
    "NotificationError",
    "RenderError",
    "ResolutionError",
    "StorageError",
    "EventDispatcher",
    "notify_account_status",
    "notify_collab_invite",
    "notify_incident",
    "notify_invite_response",
    "notify_new_user",
    "notify_ticket_created",
    "notify_ticket_reply",
    "RecipientResolver",
    "NotificationRecordWriter",
    "NotificationStore",
    "TemplateRenderer",
]
