"""Domain entities exposed by the application."""

from .clinical_session import ClinicalSession
from .collaboration import (
    COLLAB_STATUS_ACCEPTED,
    COLLAB_STATUS_PENDING,
    COLLAB_STATUS_REJECTED,
    COLLAB_STATUS_REVOKED,
    Collaboration,
)
from .notification import Notification
from .notification_event import (
    NotificationEvent,
    NotificationEventKind,
    RenderedMessage,
    subject_set,
)
from .patient import Patient
from .role import ROLE_ADMIN, ROLE_BUSINESS, ROLE_PROFESSIONAL, Role
from .support_ticket import TICKET_STATUS_CLOSED, TICKET_STATUS_OPEN, SupportTicket
from .user import (
    USER_STATUS_ACTIVE,
    USER_STATUS_INACTIVE,
    USER_STATUS_REJECTED,
    User,
)
from .user_profile import DEFAULT_PERSON_LABEL, UserProfile

__all__ = [
    "ClinicalSession",
    "Collaboration",
    "COLLAB_STATUS_PENDING",
    "COLLAB_STATUS_ACCEPTED",
    "COLLAB_STATUS_REJECTED",
    "COLLAB_STATUS_REVOKED",
    "Notification",
    "NotificationEvent",
    "NotificationEventKind",
    "RenderedMessage",
    "subject_set",
    "Patient",
    "Role",
    "ROLE_ADMIN",
    "ROLE_PROFESSIONAL",
    "ROLE_BUSINESS",
    "SupportTicket",
    "TICKET_STATUS_OPEN",
    "TICKET_STATUS_CLOSED",
    "User",
    "USER_STATUS_INACTIVE",
    "USER_STATUS_ACTIVE",
    "USER_STATUS_REJECTED",
    "UserProfile",
    "DEFAULT_PERSON_LABEL",
]
