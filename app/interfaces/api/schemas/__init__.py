"""Pydantic schemas exposed by the HTTP API."""

from .collaboration import CollaborationInvite, CollaborationRead, CollaborationRespond
from .notification import (
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)
from .session import SessionCreate, SessionRead
from .support import TicketCreate, TicketRead, TicketReply
from .user import UserRead, UserRegister, UserReviewRequest, UserReviewResponse

__all__ = [
    "CollaborationInvite",
    "CollaborationRead",
    "CollaborationRespond",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "SessionCreate",
    "SessionRead",
    "TicketCreate",
    "TicketRead",
    "TicketReply",
    "UserRead",
    "UserRegister",
    "UserReviewRequest",
    "UserReviewResponse",
]
