"""Domain entity representing a support request opened by a user."""

from dataclasses import dataclass
from datetime import datetime

TICKET_STATUS_OPEN = "OPEN"
TICKET_STATUS_CLOSED = "CLOSED"


@dataclass
class SupportTicket:
    """Question or problem reported to the platform administrators."""

    id: int | None
    user_id: int
    subject: str
    message: str
    status: str = TICKET_STATUS_OPEN
    admin_response: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["SupportTicket", "TICKET_STATUS_OPEN", "TICKET_STATUS_CLOSED"]
