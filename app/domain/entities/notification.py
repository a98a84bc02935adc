"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """In-app message stored for a specific user."""

    id: int | None
    user_id: int
    type: str
    message: str
    related_id: int | None = None
    is_read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification"]
