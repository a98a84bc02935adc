"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .role import ROLE_ADMIN, Role
from .user_profile import UserProfile

USER_STATUS_INACTIVE = "INACTIVE"
USER_STATUS_ACTIVE = "ACTIVE"
USER_STATUS_REJECTED = "REJECTED"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    email: str
    status: str = USER_STATUS_INACTIVE
    profile_data: dict[str, Any] = field(default_factory=dict)
    reject_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted: bool = False
    deleted_at: datetime | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    @property
    def is_active(self) -> bool:
        return self.status == USER_STATUS_ACTIVE and not self.deleted

    @property
    def profile(self) -> UserProfile:
        return UserProfile.from_document(self.profile_data)


__all__ = [
    "User",
    "USER_STATUS_INACTIVE",
    "USER_STATUS_ACTIVE",
    "USER_STATUS_REJECTED",
]
