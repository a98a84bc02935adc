"""Domain entity representing a professional collaborating on a patient."""

from dataclasses import dataclass
from datetime import datetime

COLLAB_STATUS_PENDING = "PENDING"
COLLAB_STATUS_ACCEPTED = "ACCEPTED"
COLLAB_STATUS_REJECTED = "REJECTED"
COLLAB_STATUS_REVOKED = "REVOKED"


@dataclass
class Collaboration:
    """Invitation linking a professional to another professional's patient."""

    id: int | None
    patient_id: int
    professional_id: int
    status: str = COLLAB_STATUS_PENDING
    invited_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Collaboration",
    "COLLAB_STATUS_PENDING",
    "COLLAB_STATUS_ACCEPTED",
    "COLLAB_STATUS_REJECTED",
    "COLLAB_STATUS_REVOKED",
]
