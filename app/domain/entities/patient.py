"""Domain entity representing a patient record."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Patient:
    """Clinical record owned by the professional who created it."""

    id: int | None
    creator_id: int
    personal_info: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    deleted: bool = False


__all__ = ["Patient"]
