"""Domain entity representing a recorded therapy session."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ClinicalSession:
    """Log entry written by a professional after attending a patient."""

    id: int | None
    patient_id: int
    professional_id: int
    description: str = ""
    intervention_plan: str | None = None
    achievements: str | None = None
    patient_performance: str | None = None
    vitals: dict[str, Any] = field(default_factory=dict)
    has_incident: bool = False
    incident_details: str | None = None
    next_session_notes: str | None = None
    created_at: datetime | None = None


__all__ = ["ClinicalSession"]
