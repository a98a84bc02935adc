"""Pydantic models for therapy session logs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SessionCreate(BaseModel):
    patient_id: int
    description: str = Field(..., min_length=1)
    intervention_plan: str | None = None
    achievements: str | None = None
    patient_performance: str | None = None
    vitals: dict[str, Any] = Field(default_factory=dict)
    has_incident: bool = False
    incident_details: str | None = None
    next_session_notes: str | None = None


class SessionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_id: int
    professional_id: int
    description: str
    intervention_plan: str | None = None
    achievements: str | None = None
    patient_performance: str | None = None
    vitals: dict[str, Any] = Field(default_factory=dict)
    has_incident: bool
    incident_details: str | None = None
    next_session_notes: str | None = None
    created_at: datetime | None = None


__all__ = ["SessionCreate", "SessionRead"]
