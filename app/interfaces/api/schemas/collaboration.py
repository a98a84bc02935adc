"""Pydantic models for collaboration invitations."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CollaborationInvite(BaseModel):
    patient_id: int
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")


class CollaborationRespond(BaseModel):
    status: Literal["ACCEPTED", "REJECTED"]


class CollaborationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_id: int
    professional_id: int
    status: str
    invited_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["CollaborationInvite", "CollaborationRespond", "CollaborationRead"]
