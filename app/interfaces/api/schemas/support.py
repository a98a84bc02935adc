"""Pydantic models for support tickets."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TicketCreate(BaseModel):
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)


class TicketReply(BaseModel):
    response: str = Field(..., min_length=1)


class TicketRead(BaseModel):
    """Support ticket as shown to its author or to administrators."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    subject: str
    message: str
    status: str
    admin_response: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["TicketCreate", "TicketReply", "TicketRead"]
