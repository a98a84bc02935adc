"""Pydantic models for account registration and review."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """Professional asking for access to the platform."""

    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    profile_data: dict[str, Any] = Field(default_factory=dict)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    status: str
    profile_data: dict[str, Any] = Field(default_factory=dict)


class UserReviewRequest(BaseModel):
    """Administrator decision on a pending account."""

    action: Literal["APPROVE", "REJECT"]
    reject_reason: str | None = Field(
        default=None, description="Obligatorio cuando la acción es REJECT"
    )


class UserReviewResponse(BaseModel):
    id: int
    status: str
    reject_reason: str | None = None


__all__ = ["UserRead", "UserRegister", "UserReviewRequest", "UserReviewResponse"]
