"""Endpoints exposing the in-app notifications of the current user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.repositories import NotificationRepository
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.schemas import (
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = Query(False, description="Devuelve solo las notificaciones sin leer"),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Devuelve las notificaciones más recientes del usuario autenticado."""

    notifications = NotificationRepository(db).list_for_user(
        current_user.id, unread_only=unread_only, limit=limit
    )
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("/read", response_model=NotificationMarkReadResponse)
def mark_notifications_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationMarkReadResponse:
    """Marca como leídas las notificaciones indicadas del usuario autenticado."""

    updated = NotificationRepository(db).mark_as_read(
        payload.unique_ids(), user_id=current_user.id
    )
    return NotificationMarkReadResponse(updated=updated)
