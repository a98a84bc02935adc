"""Rutas para invitar profesionales al equipo de un paciente."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.collaborations import invite_collaborator, respond_invitation
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationDispatcher
from app.interfaces.api.dependencies import get_current_active_user, get_notification_dispatcher
from app.interfaces.api.schemas import (
    CollaborationInvite,
    CollaborationRead,
    CollaborationRespond,
)

router = APIRouter(prefix="/collaborations", tags=["collaborations"])


def _raise_http(exc: Exception) -> None:
    if isinstance(exc, LookupError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if isinstance(exc, PermissionError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/invite", response_model=CollaborationRead, status_code=status.HTTP_201_CREATED)
def invite(
    payload: CollaborationInvite,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    current_user: User = Depends(get_current_active_user),
) -> CollaborationRead:
    """Invita a un profesional, identificado por su correo, a colaborar en un paciente."""

    try:
        collaboration = invite_collaborator(
            db,
            dispatcher,
            inviter=current_user,
            patient_id=payload.patient_id,
            email=payload.email,
        )
    except (LookupError, PermissionError, ValueError) as exc:
        _raise_http(exc)
    return CollaborationRead.model_validate(collaboration)


@router.put("/{collaboration_id}/respond", response_model=CollaborationRead)
def respond(
    collaboration_id: int,
    payload: CollaborationRespond,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    current_user: User = Depends(get_current_active_user),
) -> CollaborationRead:
    """Acepta o rechaza una invitación pendiente."""

    try:
        collaboration = respond_invitation(
            db,
            dispatcher,
            responder=current_user,
            collaboration_id=collaboration_id,
            status=payload.status,
        )
    except (LookupError, PermissionError, ValueError) as exc:
        _raise_http(exc)
    return CollaborationRead.model_validate(collaboration)
