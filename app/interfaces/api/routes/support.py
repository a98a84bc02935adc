"""Rutas de la mesa de ayuda."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.support import create_ticket, list_tickets, reply_ticket
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationDispatcher
from app.interfaces.api.dependencies import (
    get_current_user,
    get_notification_dispatcher,
    require_admin,
)
from app.interfaces.api.schemas import TicketCreate, TicketRead, TicketReply

router = APIRouter(prefix="/support", tags=["support"])


@router.post("/", response_model=TicketRead, status_code=status.HTTP_201_CREATED)
def open_ticket(
    payload: TicketCreate,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    current_user: User = Depends(get_current_user),
) -> TicketRead:
    """Crea un ticket de soporte y avisa a los administradores."""

    try:
        ticket = create_ticket(
            db,
            dispatcher,
            author=current_user,
            subject=payload.subject,
            message=payload.message,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return TicketRead.model_validate(ticket)


@router.get("/", response_model=list[TicketRead])
def read_tickets(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[TicketRead]:
    """Lista todos los tickets para administradores o los propios para el resto."""

    return [TicketRead.model_validate(ticket) for ticket in list_tickets(db, viewer=current_user)]


@router.put("/{ticket_id}/reply", response_model=TicketRead)
def answer_ticket(
    ticket_id: int,
    payload: TicketReply,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    _: User = Depends(require_admin),
) -> TicketRead:
    """Responde y cierra un ticket, notificando a su autor."""

    try:
        ticket = reply_ticket(db, dispatcher, ticket_id=ticket_id, response=payload.response)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return TicketRead.model_validate(ticket)
