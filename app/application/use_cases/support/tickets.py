"""Use cases for the support desk."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    EventDispatcher,
    notify_ticket_created,
    notify_ticket_reply,
)
from app.domain.entities import TICKET_STATUS_CLOSED, SupportTicket, User
from app.infrastructure.repositories import SupportTicketRepository


def create_ticket(
    session: Session,
    dispatcher: EventDispatcher,
    *,
    author: User,
    subject: str,
    message: str,
) -> SupportTicket:
    """Open a ticket for ``author`` and alert the administrators."""

    subject = subject.strip()
    if not subject:
        raise ValueError("El asunto es obligatorio")

    ticket = SupportTicketRepository(session).create(
        SupportTicket(id=None, user_id=author.id, subject=subject, message=message)
    )
    notify_ticket_created(dispatcher, user_email=author.email, ticket_subject=ticket.subject)
    return ticket


def list_tickets(session: Session, *, viewer: User) -> Sequence[SupportTicket]:
    """Administrators see every ticket; other users only their own."""

    repository = SupportTicketRepository(session)
    if viewer.is_admin():
        return repository.list()
    return repository.list(user_id=viewer.id)


def reply_ticket(
    session: Session,
    dispatcher: EventDispatcher,
    *,
    ticket_id: int,
    response: str,
) -> SupportTicket:
    """Store the administrator's answer, close the ticket and tell its author."""

    response = response.strip()
    if not response:
        raise ValueError("La respuesta es obligatoria")

    repository = SupportTicketRepository(session)
    ticket = repository.get(ticket_id)
    if ticket is None:
        raise LookupError("Ticket no encontrado")

    updated = repository.update(
        replace(ticket, admin_response=response, status=TICKET_STATUS_CLOSED)
    )
    notify_ticket_reply(
        dispatcher,
        user_id=updated.user_id,
        ticket_subject=updated.subject,
        reply_text=response,
    )
    return updated
