"""Persistence helpers for support tickets."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import SupportTicket
from app.infrastructure.models import SupportTicketModel


class SupportTicketRepository:
    """Provide CRUD operations for :class:`SupportTicket` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, ticket_id: int) -> SupportTicket | None:
        model = self.session.get(SupportTicketModel, ticket_id)
        return self._to_entity(model) if model else None

    def list(self, *, user_id: int | None = None) -> Sequence[SupportTicket]:
        query = self.session.query(SupportTicketModel)
        if user_id is not None:
            query = query.filter(SupportTicketModel.user_id == user_id)
        query = query.order_by(
            SupportTicketModel.created_at.desc(), SupportTicketModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, ticket: SupportTicket) -> SupportTicket:
        model = SupportTicketModel()
        self._apply_entity_to_model(model, ticket)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, ticket: SupportTicket) -> SupportTicket:
        model = self.session.get(SupportTicketModel, ticket.id)
        if model is None:
            msg = f"Support ticket with id {ticket.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, ticket)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: SupportTicketModel, ticket: SupportTicket) -> None:
        model.user_id = ticket.user_id
        model.subject = ticket.subject
        model.message = ticket.message
        model.status = ticket.status
        model.admin_response = ticket.admin_response

    @staticmethod
    def _to_entity(model: SupportTicketModel) -> SupportTicket:
        return SupportTicket(
            id=model.id,
            user_id=model.user_id,
            subject=model.subject,
            message=model.message,
            status=model.status,
            admin_response=model.admin_response,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["SupportTicketRepository"]
