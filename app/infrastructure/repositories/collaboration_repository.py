"""Persistence helpers for patient collaborations."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import COLLAB_STATUS_ACCEPTED, Collaboration
from app.infrastructure.models import CollaborationModel, UserModel


class CollaborationRepository:
    """Provide CRUD operations for :class:`Collaboration` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, collaboration_id: int) -> Collaboration | None:
        model = self.session.get(CollaborationModel, collaboration_id)
        return self._to_entity(model) if model else None

    def get_for_member(
        self, *, patient_id: int, professional_id: int
    ) -> Collaboration | None:
        model = (
            self.session.query(CollaborationModel)
            .filter(CollaborationModel.patient_id == patient_id)
            .filter(CollaborationModel.professional_id == professional_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, collaboration: Collaboration) -> Collaboration:
        model = CollaborationModel(
            patient_id=collaboration.patient_id,
            professional_id=collaboration.professional_id,
            status=collaboration.status,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, collaboration_id: int, status: str) -> Collaboration:
        model = self.session.get(CollaborationModel, collaboration_id)
        if model is None:
            msg = f"Collaboration with id {collaboration_id} not found"
            raise ValueError(msg)
        model.status = status
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_accepted_professional_ids(self, patient_id: int) -> list[int]:
        """Return the active professionals that accepted to follow ``patient_id``."""

        query = (
            self.session.query(CollaborationModel.professional_id)
            .join(UserModel, UserModel.id == CollaborationModel.professional_id)
            .filter(CollaborationModel.patient_id == patient_id)
            .filter(CollaborationModel.status == COLLAB_STATUS_ACCEPTED)
            .filter(UserModel.deleted.is_(False))
            .order_by(CollaborationModel.professional_id)
        )
        return [professional_id for (professional_id,) in query.all()]

    @staticmethod
    def _to_entity(model: CollaborationModel) -> Collaboration:
        return Collaboration(
            id=model.id,
            patient_id=model.patient_id,
            professional_id=model.professional_id,
            status=model.status,
            invited_at=model.invited_at,
            updated_at=model.updated_at,
        )


__all__ = ["CollaborationRepository"]
