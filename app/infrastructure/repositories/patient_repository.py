"""Persistence helpers for patient records."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Patient
from app.infrastructure.models import PatientModel


class PatientRepository:
    """Read and create :class:`Patient` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, patient_id: int) -> Patient | None:
        model = (
            self.session.query(PatientModel)
            .filter(PatientModel.id == patient_id)
            .filter(PatientModel.deleted.is_(False))
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, patient: Patient) -> Patient:
        model = PatientModel(
            creator_id=patient.creator_id,
            personal_info=dict(patient.personal_info or {}),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PatientModel) -> Patient:
        return Patient(
            id=model.id,
            creator_id=model.creator_id,
            personal_info=dict(model.personal_info or {}),
            created_at=model.created_at,
            deleted=model.deleted,
        )


__all__ = ["PatientRepository"]
