"""Persistence helpers for recorded therapy sessions."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import ClinicalSession
from app.infrastructure.models import ClinicalSessionModel


class ClinicalSessionRepository:
    """Store :class:`ClinicalSession` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, clinical_session: ClinicalSession) -> ClinicalSession:
        model = ClinicalSessionModel(
            patient_id=clinical_session.patient_id,
            professional_id=clinical_session.professional_id,
            description=clinical_session.description,
            intervention_plan=clinical_session.intervention_plan,
            achievements=clinical_session.achievements,
            patient_performance=clinical_session.patient_performance,
            vitals=dict(clinical_session.vitals or {}),
            has_incident=clinical_session.has_incident,
            incident_details=clinical_session.incident_details,
            next_session_notes=clinical_session.next_session_notes,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ClinicalSessionModel) -> ClinicalSession:
        return ClinicalSession(
            id=model.id,
            patient_id=model.patient_id,
            professional_id=model.professional_id,
            description=model.description,
            intervention_plan=model.intervention_plan,
            achievements=model.achievements,
            patient_performance=model.patient_performance,
            vitals=dict(model.vitals or {}),
            has_incident=model.has_incident,
            incident_details=model.incident_details,
            next_session_notes=model.next_session_notes,
            created_at=model.created_at,
        )


__all__ = ["ClinicalSessionRepository"]
