"""Use case for recording a therapy session in a patient's log."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import EventDispatcher, notify_incident
from app.domain.entities import COLLAB_STATUS_ACCEPTED, ClinicalSession, User
from app.infrastructure.repositories import (
    ClinicalSessionRepository,
    CollaborationRepository,
    PatientRepository,
)

logger = logging.getLogger(__name__)


def record_session(
    session: Session,
    dispatcher: EventDispatcher,
    *,
    author: User,
    patient_id: int,
    description: str,
    has_incident: bool = False,
    incident_details: str | None = None,
    intervention_plan: str | None = None,
    achievements: str | None = None,
    patient_performance: str | None = None,
    vitals: dict[str, Any] | None = None,
    next_session_notes: str | None = None,
) -> ClinicalSession:
    """Store the session and alert the care team when it reports an incident.

    Only the patient's creator and professionals with an accepted
    collaboration may write to the log.
    """

    details = (incident_details or "").strip()
    if has_incident and not details:
        raise ValueError(
            "El detalle del incidente es obligatorio cuando se reporta un incidente"
        )

    patient = PatientRepository(session).get(patient_id)
    if patient is None:
        raise LookupError("Paciente no encontrado")
    if patient.creator_id != author.id:
        membership = CollaborationRepository(session).get_for_member(
            patient_id=patient.id, professional_id=author.id
        )
        if membership is None or membership.status != COLLAB_STATUS_ACCEPTED:
            raise PermissionError("No tienes acceso a la bitácora de este paciente")

    recorded = ClinicalSessionRepository(session).create(
        ClinicalSession(
            id=None,
            patient_id=patient.id,
            professional_id=author.id,
            description=description,
            intervention_plan=intervention_plan,
            achievements=achievements,
            patient_performance=patient_performance,
            vitals=dict(vitals or {}),
            has_incident=has_incident,
            incident_details=details or None,
            next_session_notes=next_session_notes,
        )
    )

    if recorded.has_incident:
        notify_incident(dispatcher, patient_id=patient.id, incident_details=details)
        logger.warning(
            "Incident reported for patient %s by %s; care team notified",
            patient.id,
            author.email,
        )
    return recorded
