"""Use case for answering a collaboration invitation."""

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import EventDispatcher, notify_invite_response
from app.domain.entities import (
    COLLAB_STATUS_ACCEPTED,
    COLLAB_STATUS_PENDING,
    COLLAB_STATUS_REJECTED,
    Collaboration,
    User,
)
from app.infrastructure.repositories import CollaborationRepository, PatientRepository

ALLOWED_RESPONSES = (COLLAB_STATUS_ACCEPTED, COLLAB_STATUS_REJECTED)


def respond_invitation(
    session: Session,
    dispatcher: EventDispatcher,
    *,
    responder: User,
    collaboration_id: int,
    status: str,
) -> Collaboration:
    """Accept or reject a pending invitation and tell the patient's creator."""

    status = status.upper()
    if status not in ALLOWED_RESPONSES:
        raise ValueError("El estado debe ser ACCEPTED o REJECTED")

    repository = CollaborationRepository(session)
    collaboration = repository.get(collaboration_id)
    if collaboration is None:
        raise LookupError("Invitación no encontrada")
    if collaboration.professional_id != responder.id:
        raise PermissionError("No eres el destinatario de esta invitación")
    if collaboration.status != COLLAB_STATUS_PENDING:
        raise ValueError("Esta invitación ya fue procesada")

    updated = repository.update_status(collaboration.id, status)

    patient = PatientRepository(session).get(updated.patient_id)
    if patient is not None:
        notify_invite_response(
            dispatcher,
            creator_id=patient.creator_id,
            responder_label=responder.email,
            new_status=status,
        )
    return updated
