"""Use case for inviting a professional to a patient's care team."""

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import EventDispatcher, notify_collab_invite
from app.domain.entities import (
    COLLAB_STATUS_PENDING,
    COLLAB_STATUS_REJECTED,
    COLLAB_STATUS_REVOKED,
    Collaboration,
    User,
)
from app.infrastructure.repositories import (
    CollaborationRepository,
    PatientRepository,
    UserRepository,
)


def invite_collaborator(
    session: Session,
    dispatcher: EventDispatcher,
    *,
    inviter: User,
    patient_id: int,
    email: str,
) -> Collaboration:
    """Create (or renew) a pending invitation and notify the invited user."""

    patient = PatientRepository(session).get(patient_id)
    if patient is None:
        raise LookupError("Paciente no encontrado")
    if patient.creator_id != inviter.id:
        raise PermissionError("Solo el creador del paciente puede invitar colaboradores")

    invited = UserRepository(session).get_by_email(email.strip())
    if invited is None:
        raise LookupError("No existe un profesional con ese correo")
    if invited.id == inviter.id:
        raise ValueError("No puedes invitarte a ti mismo")

    repository = CollaborationRepository(session)
    existing = repository.get_for_member(patient_id=patient.id, professional_id=invited.id)
    if existing is None:
        collaboration = repository.create(
            Collaboration(id=None, patient_id=patient.id, professional_id=invited.id)
        )
    elif existing.status in (COLLAB_STATUS_REJECTED, COLLAB_STATUS_REVOKED):
        collaboration = repository.update_status(existing.id, COLLAB_STATUS_PENDING)
    else:
        raise ValueError("El profesional ya fue invitado a este paciente")

    notify_collab_invite(
        dispatcher,
        invited_user_id=invited.id,
        patient_id=patient.id,
        inviter_label=inviter.email,
    )
    return collaboration
