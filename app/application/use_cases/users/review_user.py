"""Use case for approving or rejecting a professional's account."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import EventDispatcher, notify_account_status
from app.domain.entities import USER_STATUS_ACTIVE, USER_STATUS_REJECTED, User
from app.infrastructure.repositories import UserRepository

REVIEW_APPROVE = "APPROVE"
REVIEW_REJECT = "REJECT"


def review_user(
    session: Session,
    dispatcher: EventDispatcher,
    *,
    user_id: int,
    action: str,
    reject_reason: str | None = None,
) -> User:
    """Apply an administrator's decision and notify the reviewed user."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise LookupError("Usuario no encontrado")

    action = action.upper()
    if action == REVIEW_APPROVE:
        user = replace(user, status=USER_STATUS_ACTIVE, reject_reason=None)
    elif action == REVIEW_REJECT:
        reason = (reject_reason or "").strip()
        if not reason:
            raise ValueError("El motivo de rechazo es obligatorio")
        user = replace(user, status=USER_STATUS_REJECTED, reject_reason=reason)
    else:
        raise ValueError("Acción no permitida")

    updated = repository.update(user)
    notify_account_status(
        dispatcher,
        user_id=updated.id,
        status=updated.status,
        reject_reason=updated.reject_reason,
    )
    return updated
