"""Rutas administrativas para revisar cuentas de profesionales."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import review_user as review_user_uc
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationDispatcher
from app.interfaces.api.dependencies import get_notification_dispatcher, require_admin
from app.interfaces.api.schemas import UserReviewRequest, UserReviewResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.put("/users/{user_id}/review", response_model=UserReviewResponse)
def review_user(
    user_id: int,
    payload: UserReviewRequest,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    _: User = Depends(require_admin),
) -> UserReviewResponse:
    """Aprueba o rechaza la cuenta de un profesional y le notifica el resultado."""

    try:
        user = review_user_uc(
            db,
            dispatcher,
            user_id=user_id,
            action=payload.action,
            reject_reason=payload.reject_reason,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return UserReviewResponse(id=user.id, status=user.status, reject_reason=user.reject_reason)
