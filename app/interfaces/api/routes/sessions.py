"""Rutas para registrar sesiones en la bitácora de un paciente."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.sessions import record_session
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationDispatcher
from app.interfaces.api.dependencies import get_current_active_user, get_notification_dispatcher
from app.interfaces.api.schemas import SessionCreate, SessionRead

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("/", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def create_session(
    payload: SessionCreate,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    current_user: User = Depends(get_current_active_user),
) -> SessionRead:
    """Registra una sesión; si reporta un incidente se alerta al equipo del paciente."""

    try:
        recorded = record_session(
            db,
            dispatcher,
            author=current_user,
            patient_id=payload.patient_id,
            description=payload.description,
            has_incident=payload.has_incident,
            incident_details=payload.incident_details,
            intervention_plan=payload.intervention_plan,
            achievements=payload.achievements,
            patient_performance=payload.patient_performance,
            vitals=payload.vitals,
            next_session_notes=payload.next_session_notes,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SessionRead.model_validate(recorded)
