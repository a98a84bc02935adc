"""SQLAlchemy implementation of the notification persistence handle."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications.errors import StorageError
from app.domain.entities import Notification, Patient, User
from app.infrastructure.repositories import (
    CollaborationRepository,
    NotificationRepository,
    PatientRepository,
    UserRepository,
)


class SqlAlchemyNotificationStore:
    """Serve the engine's lookups and writes through the repositories.

    Every call opens and closes its own session from ``session_factory`` so
    that background workers never share a session between threads.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageError(f"Database error during {operation}: {exc}") from exc
        finally:
            session.close()

    def insert_notification(self, notification: Notification) -> Notification:
        with self._session("insert_notification") as session:
            return NotificationRepository(session).create(notification)

    def list_user_ids_by_role(self, alias: str) -> list[int]:
        with self._session("list_user_ids_by_role") as session:
            return UserRepository(session).list_ids_by_role_alias(alias)

    def get_user(self, user_id: int) -> User | None:
        with self._session("get_user") as session:
            return UserRepository(session).get(user_id)

    def list_accepted_collaborator_ids(self, patient_id: int) -> list[int]:
        with self._session("list_accepted_collaborator_ids") as session:
            return CollaborationRepository(session).list_accepted_professional_ids(
                patient_id
            )

    def get_patient(self, patient_id: int) -> Patient | None:
        with self._session("get_patient") as session:
            return PatientRepository(session).get(patient_id)


__all__ = ["SqlAlchemyNotificationStore"]
