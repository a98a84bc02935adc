"""Persistence handle consumed by the notification engine."""

from __future__ import annotations

from typing import Protocol

from app.domain.entities import Notification, Patient, User


class NotificationStore(Protocol):
    """Lookups and writes the engine needs from the relational store.

    Implementations are shared by concurrent background workers and must be
    safe to call from several threads at once. Failures are reported as
    :class:`~app.application.use_cases.notifications.errors.StorageError`.
    """

    def insert_notification(self, notification: Notification) -> Notification:
        ...

    def list_user_ids_by_role(self, alias: str) -> list[int]:
        ...

    def get_user(self, user_id: int) -> User | None:
        ...

    def list_accepted_collaborator_ids(self, patient_id: int) -> list[int]:
        ...

    def get_patient(self, patient_id: int) -> Patient | None:
        ...


__all__ = ["NotificationStore"]
