"""Shared fixtures and in-memory collaborators for the test-suite."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass, replace
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
for _name in ("SMTP_HOST", "SMTP_EMAIL", "SMTP_PASSWORD", "APP_TIMEZONE"):
    os.environ.pop(_name, None)

from app.application.use_cases.notifications import DeliveryError, StorageError  # noqa: E402
from app.domain.entities import (  # noqa: E402
    ROLE_ADMIN,
    ROLE_PROFESSIONAL,
    USER_STATUS_ACTIVE,
    Notification,
    Patient,
    Role,
    User,
)
from app.infrastructure.notifications import NotificationDispatcher  # noqa: E402

_ROLES = {
    ROLE_ADMIN: Role(id=1, name="Administrador", alias=ROLE_ADMIN),
    ROLE_PROFESSIONAL: Role(id=2, name="Profesional", alias=ROLE_PROFESSIONAL),
}


class InMemoryNotificationStore:
    """Thread-safe stand-in for the relational persistence handle."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.patients: dict[int, Patient] = {}
        self.collaborators: dict[int, list[int]] = {}
        self.notifications: list[Notification] = []
        self.failing_inserts: set[int] = set()
        self.failing_lookups: set[str] = set()
        self._lock = threading.Lock()

    def add_user(
        self,
        user_id: int,
        email: str,
        *,
        role: str = ROLE_PROFESSIONAL,
        profile: dict | None = None,
    ) -> User:
        user = User(
            id=user_id,
            role=_ROLES[role],
            email=email,
            status=USER_STATUS_ACTIVE,
            profile_data=profile or {},
        )
        self.users[user_id] = user
        return user

    def add_patient(
        self,
        patient_id: int,
        *,
        creator_id: int,
        collaborators: tuple[int, ...] = (),
        personal_info: dict | None = None,
    ) -> Patient:
        patient = Patient(
            id=patient_id, creator_id=creator_id, personal_info=personal_info or {}
        )
        self.patients[patient_id] = patient
        self.collaborators[patient_id] = list(collaborators)
        return patient

    def _check(self, lookup: str) -> None:
        if lookup in self.failing_lookups:
            raise StorageError(f"{lookup} lookup unavailable")

    def insert_notification(self, notification: Notification) -> Notification:
        if notification.user_id in self.failing_inserts:
            raise StorageError(f"insert failed for user {notification.user_id}")
        with self._lock:
            saved = replace(notification, id=len(self.notifications) + 1)
            self.notifications.append(saved)
        return saved

    def list_user_ids_by_role(self, alias: str) -> list[int]:
        self._check("role")
        return sorted(uid for uid, user in self.users.items() if user.has_role(alias))

    def get_user(self, user_id: int) -> User | None:
        self._check("user")
        return self.users.get(user_id)

    def list_accepted_collaborator_ids(self, patient_id: int) -> list[int]:
        self._check("collaborators")
        return list(self.collaborators.get(patient_id, []))

    def get_patient(self, patient_id: int) -> Patient | None:
        self._check("patient")
        return self.patients.get(patient_id)

    def recipients(self) -> list[int]:
        return sorted(notification.user_id for notification in self.notifications)


@dataclass(frozen=True)
class SentEmail:
    to: str
    subject: str
    html_body: str
    text_body: str | None


class RecordingTransport:
    """Email transport that keeps sent messages in memory."""

    def __init__(self, *, failing: tuple[str, ...] = (), configured: bool = True) -> None:
        self.sent: list[SentEmail] = []
        self.failing = set(failing)
        self.configured = configured
        self._lock = threading.Lock()

    @property
    def is_configured(self) -> bool:
        return self.configured

    def send(self, to_address, subject, html_body, *, text_body=None) -> None:
        if to_address in self.failing:
            raise DeliveryError(to_address, "535 authentication rejected")
        with self._lock:
            self.sent.append(SentEmail(to_address, subject, html_body, text_body))

    def recipients(self) -> list[str]:
        return sorted(email.to for email in self.sent)


@pytest.fixture()
def store() -> InMemoryNotificationStore:
    return InMemoryNotificationStore()


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def dispatcher(store, transport):
    """Dispatcher wired to the in-memory store and transport."""

    instance = NotificationDispatcher(store=store, transport=transport, max_workers=4)
    yield instance
    instance.shutdown(wait=True, timeout=5)
