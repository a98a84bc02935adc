"""Tests for the background notification dispatcher."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.application.use_cases.notifications import (
    notify_account_status,
    notify_collab_invite,
    notify_incident,
    notify_invite_response,
    notify_new_user,
    notify_ticket_created,
    notify_ticket_reply,
)
from app.application.use_cases.notifications.templates import (
    ACCENT_ALERT,
    ACCENT_SUCCESS,
    ACCENT_SUPPORT,
    INCIDENT_MARKER,
)
from app.domain.entities import ROLE_ADMIN
from app.infrastructure.notifications import NotificationDispatcher


@pytest.fixture()
def clinic(store):
    store.add_user(1, "admin@example.com", role=ROLE_ADMIN, profile={"full_name": "Admin"})
    store.add_user(2, "boss@example.com", role=ROLE_ADMIN)
    store.add_user(10, "creator@example.com", profile={"first_name": "Ana", "last_name": "Soto"})
    store.add_user(11, "colleague1@example.com")
    store.add_user(12, "colleague2@example.com")
    store.add_patient(
        100,
        creator_id=10,
        collaborators=(11, 12),
        personal_info={"full_name": "Juan Pérez"},
    )
    return store


def test_incident_reaches_the_whole_care_team(dispatcher, clinic, transport) -> None:
    notify_incident(dispatcher, patient_id=100, incident_details="Caída nocturna")

    assert dispatcher.wait_idle(5)
    assert clinic.recipients() == [10, 11, 12]
    assert {row.type for row in clinic.notifications} == {"INCIDENT_ALERT"}
    assert {row.related_id for row in clinic.notifications} == {100}
    assert all(row.is_read is False for row in clinic.notifications)
    assert all(
        row.message == "Incidente reportado para Juan Pérez" for row in clinic.notifications
    )

    assert transport.recipients() == [
        "colleague1@example.com",
        "colleague2@example.com",
        "creator@example.com",
    ]
    for email in transport.sent:
        assert email.subject.startswith(INCIDENT_MARKER)
        assert "Juan Pérez" in email.subject
        assert ACCENT_ALERT in email.html_body
        assert "Caída nocturna" in email.html_body


def test_incident_creator_who_also_collaborates_is_notified_once(
    dispatcher, store, transport
) -> None:
    store.add_user(10, "solo@example.com")
    store.add_patient(300, creator_id=10, collaborators=(10,))

    notify_incident(dispatcher, patient_id=300, incident_details="Fiebre")

    assert dispatcher.wait_idle(5)
    assert store.recipients() == [10]
    assert transport.recipients() == ["solo@example.com"]
    assert "Paciente ID 300" in transport.sent[0].subject


def test_approved_account_notifies_only_the_user(dispatcher, clinic, transport) -> None:
    notify_account_status(dispatcher, user_id=11, status="ACTIVE")

    assert dispatcher.wait_idle(5)
    assert clinic.recipients() == [11]
    assert clinic.notifications[0].type == "ACCOUNT_STATUS"
    assert clinic.notifications[0].message == "Tu cuenta ha sido aprobada."
    assert len(transport.sent) == 1
    sent = transport.sent[0]
    assert sent.to == "colleague1@example.com"
    assert ACCENT_SUCCESS in sent.html_body
    assert "Motivo" not in sent.html_body


def test_rejected_account_carries_the_reason(dispatcher, clinic, transport) -> None:
    notify_account_status(
        dispatcher, user_id=12, status="REJECTED", reject_reason="Licencia vencida"
    )

    assert dispatcher.wait_idle(5)
    assert transport.sent[0].to == "colleague2@example.com"
    assert "Licencia vencida" in transport.sent[0].html_body


def test_ticket_created_goes_to_administrators_only(dispatcher, clinic, transport) -> None:
    notify_ticket_created(
        dispatcher, user_email="colleague1@example.com", ticket_subject="No carga la bitácora"
    )

    assert dispatcher.wait_idle(5)
    assert clinic.recipients() == [1, 2]
    assert {row.type for row in clinic.notifications} == {"TICKET_CREATED"}
    assert transport.recipients() == ["admin@example.com", "boss@example.com"]
    assert all(ACCENT_SUPPORT in email.html_body for email in transport.sent)


def test_new_user_notifies_administrators(dispatcher, clinic, transport) -> None:
    event = notify_new_user(dispatcher, new_user_id=12, email="colleague2@example.com")

    assert dispatcher.wait_idle(5)
    assert event.related_id == 12
    assert clinic.recipients() == [1, 2]
    assert {row.related_id for row in clinic.notifications} == {12}
    assert {row.message for row in clinic.notifications} == {
        "Usuario colleague2@example.com registrado."
    }


def test_ticket_reply_and_invitation_flow(dispatcher, clinic, transport) -> None:
    notify_ticket_reply(
        dispatcher, user_id=10, ticket_subject="Acceso", reply_text="Restablecido"
    )
    notify_collab_invite(dispatcher, invited_user_id=11, patient_id=100, inviter_label="Ana Soto")
    notify_invite_response(
        dispatcher, creator_id=10, responder_label="Colega", new_status="ACCEPTED"
    )

    assert dispatcher.wait_idle(5)
    by_type = {row.type: row for row in clinic.notifications}
    assert by_type["TICKET_REPLY"].user_id == 10
    assert by_type["COLLAB_INVITE"].user_id == 11
    assert by_type["COLLAB_INVITE"].related_id == 100
    assert by_type["INVITE_RESPONSE"].user_id == 10
    assert by_type["INVITE_RESPONSE"].message == "Colega ha aceptado tu invitación."


def test_delivery_failure_does_not_affect_other_recipients(
    dispatcher, clinic, transport
) -> None:
    transport.failing.add("colleague1@example.com")

    notify_incident(dispatcher, patient_id=100, incident_details="Caída")

    assert dispatcher.wait_idle(5)
    assert transport.recipients() == ["colleague2@example.com", "creator@example.com"]
    assert clinic.recipients() == [10, 11, 12]
    assert dispatcher.stats().delivery_failures == 1


def test_storage_failure_still_sends_the_email(dispatcher, clinic, transport) -> None:
    clinic.failing_inserts.add(11)

    notify_incident(dispatcher, patient_id=100, incident_details="Caída")

    assert dispatcher.wait_idle(5)
    assert clinic.recipients() == [10, 12]
    assert "colleague1@example.com" in transport.recipients()
    assert len(transport.sent) == 3
    assert dispatcher.stats().storage_failures == 1


def test_unconfigured_transport_only_writes_rows(dispatcher, clinic, transport) -> None:
    transport.configured = False

    notify_ticket_created(dispatcher, user_email="x@example.com", ticket_subject="Hola")

    assert dispatcher.wait_idle(5)
    assert clinic.recipients() == [1, 2]
    assert transport.sent == []
    assert dispatcher.stats().delivery_failures == 0


def test_dispatch_returns_before_delivery(dispatcher, clinic, transport) -> None:
    release = threading.Event()
    started = threading.Event()
    record = transport.send

    def blocking_send(*args, **kwargs) -> None:
        started.set()
        release.wait(5)
        record(*args, **kwargs)

    transport.send = blocking_send
    try:
        notify_account_status(dispatcher, user_id=10, status="ACTIVE")

        assert transport.sent == []
        assert started.wait(5)
        assert dispatcher.stats().in_flight >= 1
        assert dispatcher.wait_idle(0.05) is False
    finally:
        release.set()

    assert dispatcher.wait_idle(5)
    assert transport.recipients() == ["creator@example.com"]


def test_event_without_recipients_is_dropped_quietly(dispatcher, clinic, transport) -> None:
    notify_incident(dispatcher, patient_id=404, incident_details="Nada")

    assert dispatcher.wait_idle(5)
    assert clinic.notifications == []
    assert transport.sent == []
    stats = dispatcher.stats()
    assert stats.submitted == 1
    assert stats.completed == 1
    assert stats.unexpected_failures == 0


def test_stats_count_every_pipeline(dispatcher, clinic) -> None:
    notify_incident(dispatcher, patient_id=100, incident_details="Caída")

    assert dispatcher.wait_idle(5)
    stats = dispatcher.stats()
    assert stats.submitted == 4
    assert stats.completed == 4
    assert stats.in_flight == 0
    assert stats.storage_failures == 0
    assert stats.delivery_failures == 0


def test_shutdown_drops_new_events(dispatcher, clinic, caplog) -> None:
    assert dispatcher.shutdown(wait=True, timeout=5) is True
    assert dispatcher.accepting is False

    with caplog.at_level("WARNING"):
        notify_ticket_created(dispatcher, user_email="x@example.com", ticket_subject="Hola")

    assert "dropping TICKET_CREATED event" in caplog.text
    assert dispatcher.stats().submitted == 0
    assert clinic.notifications == []


def test_shutdown_drains_queued_work(clinic, transport) -> None:
    dispatcher = NotificationDispatcher(store=clinic, transport=transport, max_workers=2)

    notify_incident(dispatcher, patient_id=100, incident_details="Caída")
    notify_ticket_created(dispatcher, user_email="x@example.com", ticket_subject="Hola")

    assert dispatcher.shutdown(wait=True, timeout=5) is True
    assert len(clinic.notifications) == 5
    assert len(transport.sent) == 5


def test_shutdown_timeout_settles_tasks_that_never_ran(clinic, transport, caplog) -> None:
    dispatcher = NotificationDispatcher(store=clinic, transport=transport, max_workers=1)
    release = threading.Event()
    started = threading.Event()
    record = transport.send

    def blocking_send(*args, **kwargs) -> None:
        started.set()
        release.wait(5)
        record(*args, **kwargs)

    transport.send = blocking_send
    notify_incident(dispatcher, patient_id=100, incident_details="Caída")
    assert started.wait(5)
    try:
        with caplog.at_level("WARNING"):
            assert dispatcher.shutdown(wait=True, timeout=0.3) is False
    finally:
        release.set()

    assert dispatcher.wait_idle(5)
    stats = dispatcher.stats()
    assert stats.in_flight == 0
    assert stats.submitted == 4
    assert stats.cancelled == 2
    assert stats.completed + stats.cancelled == stats.submitted
    assert stats.unexpected_failures == 0
    assert "Cancelled deliver of INCIDENT_REPORTED for user 11" in caplog.text
    assert "Cancelled deliver of INCIDENT_REPORTED for user 12" in caplog.text
    assert transport.recipients() == ["creator@example.com"]


class _InFlightRecordingExecutor(ThreadPoolExecutor):
    def __init__(self) -> None:
        super().__init__(max_workers=2)
        self.dispatcher: NotificationDispatcher | None = None
        self.in_flight_at_submit: list[int] = []

    def submit(self, fn, /, *args, **kwargs):
        self.in_flight_at_submit.append(self.dispatcher.stats().in_flight)
        return super().submit(fn, *args, **kwargs)


def test_work_is_counted_before_it_reaches_the_pool(clinic, transport) -> None:
    executor = _InFlightRecordingExecutor()
    dispatcher = NotificationDispatcher(store=clinic, transport=transport, executor=executor)
    executor.dispatcher = dispatcher

    notify_ticket_created(dispatcher, user_email="x@example.com", ticket_subject="Hola")

    assert dispatcher.shutdown(wait=True, timeout=5) is True
    assert executor.in_flight_at_submit
    assert all(count >= 1 for count in executor.in_flight_at_submit)
    stats = dispatcher.stats()
    assert stats.submitted == 3
    assert stats.completed == 3
    assert stats.cancelled == 0
