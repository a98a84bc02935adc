"""Entry points used by business operations to emit notifications.

Each helper builds the :class:`NotificationEvent` for one domain occurrence
and hands it to the dispatcher. They return as soon as the event is queued;
recipients, rendering and delivery are handled in the background.
"""

from __future__ import annotations

from typing import Protocol

from app.domain.entities import NotificationEvent, NotificationEventKind, subject_set
from app.utils import now_in_app_timezone


class EventDispatcher(Protocol):
    def dispatch(self, event: NotificationEvent) -> None:
        ...


def _emit(
    dispatcher: EventDispatcher,
    kind: NotificationEventKind,
    *,
    subject_ids: frozenset[int],
    related_id: int | None = None,
    **payload,
) -> NotificationEvent:
    event = NotificationEvent(
        kind=kind,
        occurred_at=now_in_app_timezone(),
        subject_ids=subject_ids,
        payload=payload,
        related_id=related_id,
    )
    dispatcher.dispatch(event)
    return event


def notify_new_user(
    dispatcher: EventDispatcher, *, new_user_id: int, email: str
) -> NotificationEvent:
    """Tell the administrators that a professional is waiting for approval."""

    return _emit(
        dispatcher,
        NotificationEventKind.NEW_USER_REGISTERED,
        subject_ids=subject_set(new_user_id),
        related_id=new_user_id,
        user_id=new_user_id,
        email=email,
    )


def notify_account_status(
    dispatcher: EventDispatcher,
    *,
    user_id: int,
    status: str,
    reject_reason: str | None = None,
) -> NotificationEvent:
    """Tell a user that their account was approved or rejected."""

    return _emit(
        dispatcher,
        NotificationEventKind.ACCOUNT_STATUS_CHANGED,
        subject_ids=subject_set(user_id),
        user_id=user_id,
        status=status,
        reject_reason=reject_reason,
    )


def notify_incident(
    dispatcher: EventDispatcher, *, patient_id: int, incident_details: str
) -> NotificationEvent:
    """Alert the patient's care team about an adverse event."""

    return _emit(
        dispatcher,
        NotificationEventKind.INCIDENT_REPORTED,
        subject_ids=subject_set(patient_id),
        related_id=patient_id,
        patient_id=patient_id,
        details=incident_details,
    )


def notify_collab_invite(
    dispatcher: EventDispatcher,
    *,
    invited_user_id: int,
    patient_id: int,
    inviter_label: str,
) -> NotificationEvent:
    """Tell a professional they were invited to collaborate on a patient."""

    return _emit(
        dispatcher,
        NotificationEventKind.COLLAB_INVITE_CREATED,
        subject_ids=subject_set(invited_user_id, patient_id),
        related_id=patient_id,
        invited_user_id=invited_user_id,
        patient_id=patient_id,
        inviter_label=inviter_label,
    )


def notify_invite_response(
    dispatcher: EventDispatcher,
    *,
    creator_id: int,
    responder_label: str,
    new_status: str,
) -> NotificationEvent:
    """Tell the inviting professional how their invitation was answered."""

    return _emit(
        dispatcher,
        NotificationEventKind.INVITE_RESPONDED,
        subject_ids=subject_set(creator_id),
        creator_id=creator_id,
        responder_label=responder_label,
        status=new_status,
    )


def notify_ticket_created(
    dispatcher: EventDispatcher, *, user_email: str, ticket_subject: str
) -> NotificationEvent:
    """Tell the administrators that a support ticket was opened."""

    return _emit(
        dispatcher,
        NotificationEventKind.TICKET_CREATED,
        subject_ids=frozenset(),
        user_email=user_email,
        ticket_subject=ticket_subject,
    )


def notify_ticket_reply(
    dispatcher: EventDispatcher,
    *,
    user_id: int,
    ticket_subject: str,
    reply_text: str,
) -> NotificationEvent:
    """Send an administrator's answer to the author of a ticket."""

    return _emit(
        dispatcher,
        NotificationEventKind.TICKET_REPLIED,
        subject_ids=subject_set(user_id),
        user_id=user_id,
        ticket_subject=ticket_subject,
        reply=reply_text,
    )


__all__ = [
    "EventDispatcher",
    "notify_new_user",
    "notify_account_status",
    "notify_incident",
    "notify_collab_invite",
    "notify_invite_response",
    "notify_ticket_created",
    "notify_ticket_reply",
]
