"""Recipient resolution for notification events."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from app.domain.entities import ROLE_ADMIN, NotificationEvent, NotificationEventKind

from .errors import ResolutionError
from .store import NotificationStore

logger = logging.getLogger(__name__)


class RecipientResolver:
    """Compute the users that must be notified about an event.

    Resolution never raises: when a lookup fails the relationship it serves is
    left out and the remaining recipients are still returned.
    """

    def __init__(self, store: NotificationStore) -> None:
        self._store = store
        self._policies: dict[
            NotificationEventKind, Callable[[NotificationEvent], Iterable[int | None]]
        ] = {
            NotificationEventKind.NEW_USER_REGISTERED: self._administrators,
            NotificationEventKind.TICKET_CREATED: self._administrators,
            NotificationEventKind.ACCOUNT_STATUS_CHANGED: self._payload_user("user_id"),
            NotificationEventKind.INVITE_RESPONDED: self._payload_user("creator_id"),
            NotificationEventKind.COLLAB_INVITE_CREATED: self._payload_user(
                "invited_user_id"
            ),
            NotificationEventKind.TICKET_REPLIED: self._payload_user("user_id"),
            NotificationEventKind.INCIDENT_REPORTED: self._care_team,
        }

    def resolve(self, event: NotificationEvent) -> set[int]:
        """Return the deduplicated user ids to notify about ``event``."""

        policy = self._policies.get(event.kind)
        if policy is None:
            logger.warning("No recipient policy registered for %s", event.kind.value)
            return set()
        return {user_id for user_id in policy(event) if _is_identifier(user_id)}

    def with_subject_context(self, event: NotificationEvent) -> NotificationEvent:
        """Attach the subject details the templates need to label ``event``.

        Incidents are rendered with the patient's name, which the triggering
        operation does not send. A failed lookup leaves the event unchanged so
        rendering falls back to a generic label.
        """

        if event.kind is not NotificationEventKind.INCIDENT_REPORTED:
            return event
        if event.get("patient_profile") is not None:
            return event

        patient_id = event.get("patient_id")
        try:
            patient = self._lookup(
                "patient", lambda: self._store.get_patient(patient_id)
            )
        except ResolutionError as exc:
            logger.warning("%s", exc)
            return event
        if patient is None:
            return event
        return event.with_payload(patient_profile=dict(patient.personal_info or {}))

    def _administrators(self, event: NotificationEvent) -> list[int]:
        try:
            return self._lookup(
                "administrators", lambda: self._store.list_user_ids_by_role(ROLE_ADMIN)
            )
        except ResolutionError as exc:
            logger.error("%s; %s notification skipped", exc, event.kind.value)
            return []

    @staticmethod
    def _payload_user(
        key: str,
    ) -> Callable[[NotificationEvent], list[int | None]]:
        def policy(event: NotificationEvent) -> list[int | None]:
            return [event.get(key)]

        return policy

    def _care_team(self, event: NotificationEvent) -> set[int]:
        patient_id = event.get("patient_id")
        recipients: set[int] = set()

        try:
            recipients.update(
                self._lookup(
                    "collaborators",
                    lambda: self._store.list_accepted_collaborator_ids(patient_id),
                )
            )
        except ResolutionError as exc:
            logger.warning("%s; continuing without collaborators", exc)

        try:
            patient = self._lookup(
                "patient creator", lambda: self._store.get_patient(patient_id)
            )
        except ResolutionError as exc:
            logger.warning("%s; continuing without the patient creator", exc)
        else:
            if patient is not None:
                recipients.add(patient.creator_id)

        return recipients

    @staticmethod
    def _lookup(relationship: str, loader: Callable):
        try:
            return loader()
        except Exception as exc:
            msg = f"Could not resolve {relationship}: {exc}"
            raise ResolutionError(msg) from exc


def _is_identifier(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


__all__ = ["RecipientResolver"]
