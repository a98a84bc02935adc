"""Domain events that fan out into user notifications."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class NotificationEventKind(str, Enum):
    """Domain occurrences that notify users."""

    NEW_USER_REGISTERED = "NEW_USER_REGISTERED"
    ACCOUNT_STATUS_CHANGED = "ACCOUNT_STATUS_CHANGED"
    INCIDENT_REPORTED = "INCIDENT_REPORTED"
    COLLAB_INVITE_CREATED = "COLLAB_INVITE_CREATED"
    INVITE_RESPONDED = "INVITE_RESPONDED"
    TICKET_CREATED = "TICKET_CREATED"
    TICKET_REPLIED = "TICKET_REPLIED"

    @property
    def notification_type(self) -> str:
        """Return the ``type`` stored on notification rows for this kind."""

        return _NOTIFICATION_TYPES[self]


_NOTIFICATION_TYPES = {
    NotificationEventKind.NEW_USER_REGISTERED: "NEW_USER",
    NotificationEventKind.ACCOUNT_STATUS_CHANGED: "ACCOUNT_STATUS",
    NotificationEventKind.INCIDENT_REPORTED: "INCIDENT_ALERT",
    NotificationEventKind.COLLAB_INVITE_CREATED: "COLLAB_INVITE",
    NotificationEventKind.INVITE_RESPONDED: "INVITE_RESPONSE",
    NotificationEventKind.TICKET_CREATED: "TICKET_CREATED",
    NotificationEventKind.TICKET_REPLIED: "TICKET_REPLY",
}


@dataclass(frozen=True)
class NotificationEvent:
    """Immutable description of something users must be told about.

    ``payload`` is copied into a read-only mapping on construction so the
    event can be shared between background workers without copies.
    """

    kind: NotificationEventKind
    occurred_at: datetime
    subject_ids: frozenset[int] = field(default_factory=frozenset)
    payload: Mapping[str, Any] = field(default_factory=dict)
    related_id: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", NotificationEventKind(self.kind))
        object.__setattr__(
            self,
            "subject_ids",
            frozenset(subject for subject in self.subject_ids if subject is not None),
        )
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def with_payload(self, **values: Any) -> "NotificationEvent":
        """Return a copy of the event with ``values`` merged into the payload."""

        return replace(self, payload={**self.payload, **values})


@dataclass(frozen=True)
class RenderedMessage:
    """Subject, summary and HTML body rendered once per event."""

    subject: str
    html_body: str
    plain_summary: str
    accent_color: str


def subject_set(*ids: int | None) -> frozenset[int]:
    """Return the non-empty identifiers in ``ids`` as a set."""

    return frozenset(value for value in ids if value)


__all__ = [
    "NotificationEventKind",
    "NotificationEvent",
    "RenderedMessage",
    "subject_set",
]
