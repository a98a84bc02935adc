"""Failures raised inside the notification engine.

None of these ever reaches the operation that triggered a notification; the
dispatcher logs them at the point where the background work fails.
"""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for notification engine failures."""


class ResolutionError(NotificationError):
    """A recipient lookup failed; the affected relationship is skipped."""


class RenderError(NotificationError):
    """A template could not be rendered; indicates a programming defect."""


class StorageError(NotificationError):
    """The in-app notification row could not be written."""


class DeliveryError(NotificationError):
    """The email transport rejected or failed to send a message."""

    def __init__(self, recipient: str, message: str) -> None:
        super().__init__(message)
        self.recipient = recipient


__all__ = [
    "NotificationError",
    "ResolutionError",
    "RenderError",
    "StorageError",
    "DeliveryError",
]
