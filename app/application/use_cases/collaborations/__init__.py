"""Use cases for patient collaborations."""

from .invite import invite_collaborator
from .respond import ALLOWED_RESPONSES, respond_invitation

__all__ = ["ALLOWED_RESPONSES", "invite_collaborator", "respond_invitation"]
