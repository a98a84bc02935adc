"""Repository implementations for infrastructure layer."""

from .clinical_session_repository import ClinicalSessionRepository
from .collaboration_repository import CollaborationRepository
from .notification_repository import NotificationRepository
from .patient_repository import PatientRepository
from .role_repository import DEFAULT_ROLES, RoleRepository
from .support_ticket_repository import SupportTicketRepository
from .user_repository import UserRepository

__all__ = [
    "ClinicalSessionRepository",
    "CollaborationRepository",
    "NotificationRepository",
    "PatientRepository",
    "RoleRepository",
    "DEFAULT_ROLES",
    "SupportTicketRepository",
    "UserRepository",
]
