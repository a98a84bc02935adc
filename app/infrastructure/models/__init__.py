"""ORM models used by the application infrastructure."""

from .role import RoleModel
from .user import UserModel
from .patient import PatientModel
from .clinical_session import ClinicalSessionModel
from .collaboration import CollaborationModel
from .support_ticket import SupportTicketModel
from .notification import NotificationModel

__all__ = [
    "RoleModel",
    "UserModel",
    "PatientModel",
    "ClinicalSessionModel",
    "CollaborationModel",
    "SupportTicketModel",
    "NotificationModel",
]
