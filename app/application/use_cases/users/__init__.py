"""Use cases for managing users."""

from .create_user import create_user, register_professional
from .review_user import REVIEW_APPROVE, REVIEW_REJECT, review_user

__all__ = [
    "create_user",
    "register_professional",
    "REVIEW_APPROVE",
    "REVIEW_REJECT",
    "review_user",
]
