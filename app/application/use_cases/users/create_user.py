"""Use cases for creating platform accounts."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import EventDispatcher, notify_new_user
from app.domain.entities import (
    ROLE_PROFESSIONAL,
    USER_STATUS_ACTIVE,
    USER_STATUS_INACTIVE,
    User,
)
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.utils import now_in_app_naive_datetime


def create_user(
    session: Session,
    *,
    email: str,
    role_alias: str,
    status: str = USER_STATUS_ACTIVE,
    profile_data: dict[str, Any] | None = None,
) -> User:
    """Create a user ensuring unique email addresses."""

    repository = UserRepository(session)
    email = email.strip()
    if not email or "@" not in email:
        raise ValueError("Correo electrónico inválido")
    if repository.get_by_email(email):
        raise ValueError("El correo electrónico ya está registrado")

    role_repository = RoleRepository(session)
    role_repository.ensure_defaults()
    role = role_repository.get_by_alias(role_alias)
    if role is None:
        raise ValueError("Rol no encontrado")

    user = User(
        id=None,
        role=role,
        email=email,
        status=status,
        profile_data=dict(profile_data or {}),
        created_at=now_in_app_naive_datetime(),
    )
    return repository.create(user)


def register_professional(
    session: Session,
    dispatcher: EventDispatcher,
    *,
    email: str,
    profile_data: dict[str, Any] | None = None,
) -> User:
    """Create a professional awaiting approval and alert the administrators."""

    user = create_user(
        session,
        email=email,
        role_alias=ROLE_PROFESSIONAL,
        status=USER_STATUS_INACTIVE,
        profile_data=profile_data,
    )
    notify_new_user(dispatcher, new_user_id=user.id, email=user.email)
    return user
