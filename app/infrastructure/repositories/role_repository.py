"""Persistence layer for roles data."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.infrastructure.models import RoleModel

DEFAULT_ROLES: tuple[tuple[str, str], ...] = (
    ("Administrador", "admin"),
    ("Profesional", "professional"),
    ("Empresa", "business"),
)


class RoleRepository:
    """Provide access to the roles stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_alias(self, alias: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.alias) == alias.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def ensure_defaults(self) -> list[Role]:
        """Create the platform roles that are missing and return all of them."""

        roles: list[Role] = []
        for name, alias in DEFAULT_ROLES:
            role = self.get_by_alias(alias)
            if role is None:
                model = RoleModel(name=name, alias=alias)
                self.session.add(model)
                self.session.commit()
                self.session.refresh(model)
                role = self._to_entity(model)
            roles.append(role)
        return roles

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name, alias=model.alias)


__all__ = ["RoleRepository", "DEFAULT_ROLES"]
