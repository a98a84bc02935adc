"""Typed view over the free-form profile documents stored for people."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_PERSON_LABEL = "Usuario"


def _clean(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class UserProfile:
    """Name fields recognised inside a profile document.

    Profiles are stored as JSON without a fixed schema, so every field is
    optional. :meth:`display_name` resolves them with a fixed precedence:
    ``full_name``, then ``first_name`` + ``last_name``, then ``name`` and
    finally a placeholder label.
    """

    full_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None

    @classmethod
    def from_document(cls, document: Mapping[str, Any] | None) -> "UserProfile":
        """Build a profile from ``document`` ignoring unknown or non-text values."""

        if not isinstance(document, Mapping):
            return cls()
        return cls(
            full_name=_clean(document.get("full_name")),
            first_name=_clean(document.get("first_name")),
            last_name=_clean(document.get("last_name")),
            name=_clean(document.get("name")),
        )

    def display_name(self, placeholder: str = DEFAULT_PERSON_LABEL) -> str:
        if self.full_name:
            return self.full_name
        if self.first_name:
            return f"{self.first_name} {self.last_name or ''}".strip()
        if self.name:
            return self.name
        return placeholder


__all__ = ["UserProfile", "DEFAULT_PERSON_LABEL"]
