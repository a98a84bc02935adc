"""Use cases for therapy session logs."""

from .record_session import record_session

__all__ = ["record_session"]
