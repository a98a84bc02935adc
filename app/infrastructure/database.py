"""Database configuration and session management."""

from __future__ import annotations

import math
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Return engine keyword arguments bounding connection and query waits.

    Notification writes run on background workers with nobody awaiting them,
    so every connection attempt and every statement must give up after a
    bounded time.
    """

    timeout = settings.notification_storage_timeout_seconds
    backend = make_url(settings.database_url).get_backend_name()
    if backend == "sqlite":
        return {"connect_args": {"check_same_thread": False, "timeout": timeout}}

    seconds = max(1, math.ceil(timeout))
    connect_args: dict[str, Any] = {"connect_timeout": seconds}
    if backend == "postgresql":
        connect_args["options"] = f"-c statement_timeout={int(timeout * 1000)}"
    elif backend in {"mysql", "mariadb"}:
        connect_args["read_timeout"] = seconds
        connect_args["write_timeout"] = seconds
    return {"pool_pre_ping": True, "pool_timeout": timeout, "connect_args": connect_args}


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for ``settings.database_url``."""

    return create_engine(settings.database_url, **_engine_options(settings))


settings = get_settings()
engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from app.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
