"""Tests for the engine options derived from the settings."""

from __future__ import annotations

import pytest

from app.config import Settings
from app.infrastructure.database import _engine_options


def _settings(database_url: str, timeout: float = 2.5) -> Settings:
    return Settings(
        database_url=database_url,
        secret_key="test-secret",
        notification_storage_timeout_seconds=timeout,
    )


def test_sqlite_uses_busy_timeout() -> None:
    options = _engine_options(_settings("sqlite:///./medlog.db"))

    assert options == {"connect_args": {"check_same_thread": False, "timeout": 2.5}}


@pytest.mark.parametrize(
    "database_url",
    ["postgresql://medlog:secret@db/medlog", "postgresql+psycopg2://medlog@db/medlog"],
)
def test_postgresql_bounds_connect_and_statements(database_url: str) -> None:
    options = _engine_options(_settings(database_url))

    assert options["pool_pre_ping"] is True
    assert options["pool_timeout"] == 2.5
    assert options["connect_args"] == {
        "connect_timeout": 3,
        "options": "-c statement_timeout=2500",
    }


def test_mysql_bounds_connect_and_socket_io() -> None:
    options = _engine_options(_settings("mysql+pymysql://medlog@db/medlog", timeout=10))

    assert options["connect_args"] == {
        "connect_timeout": 10,
        "read_timeout": 10,
        "write_timeout": 10,
    }


def test_sub_second_timeout_still_sets_a_connect_bound() -> None:
    options = _engine_options(_settings("postgresql://medlog@db/medlog", timeout=0.2))

    assert options["connect_args"]["connect_timeout"] == 1
    assert options["connect_args"]["options"] == "-c statement_timeout=200"
