"""Unit tests for the SMTP email transport."""

from __future__ import annotations

import smtplib

import pytest

from app.application.use_cases.notifications import DeliveryError
from app.config import Settings
from app.infrastructure import email as email_module
from app.infrastructure.email import SmtpEmailTransport


class FakeSMTP:
    """Record the calls made on an SMTP session."""

    instances: list["FakeSMTP"] = []
    login_error: Exception | None = None
    supports_starttls = True

    def __init__(self, host, port, timeout=None, context=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.context = context
        self.calls: list[str] = []
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.calls.append("quit")
        return False

    def ehlo(self):
        self.calls.append("ehlo")

    def has_extn(self, name):
        return name == "starttls" and self.supports_starttls

    def starttls(self, context=None):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append("login")
        if self.login_error is not None:
            raise self.login_error

    def send_message(self, message):
        self.calls.append("send_message")
        self.messages.append(message)


@pytest.fixture(autouse=True)
def fake_smtp(monkeypatch: pytest.MonkeyPatch):
    FakeSMTP.instances = []
    FakeSMTP.login_error = None
    FakeSMTP.supports_starttls = True
    monkeypatch.setattr(email_module.smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(email_module.smtplib, "SMTP_SSL", FakeSMTP)
    return FakeSMTP


def _transport(port: int = 587) -> SmtpEmailTransport:
    return SmtpEmailTransport(
        "smtp.example.com", port, "alerts@example.com", "app-password", timeout=3
    )


def test_send_uses_starttls_and_authenticates(fake_smtp) -> None:
    _transport().send(
        "doctor@example.com",
        "Nuevo Ticket",
        "<p>Hola</p>",
        text_body="Ticket de doctor@example.com",
    )

    assert len(fake_smtp.instances) == 1
    session = fake_smtp.instances[0]
    assert (session.host, session.port, session.timeout) == ("smtp.example.com", 587, 3)
    assert session.calls == ["ehlo", "starttls", "ehlo", "login", "send_message", "quit"]

    message = session.messages[0]
    assert message["To"] == "doctor@example.com"
    assert message["Subject"] == "Nuevo Ticket"
    assert "alerts@example.com" in message["From"]
    html_part = message.get_body(preferencelist=("html",))
    assert "<p>Hola</p>" in html_part.get_content()
    plain_part = message.get_body(preferencelist=("plain",))
    assert "Ticket de doctor@example.com" in plain_part.get_content()


def test_send_skips_starttls_when_not_offered(fake_smtp) -> None:
    fake_smtp.supports_starttls = False

    _transport().send("doctor@example.com", "Asunto", "<p>Body</p>")

    assert "starttls" not in fake_smtp.instances[0].calls


def test_implicit_tls_port_opens_ssl_session(
    fake_smtp, monkeypatch: pytest.MonkeyPatch
) -> None:
    plain_sessions = []
    monkeypatch.setattr(
        email_module.smtplib, "SMTP", lambda *args, **kwargs: plain_sessions.append(args)
    )

    _transport(port=465).send("doctor@example.com", "Asunto", "<p>Body</p>")

    assert plain_sessions == []
    session = fake_smtp.instances[0]
    assert session.context is not None
    assert session.calls == ["login", "send_message", "quit"]


def test_authentication_failure_raises_delivery_error(fake_smtp) -> None:
    fake_smtp.login_error = smtplib.SMTPAuthenticationError(535, b"Bad credentials")

    with pytest.raises(DeliveryError) as excinfo:
        _transport().send("doctor@example.com", "Asunto", "<p>Body</p>")

    assert excinfo.value.recipient == "doctor@example.com"
    assert "status 535" in str(excinfo.value)


def test_connection_error_raises_delivery_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(email_module.smtplib, "SMTP", refuse)

    with pytest.raises(DeliveryError, match="connection refused"):
        _transport().send("doctor@example.com", "Asunto", "<p>Body</p>")


def test_unconfigured_transport_refuses_to_send(fake_smtp) -> None:
    transport = SmtpEmailTransport(None, 587, None, None)

    assert transport.is_configured is False
    with pytest.raises(DeliveryError, match="not configured"):
        transport.send("doctor@example.com", "Asunto", "<p>Body</p>")
    assert fake_smtp.instances == []


def test_invalid_recipient_is_rejected(fake_smtp) -> None:
    with pytest.raises(DeliveryError, match="Invalid recipient"):
        _transport().send("not-an-address", "Asunto", "<p>Body</p>")
    assert fake_smtp.instances == []


def test_from_settings_reads_smtp_configuration() -> None:
    settings = Settings(
        smtp_host="smtp.gmail.com",
        smtp_port=465,
        smtp_email="medlog@example.com",
        smtp_password="secret",
        smtp_timeout_seconds=7,
    )

    transport = SmtpEmailTransport.from_settings(settings)

    assert transport.is_configured is True
    assert (transport.host, transport.port, transport.timeout) == ("smtp.gmail.com", 465, 7)
    assert transport.sender == "medlog@example.com"
