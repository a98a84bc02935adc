"""SMTP transport used to send notification emails."""

from __future__ import annotations

import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from typing import Protocol

from app.application.use_cases.notifications.errors import DeliveryError
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

IMPLICIT_TLS_PORT = 465


class EmailTransport(Protocol):
    """Anything able to deliver a single HTML email."""

    @property
    def is_configured(self) -> bool:
        ...

    def send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        *,
        text_body: str | None = None,
    ) -> None:
        ...


class SmtpEmailTransport:
    """Send one message per call through an authenticated SMTP session.

    Each call opens its own connection, so concurrent senders never share
    socket state. There is no retry: a failure raises :class:`DeliveryError`.
    """

    def __init__(
        self,
        host: str | None,
        port: int,
        sender: str | None,
        password: str | None,
        *,
        timeout: float = 10.0,
        sender_name: str = "MedLog",
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.password = password
        self.timeout = timeout
        self.sender_name = sender_name

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SmtpEmailTransport":
        settings = settings or get_settings()
        return cls(
            settings.smtp_host,
            settings.smtp_port,
            settings.smtp_email,
            settings.smtp_password,
            timeout=settings.smtp_timeout_seconds,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.sender and self.password)

    def build_message(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        *,
        text_body: str | None = None,
    ) -> EmailMessage:
        """Return the MIME message sent for ``to_address``."""

        message = EmailMessage()
        message["From"] = formataddr((self.sender_name, self.sender or ""))
        message["To"] = to_address
        message["Subject"] = subject
        message.set_content(text_body or subject)
        message.add_alternative(html_body, subtype="html")
        return message

    def send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        *,
        text_body: str | None = None,
    ) -> None:
        """Deliver the message or raise :class:`DeliveryError`."""

        if not self.is_configured:
            raise DeliveryError(to_address, "SMTP transport is not configured")
        if not to_address or "@" not in to_address:
            raise DeliveryError(to_address, f"Invalid recipient address {to_address!r}")

        message = self.build_message(to_address, subject, html_body, text_body=text_body)
        context = ssl.create_default_context()
        try:
            if self.port == IMPLICIT_TLS_PORT:
                connection = smtplib.SMTP_SSL(
                    self.host, self.port, timeout=self.timeout, context=context
                )
            else:
                connection = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            with connection as server:
                if self.port != IMPLICIT_TLS_PORT:
                    server.ehlo()
                    if server.has_extn("starttls"):
                        server.starttls(context=context)
                        server.ehlo()
                server.login(self.sender, self.password)
                server.send_message(message)
        except smtplib.SMTPAuthenticationError as exc:
            msg = f"SMTP authentication failed with status {exc.smtp_code}"
            raise DeliveryError(to_address, msg) from exc
        except (smtplib.SMTPException, OSError) as exc:
            raise DeliveryError(to_address, f"SMTP delivery failed: {exc}") from exc

        logger.info("Email sent to %s", to_address)


__all__ = ["EmailTransport", "SmtpEmailTransport", "IMPLICIT_TLS_PORT"]
