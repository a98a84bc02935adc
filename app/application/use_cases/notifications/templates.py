"""Email and in-app message templates for notification events."""

from __future__ import annotations

import logging
from html import escape
from typing import Any, Callable, Mapping

from app.domain.entities import (
    COLLAB_STATUS_ACCEPTED,
    COLLAB_STATUS_REJECTED,
    DEFAULT_PERSON_LABEL,
    USER_STATUS_ACTIVE,
    USER_STATUS_INACTIVE,
    USER_STATUS_REJECTED,
    NotificationEvent,
    NotificationEventKind,
    RenderedMessage,
    UserProfile,
)

from .errors import RenderError

logger = logging.getLogger(__name__)

ACCENT_DEFAULT = "#2563eb"
ACCENT_SUCCESS = "#16a34a"
ACCENT_ALERT = "#dc2626"
ACCENT_SUPPORT = "#7c3aed"

INCIDENT_MARKER = "⚠️ ALERTA"

_ACCOUNT_STATUS_LABELS = {
    USER_STATUS_ACTIVE: "aprobada",
    USER_STATUS_REJECTED: "rechazada",
    USER_STATUS_INACTIVE: "desactivada",
}
_INVITE_STATUS_LABELS = {
    COLLAB_STATUS_ACCEPTED: "aceptado",
    COLLAB_STATUS_REJECTED: "rechazado",
}


def render_layout(
    title: str,
    body_html: str,
    action_html: str = "",
    accent_color: str = ACCENT_DEFAULT,
    *,
    brand: str = "MedLog Digital",
    footer: str = "Notificación automática.",
) -> str:
    """Wrap ``body_html`` in the shared email scaffold.

    The scaffold only knows about its parameters; ``title`` is escaped while
    ``body_html`` and ``action_html`` are inserted as already-safe markup.
    """

    action_block = ""
    if action_html:
        action_block = f'<div style="text-align:center; margin:30px 0;">{action_html}</div>'

    return (
        "<!DOCTYPE html>"
        "<html>"
        '<body style="margin:0; padding:0; background-color:#f3f4f6; '
        "font-family:'Segoe UI', sans-serif; color:#374151;\">"
        '<div style="max-width:600px; margin:20px auto; background-color:white; '
        'border-radius:8px; overflow:hidden; box-shadow:0 4px 6px rgba(0,0,0,0.05);">'
        f'<div style="background-color:{accent_color}; padding:24px; text-align:center;">'
        '<h1 style="color:white; margin:0; font-family:\'Segoe UI\', sans-serif; '
        f'font-size:24px;">{escape(brand)}</h1>'
        "</div>"
        '<div style="padding:40px; line-height:1.6;">'
        '<h2 style="color:#111827; margin-top:0; border-bottom:1px solid #eee; '
        f'padding-bottom:10px;">{escape(title)}</h2>'
        f"{body_html}"
        f"{action_block}"
        "</div>"
        '<div style="background-color:#f9fafb; padding:20px; text-align:center; '
        'font-size:12px; color:#9ca3af;">'
        f"<p>{escape(footer)}</p>"
        "</div>"
        "</div>"
        "</body>"
        "</html>"
    )


def action_button(label: str, href: str = "#", color: str = ACCENT_DEFAULT) -> str:
    """Return the call-to-action link used by templates that need one."""

    return (
        f'<a href="{escape(href, quote=True)}" style="background-color:{color}; '
        "color:white; padding:10px 20px; text-decoration:none; border-radius:5px;\">"
        f"{escape(label)}</a>"
    )


def person_label(profile: Mapping[str, Any] | None, placeholder: str = DEFAULT_PERSON_LABEL) -> str:
    """Return the display name found in a loosely typed profile document."""

    return UserProfile.from_document(profile).display_name(placeholder)


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


class TemplateRenderer:
    """Turn a :class:`NotificationEvent` into subject, summary and HTML body.

    Rendering is pure: the output only depends on the event and on the brand
    settings given at construction time.
    """

    def __init__(self, brand: str = "MedLog Digital", *, action_url: str = "#") -> None:
        self._brand = brand
        self._action_url = action_url
        self._renderers: dict[
            NotificationEventKind, Callable[[NotificationEvent], RenderedMessage]
        ] = {
            NotificationEventKind.NEW_USER_REGISTERED: self._new_user,
            NotificationEventKind.ACCOUNT_STATUS_CHANGED: self._account_status,
            NotificationEventKind.INCIDENT_REPORTED: self._incident,
            NotificationEventKind.COLLAB_INVITE_CREATED: self._collab_invite,
            NotificationEventKind.INVITE_RESPONDED: self._invite_response,
            NotificationEventKind.TICKET_CREATED: self._ticket_created,
            NotificationEventKind.TICKET_REPLIED: self._ticket_reply,
        }

    def render(self, event: NotificationEvent) -> RenderedMessage:
        """Render ``event``; never raises."""

        try:
            renderer = self._renderers.get(event.kind)
            if renderer is None:
                msg = f"No template registered for {event.kind.value}"
                raise RenderError(msg)
            return renderer(event)
        except Exception as exc:
            logger.exception("Falling back to generic template for %s: %s", event.kind, exc)
            return self._generic(event)

    def _page(
        self,
        event: NotificationEvent,
        title: str,
        body_html: str,
        accent_color: str,
        action_label: str | None = None,
    ) -> str:
        action_html = ""
        if action_label:
            action_html = action_button(action_label, self._action_url, accent_color)
        footer = f"© {event.occurred_at.year} MedLog. Notificación automática."
        return render_layout(
            title,
            body_html,
            action_html,
            accent_color,
            brand=self._brand,
            footer=footer,
        )

    def _new_user(self, event: NotificationEvent) -> RenderedMessage:
        email = _text(event.get("email"), "desconocido")
        body = (
            "<p>Un nuevo profesional se ha registrado y requiere verificación.</p>"
            f"<p><strong>Email:</strong> {escape(email)}</p>"
            "<p>Por favor, ingrese al panel administrativo para aprobar o rechazar la solicitud.</p>"
        )
        return RenderedMessage(
            subject="Nuevo Registro en Plataforma",
            html_body=self._page(
                event, "Solicitud de Acceso", body, ACCENT_DEFAULT, "Ir al Panel Admin"
            ),
            plain_summary=f"Usuario {email} registrado.",
            accent_color=ACCENT_DEFAULT,
        )

    def _account_status(self, event: NotificationEvent) -> RenderedMessage:
        status = _text(event.get("status")).upper()
        status_label = _ACCOUNT_STATUS_LABELS.get(status, status.lower() or "actualizada")
        summary = f"Tu cuenta ha sido {status_label}."

        if status == USER_STATUS_ACTIVE:
            body = (
                "<p>Tu cuenta ha sido verificada exitosamente. "
                "Ya puedes acceder a todas las funcionalidades.</p>"
            )
            return RenderedMessage(
                subject="¡Cuenta Aprobada!",
                html_body=self._page(event, "Bienvenido a MedLog", body, ACCENT_SUCCESS),
                plain_summary=summary,
                accent_color=ACCENT_SUCCESS,
            )

        reason = _text(event.get("reject_reason"), "Sin motivo especificado")
        body = (
            "<p>Lamentamos informarte que tu solicitud no ha sido aprobada.</p>"
            f"<p><strong>Motivo:</strong> {escape(reason)}</p>"
        )
        return RenderedMessage(
            subject="Estado de tu cuenta",
            html_body=self._page(event, "Solicitud Rechazada", body, ACCENT_ALERT),
            plain_summary=summary,
            accent_color=ACCENT_ALERT,
        )

    def _incident(self, event: NotificationEvent) -> RenderedMessage:
        patient_label = person_label(
            event.get("patient_profile"),
            placeholder=f"Paciente ID {_text(event.get('patient_id'), '?')}",
        )
        details = _text(event.get("details"), "Sin detalle")
        body = (
            '<p style="color:#b91c1c;"><strong>Se ha reportado un evento adverso.</strong></p>'
            f"<p><strong>Paciente:</strong> {escape(patient_label)}</p>"
            '<div style="background-color:#fee2e2; border-left:4px solid #dc2626; '
            'padding:15px; margin:20px 0; color:#7f1d1d;">'
            f"<strong>Detalle:</strong><br/>{escape(details)}"
            "</div>"
            "<p>Por favor, revise la bitácora antes de la próxima intervención.</p>"
        )
        return RenderedMessage(
            subject=f"{INCIDENT_MARKER}: Incidente con {patient_label}",
            html_body=self._page(event, "Reporte de Incidente", body, ACCENT_ALERT),
            plain_summary=f"Incidente reportado para {patient_label}",
            accent_color=ACCENT_ALERT,
        )

    def _collab_invite(self, event: NotificationEvent) -> RenderedMessage:
        inviter = _text(event.get("inviter_label"), DEFAULT_PERSON_LABEL)
        body = (
            f"<p>El profesional <strong>{escape(inviter)}</strong> te ha invitado a "
            "colaborar en un expediente clínico.</p>"
            "<p>Ingresa a la plataforma para aceptar o rechazar la solicitud.</p>"
        )
        return RenderedMessage(
            subject="Invitación a Colaborar",
            html_body=self._page(
                event, "Nueva Colaboración", body, ACCENT_DEFAULT, "Ver Invitaciones"
            ),
            plain_summary=f"{inviter} te ha invitado a un equipo médico.",
            accent_color=ACCENT_DEFAULT,
        )

    def _invite_response(self, event: NotificationEvent) -> RenderedMessage:
        responder = _text(event.get("responder_label"), DEFAULT_PERSON_LABEL)
        status = _text(event.get("status")).upper()
        status_label = _INVITE_STATUS_LABELS.get(status, status.lower() or "respondido")
        accent = {
            COLLAB_STATUS_ACCEPTED: ACCENT_SUCCESS,
            COLLAB_STATUS_REJECTED: ACCENT_ALERT,
        }.get(status, ACCENT_DEFAULT)
        body = (
            f"<p>El profesional <strong>{escape(responder)}</strong> ha respondido a tu "
            f"invitación con el estado: <strong>{escape(status or status_label)}</strong>.</p>"
        )
        return RenderedMessage(
            subject="Respuesta a Invitación",
            html_body=self._page(event, "Actualización de Equipo", body, accent),
            plain_summary=f"{responder} ha {status_label} tu invitación.",
            accent_color=accent,
        )

    def _ticket_created(self, event: NotificationEvent) -> RenderedMessage:
        author = _text(event.get("user_email"), DEFAULT_PERSON_LABEL)
        ticket_subject = _text(event.get("ticket_subject"), "(sin asunto)")
        body = (
            f"<p>El usuario <strong>{escape(author)}</strong> ha abierto un nuevo ticket.</p>"
            f"<p><strong>Asunto:</strong> {escape(ticket_subject)}</p>"
        )
        return RenderedMessage(
            subject="Nuevo Ticket de Soporte",
            html_body=self._page(event, "Mesa de Ayuda", body, ACCENT_SUPPORT),
            plain_summary=f"Ticket de {author}",
            accent_color=ACCENT_SUPPORT,
        )

    def _ticket_reply(self, event: NotificationEvent) -> RenderedMessage:
        ticket_subject = _text(event.get("ticket_subject"), "(sin asunto)")
        reply = _text(event.get("reply"))
        body = (
            "<p>Hola,</p>"
            "<p>Hemos respondido a tu solicitud de soporte: "
            f"<strong>\"{escape(ticket_subject)}\"</strong></p>"
            '<div style="background-color:#f5f3ff; border:1px solid #ddd6fe; '
            'padding:15px; border-radius:6px; margin-top:10px;">'
            f"<strong>Respuesta:</strong><br/>{escape(reply)}"
            "</div>"
        )
        return RenderedMessage(
            subject="Respuesta a tu Ticket de Soporte",
            html_body=self._page(event, "Soporte MedLog", body, ACCENT_SUPPORT),
            plain_summary=f"Admin ha respondido a: {ticket_subject}",
            accent_color=ACCENT_SUPPORT,
        )

    def _generic(self, event: NotificationEvent) -> RenderedMessage:
        body = "<p>Tienes una nueva notificación en la plataforma.</p>"
        return RenderedMessage(
            subject="Nueva notificación",
            html_body=render_layout(
                "Nueva notificación", body, "", ACCENT_DEFAULT, brand=self._brand
            ),
            plain_summary="Tienes una nueva notificación.",
            accent_color=ACCENT_DEFAULT,
        )


__all__ = [
    "ACCENT_DEFAULT",
    "ACCENT_SUCCESS",
    "ACCENT_ALERT",
    "ACCENT_SUPPORT",
    "INCIDENT_MARKER",
    "TemplateRenderer",
    "action_button",
    "person_label",
    "render_layout",
]
