"""Background dispatcher that fans notification events out to recipients."""

from __future__ import annotations

import logging
import threading
from collections import Counter
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    DeliveryError,
    NotificationRecordWriter,
    NotificationStore,
    RecipientResolver,
    StorageError,
    TemplateRenderer,
)
from app.config import Settings, get_settings
from app.domain.entities import NotificationEvent, RenderedMessage
from app.infrastructure.email import EmailTransport, SmtpEmailTransport

from .store import SqlAlchemyNotificationStore

logger = logging.getLogger(__name__)


def _describe(task: Callable[..., None], args: tuple) -> str:
    """Name a queued task and the event or recipient it carries, for logs."""

    events = [arg for arg in args if isinstance(arg, NotificationEvent)]
    label = task.__name__.lstrip("_")
    if events:
        label = f"{label} of {events[0].kind.value}"
    if args and isinstance(args[0], int):
        label = f"{label} for user {args[0]}"
    return label


@dataclass(frozen=True)
class DispatcherStats:
    """Snapshot of the work handled by a :class:`NotificationDispatcher`."""

    submitted: int
    in_flight: int
    completed: int
    cancelled: int
    storage_failures: int
    delivery_failures: int
    unexpected_failures: int


class NotificationDispatcher:
    """Resolve, render and deliver notification events off the request path.

    :meth:`dispatch` only queues the event. A worker then resolves the
    recipients, renders the message once and queues one pipeline per
    recipient; each pipeline writes the in-app row and then sends the email.
    Failures are logged and counted, never raised to the caller, and a
    failure in one pipeline does not affect the others.
    """

    def __init__(
        self,
        *,
        store: NotificationStore,
        transport: EmailTransport,
        resolver: RecipientResolver | None = None,
        renderer: TemplateRenderer | None = None,
        writer: NotificationRecordWriter | None = None,
        max_workers: int = 8,
        executor: Executor | None = None,
    ) -> None:
        self._store = store
        self._transport = transport
        self._resolver = resolver or RecipientResolver(store)
        self._renderer = renderer or TemplateRenderer()
        self._writer = writer or NotificationRecordWriter(store)
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="notifications"
        )
        self._condition = threading.Condition()
        self._counters: Counter[str] = Counter()
        self._in_flight = 0
        self._accepting = True

    @property
    def accepting(self) -> bool:
        with self._condition:
            return self._accepting

    def dispatch(self, event: NotificationEvent) -> None:
        """Queue ``event`` for delivery and return immediately."""

        with self._condition:
            if not self._accepting:
                logger.warning(
                    "Notification dispatcher is shut down; dropping %s event",
                    event.kind.value,
                )
                return
            self._reserve()
        self._start(self._dispatch_event, event)

    def stats(self) -> DispatcherStats:
        with self._condition:
            return DispatcherStats(
                submitted=self._counters["submitted"],
                in_flight=self._in_flight,
                completed=self._counters["completed"],
                cancelled=self._counters["cancelled"],
                storage_failures=self._counters["storage_failures"],
                delivery_failures=self._counters["delivery_failures"],
                unexpected_failures=self._counters["unexpected_failures"],
            )

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no work is queued or running; ``False`` on timeout."""

        with self._condition:
            return self._condition.wait_for(lambda: self._in_flight == 0, timeout)

    def shutdown(self, *, wait: bool = True, timeout: float | None = None) -> bool:
        """Stop accepting events and drain the queued work.

        Returns ``True`` when every queued task finished. When the drain times
        out the tasks that have not started yet are cancelled; each one is
        logged and counted in :attr:`DispatcherStats.cancelled`.
        """

        with self._condition:
            self._accepting = False

        drained = self.wait_idle(timeout) if wait else False
        if wait and not drained:
            logger.warning(
                "Notification dispatcher stopped with %d task(s) still pending",
                self.stats().in_flight,
            )
        self._executor.shutdown(wait=drained, cancel_futures=not drained)
        return drained

    def _reserve(self) -> None:
        # Caller holds ``self._condition``.
        self._counters["submitted"] += 1
        self._in_flight += 1

    def _submit(self, task: Callable[..., None], *args: Any) -> None:
        with self._condition:
            self._reserve()
        self._start(task, *args)

    def _start(self, task: Callable[..., None], *args: Any) -> None:
        try:
            future = self._executor.submit(self._run, task, *args)
        except RuntimeError:
            logger.error("Notification worker pool rejected %s", _describe(task, args))
            self._finish(failed=True)
            return
        future.add_done_callback(partial(self._on_done, task, args))

    def _on_done(self, task: Callable[..., None], args: tuple, future: Future) -> None:
        # Tasks that ran were already settled by ``_run``.
        if not future.cancelled():
            return
        logger.warning("Cancelled %s before it ran", _describe(task, args))
        self._finish(failed=False, outcome="cancelled")

    def _run(self, task: Callable[..., None], *args: Any) -> None:
        failed = False
        try:
            task(*args)
        except Exception:
            failed = True
            logger.exception("Unexpected failure while running %s", task.__name__)
        finally:
            self._finish(failed=failed)

    def _finish(self, *, failed: bool, outcome: str = "completed") -> None:
        with self._condition:
            self._in_flight -= 1
            self._counters[outcome] += 1
            if failed:
                self._counters["unexpected_failures"] += 1
            self._condition.notify_all()

    def _count(self, counter: str) -> None:
        with self._condition:
            self._counters[counter] += 1

    def _dispatch_event(self, event: NotificationEvent) -> None:
        recipients = self._resolver.resolve(event)
        if not recipients:
            logger.info("No recipients for %s event", event.kind.value)
            return

        event = self._resolver.with_subject_context(event)
        message = self._renderer.render(event)
        logger.info(
            "Dispatching %s event to %d recipient(s)", event.kind.value, len(recipients)
        )
        for user_id in sorted(recipients):
            self._submit(self._deliver, user_id, event, message)

    def _deliver(
        self, user_id: int, event: NotificationEvent, message: RenderedMessage
    ) -> None:
        try:
            self._writer.record(
                user_id, event.kind, message.plain_summary, event.related_id
            )
        except StorageError as exc:
            self._count("storage_failures")
            logger.error(
                "Failed to store %s notification for user %s: %s",
                event.kind.value,
                user_id,
                exc,
            )

        self._send_email(user_id, message)

    def _send_email(self, user_id: int, message: RenderedMessage) -> None:
        if not self._transport.is_configured:
            logger.info("SMTP configuration incomplete; skipping email delivery")
            return

        try:
            user = self._store.get_user(user_id)
        except StorageError as exc:
            self._count("delivery_failures")
            logger.error("Could not look up email address for user %s: %s", user_id, exc)
            return
        if user is None or not user.email:
            logger.warning("User %s has no email address; skipping email", user_id)
            return

        try:
            self._transport.send(
                user.email,
                message.subject,
                message.html_body,
                text_body=message.plain_summary,
            )
        except DeliveryError as exc:
            self._count("delivery_failures")
            logger.error("Email to %s failed: %s", exc.recipient, exc)


def build_notification_dispatcher(
    session_factory: Callable[[], Session], settings: Settings | None = None
) -> NotificationDispatcher:
    """Wire the dispatcher used by the application from ``settings``."""

    settings = settings or get_settings()
    store = SqlAlchemyNotificationStore(session_factory)
    return NotificationDispatcher(
        store=store,
        transport=SmtpEmailTransport.from_settings(settings),
        renderer=TemplateRenderer(settings.platform_name),
        max_workers=settings.notification_max_workers,
    )


__all__ = [
    "DispatcherStats",
    "NotificationDispatcher",
    "build_notification_dispatcher",
]
