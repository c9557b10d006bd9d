"""Email provider backed by an injected mailer callable."""

from __future__ import annotations

from ..domain.email import EmailMessage
from ..types import MailerFn
from .base import NotificationProvider


class EmailProvider(NotificationProvider):
    message_class = EmailMessage

    def __init__(self, mailer: MailerFn) -> None:
        super().__init__()
        self._mailer = mailer

    def send(self, message: EmailMessage) -> None:  # type: ignore[override]
        self.check_for_instance(message)

        kwargs = {
            "to_email": message.recipient,
            "template": message.template,
            "context": dict(message.context),
        }
        if message.subject:
            kwargs["subject"] = message.subject
        self._mailer(**kwargs)

        self.set_status({"success": True, "message": "Message sent successfully"})
