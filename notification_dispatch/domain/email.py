"""Email message data object.

An email is addressed by template id: the mail service renders `template`
with `context`. `subject` is optional and only passed along when set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from email_validator import EmailNotValidError, validate_email

from ..types import Recipient
from .base import NotificationMessage


@dataclass
class EmailMessage(NotificationMessage):
    kind: ClassVar[str] = "email"

    recipient: Recipient = None
    template: str = ""
    context: dict[str, Any] = field(default_factory=dict)
    subject: str | None = None

    def collect_errors(self) -> list[str]:
        errors: list[str] = []
        if not self.template:
            errors.append("The template field is required.")

        if self.recipient is None or self.recipient == "":
            errors.append("The email field is required.")
        elif not isinstance(self.recipient, str):
            errors.append("The email must be a string.")
        else:
            try:
                validate_email(self.recipient.strip(), check_deliverability=False)
            except EmailNotValidError:
                errors.append("The email must be a valid email address.")
        return errors

    def to_payload(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "recipient": self.recipient,
            "template": self.template,
            "context": dict(self.context),
            "subject": self.subject,
        }
