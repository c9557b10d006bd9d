"""SMS message data object.

The recipient is a phone number, given as a string or an integer. Anything
else (a user model, say) is rejected so it never reaches the gateway or the
queue as a phone number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..types import Recipient
from .base import NotificationMessage


@dataclass
class SMSMessage(NotificationMessage):
    kind: ClassVar[str] = "sms"

    recipient: Recipient = None
    message: str = ""

    def collect_errors(self) -> list[str]:
        errors: list[str] = []
        if self.recipient is None or self.recipient == "":
            errors.append("The phone field is required.")
        elif isinstance(self.recipient, bool) or not isinstance(self.recipient, (str, int)):
            errors.append("The phone must be a string or a number.")
        elif not str(self.recipient).strip():
            errors.append("The phone field is required.")

        if not self.message or not self.message.strip():
            errors.append("The message field is required.")
        return errors

    def to_payload(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "recipient": self.recipient,
            "message": self.message,
        }
