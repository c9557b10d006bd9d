"""Domain layer: message data objects and their validation rules."""

from .base import NotificationMessage
from .email import EmailMessage
from .sms import SMSMessage

__all__ = [
    "EmailMessage",
    "NotificationMessage",
    "SMSMessage",
]
