"""Notification dispatch: route email and SMS messages to their providers."""

from .adapters import (
    ConsoleSMSClient,
    EmailProvider,
    NotificationProvider,
    SMSPilotClient,
    SMSProvider,
    publish_notification_job,
    run_notification_worker_forever,
    send_template_email_via_console,
    send_template_email_via_mailgun_from_env,
)
from .application.manager import NotificationManager
from .domain import EmailMessage, NotificationMessage, SMSMessage
from .errors import (
    DataValidationError,
    MissedConfigurationError,
    MissedDependencyError,
    NotificationError,
    UnavailableForTestError,
    WrongImplementationError,
)
from .events import SMSSendErrorEvent

__all__ = [
    "ConsoleSMSClient",
    "DataValidationError",
    "EmailMessage",
    "EmailProvider",
    "MissedConfigurationError",
    "MissedDependencyError",
    "NotificationError",
    "NotificationManager",
    "NotificationMessage",
    "NotificationProvider",
    "SMSMessage",
    "SMSPilotClient",
    "SMSProvider",
    "SMSSendErrorEvent",
    "UnavailableForTestError",
    "WrongImplementationError",
    "publish_notification_job",
    "run_notification_worker_forever",
    "send_template_email_via_console",
    "send_template_email_via_mailgun_from_env",
]
