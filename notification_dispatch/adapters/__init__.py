"""Adapter layer: providers, gateway clients, queue transport."""

from .base import NotificationProvider
from .consumer_handler import handle_batch, handle_message
from .email_provider import EmailProvider
from .fake_senders import ConsoleSMSClient, send_template_email_via_console
from .kafka_runtime import publish_notification_job, run_notification_worker_forever
from .payload import parse_job_payload, serialize_job
from .real_senders import send_template_email_via_mailgun_from_env
from .sms_provider import SMSProvider
from .smspilot import SMSPilotClient

__all__ = [
    "ConsoleSMSClient",
    "EmailProvider",
    "NotificationProvider",
    "SMSPilotClient",
    "SMSProvider",
    "handle_batch",
    "handle_message",
    "parse_job_payload",
    "publish_notification_job",
    "run_notification_worker_forever",
    "send_template_email_via_console",
    "send_template_email_via_mailgun_from_env",
    "serialize_job",
]
