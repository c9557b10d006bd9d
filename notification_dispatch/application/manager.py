"""Notification manager: pick a provider, validate, send, log.

Flow for one message:
- detect the provider from the message type unless one was set explicitly
- validate the message
- send now (`send`) or hand the job to the queue (`send_deferred`)
- log the outcome; domain errors are logged, never raised to the caller
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from ..adapters.base import NotificationProvider
from ..adapters.email_provider import EmailProvider
from ..adapters.kafka_runtime import publish_notification_job
from ..adapters.real_senders import send_template_email_via_mailgun_from_env
from ..adapters.sms_provider import SMSProvider
from ..domain.base import NotificationMessage
from ..domain.email import EmailMessage
from ..domain.sms import SMSMessage
from ..errors import (
    DataValidationError,
    NotificationError,
    UnavailableForTestError,
    WrongImplementationError,
)
from ..logs import get_notification_logger, set_log_file
from ..types import EnqueueFn, Recipient, SendStatus

ProviderFactory = Callable[[], NotificationProvider]

PROVIDER_SHORTNAMES: dict[str, type[NotificationProvider]] = {
    "email": EmailProvider,
    "sms": SMSProvider,
}

MESSAGE_PROVIDERS: dict[type[NotificationMessage], str] = {
    EmailMessage: "email",
    SMSMessage: "sms",
}


def default_provider_factories() -> dict[str, ProviderFactory]:
    return {
        "email": lambda: EmailProvider(send_template_email_via_mailgun_from_env),
        "sms": SMSProvider,
    }


class NotificationManager:
    PROVIDER_SHORTNAMES = PROVIDER_SHORTNAMES

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        provider_factories: Mapping[str, ProviderFactory] | None = None,
        enqueue: EnqueueFn | None = None,
    ) -> None:
        self._logger = logger or get_notification_logger()
        self._provider_factories = dict(provider_factories or default_provider_factories())
        self._enqueue = enqueue or publish_notification_job
        self._provider: NotificationProvider | None = None

    def set_log_file(self, log_file: str) -> None:
        set_log_file(self._logger, log_file)

    def set_provider(self, provider: NotificationProvider) -> "NotificationManager":
        self._provider = provider
        return self

    def set_provider_by_shortname(self, shortname: str) -> "NotificationManager":
        shortname = shortname.strip().lower()
        factory = self._provider_factories.get(shortname)
        if shortname not in PROVIDER_SHORTNAMES or factory is None:
            raise DataValidationError(
                f'Unknown provider shortname "{shortname}" for service {type(self).__name__}'
            )
        return self.set_provider(factory())

    def get_provider(self) -> NotificationProvider | None:
        return self._provider

    def detect_provider(self, message: NotificationMessage) -> None:
        shortname = MESSAGE_PROVIDERS.get(type(message))
        if shortname is None:
            raise WrongImplementationError(
                f"Service {type(self).__name__} has no registered providers "
                f"for data object {type(message).__name__}"
            )
        self.set_provider_by_shortname(shortname)

    def send(self, message: NotificationMessage) -> SendStatus | None:
        """Send right away and return the provider status.

        Returns None when a domain error was logged instead.
        """
        if self._provider is None:
            self.detect_provider(message)

        try:
            message.validate()
            self._logger.info(
                "Starting to send message, provider: %s, recipient: %s",
                self._provider_name(),
                stringify_recipient(message.recipient),
            )

            self._provider.send(message)
            status = self._provider.get_status()

            if status.get("success") is False:
                self._logger.error("Sending status: FAILED. Message: %s", status.get("message"))
            else:
                self._logger.info("Sending status: OK")
            return status
        except UnavailableForTestError as exc:
            self._logger.warning("[%s]: %s", type(exc).__name__, exc)
        except NotificationError as exc:
            self._logger.error("[%s]: %s", type(exc).__name__, exc)
        return None

    def send_deferred(self, message: NotificationMessage) -> bool:
        """Validate now, deliver later through the queue."""
        if self._provider is None:
            self.detect_provider(message)

        try:
            message.validate()
            provider_name = self._provider_name()
            self._logger.info(
                "Pushing message to queue, provider: %s, recipient: %s",
                provider_name,
                stringify_recipient(message.recipient),
            )

            self._enqueue(message, provider=provider_name)
        except NotificationError as exc:
            self._logger.error("[%s]: %s", type(exc).__name__, exc)
            return False
        return True

    def _provider_name(self) -> str:
        for shortname, provider_class in PROVIDER_SHORTNAMES.items():
            if isinstance(self._provider, provider_class):
                return shortname
        return type(self._provider).__name__


def stringify_recipient(recipient: Recipient) -> str:
    """Log-friendly recipient: user-like objects render as `User ID <id>`."""
    if not isinstance(recipient, (str, int)) and hasattr(recipient, "id"):
        return f"User ID {recipient.id}"
    return str(recipient)
