from __future__ import annotations

import json
import logging
import os
import tempfile
import unittest
from dataclasses import dataclass
from typing import Any
from unittest import mock

from notification_dispatch.adapters.base import NotificationProvider
from notification_dispatch.adapters.email_provider import EmailProvider
from notification_dispatch.adapters.payload import serialize_job
from notification_dispatch.adapters.sms_provider import SMSProvider
from notification_dispatch.application.manager import NotificationManager, stringify_recipient
from notification_dispatch.domain import EmailMessage, NotificationMessage, SMSMessage
from notification_dispatch.errors import (
    DataValidationError,
    MissedDependencyError,
    UnavailableForTestError,
    WrongImplementationError,
)


class FakeSMSClient:
    def __init__(self, response: Any, error: str | None = None) -> None:
        self.response = response
        self.error = error

    def send(self, phones: list[str], text: str) -> Any:
        return self.response


class RaisingSMSProvider(SMSProvider):
    def init_sms_sender(self) -> None:
        raise UnavailableForTestError("Can not use SMS service with app.debug = true")


@dataclass
class PushMessage(NotificationMessage):
    recipient: Any = None

    def collect_errors(self) -> list[str]:
        return []


@dataclass
class User:
    id: int


def make_logger() -> logging.Logger:
    logger = logging.getLogger("tests.notification_manager")
    logger.handlers.clear()
    logger.setLevel(logging.INFO)
    return logger


def make_manager(*, mailer: Any = None, sms_client: Any = None, enqueue: Any = None) -> NotificationManager:
    factories = {
        "email": lambda: EmailProvider(mailer or mock.Mock()),
        "sms": lambda: SMSProvider(sms_sender=sms_client or FakeSMSClient([])),
    }
    return NotificationManager(make_logger(), provider_factories=factories, enqueue=enqueue)


def email_message(**overrides: Any) -> EmailMessage:
    fields: dict[str, Any] = {
        "recipient": "user@example.com",
        "template": "welcome",
        "context": {"name": "Ann"},
    }
    fields.update(overrides)
    return EmailMessage(**fields)


class ProviderSelectionTests(unittest.TestCase):
    def test_provider_is_detected_from_message_type(self) -> None:
        manager = make_manager()

        manager.detect_provider(email_message())
        self.assertIsInstance(manager.get_provider(), EmailProvider)

        manager.detect_provider(SMSMessage(recipient="79001234567", message="hi"))
        self.assertIsInstance(manager.get_provider(), SMSProvider)

    def test_unknown_message_type_has_no_provider(self) -> None:
        manager = make_manager()

        with self.assertRaises(WrongImplementationError) as exc:
            manager.send(PushMessage(recipient="x"))

        self.assertIn("no registered providers for data object PushMessage", str(exc.exception))

    def test_shortname_is_normalized(self) -> None:
        manager = make_manager()

        manager.set_provider_by_shortname("  SMS ")

        self.assertIsInstance(manager.get_provider(), SMSProvider)

    def test_unknown_shortname_is_rejected(self) -> None:
        manager = make_manager()

        with self.assertRaises(DataValidationError) as exc:
            manager.set_provider_by_shortname("push")

        self.assertIn('Unknown provider shortname "push"', str(exc.exception))

    def test_explicit_provider_is_kept(self) -> None:
        manager = make_manager()
        provider = SMSProvider(sms_sender=FakeSMSClient([]))

        manager.set_provider(provider)
        manager.send(SMSMessage(recipient="79001234567", message="hi"))

        self.assertIs(manager.get_provider(), provider)


class SendTests(unittest.TestCase):
    def test_successful_email_send_logs_and_returns_status(self) -> None:
        mailer = mock.Mock()
        manager = make_manager(mailer=mailer)

        with self.assertLogs("tests.notification_manager", level="INFO") as logs:
            status = manager.send(email_message())

        self.assertEqual(status, {"success": True, "message": "Message sent successfully"})
        mailer.assert_called_once()
        self.assertIn(
            "Starting to send message, provider: email, recipient: user@example.com",
            logs.output[0],
        )
        self.assertEqual(logs.output[1], "INFO:tests.notification_manager:Sending status: OK")

    def test_failed_sms_status_is_logged_as_error(self) -> None:
        manager = make_manager(sms_client=FakeSMSClient(False, error="15 Invalid phone"))

        with self.assertLogs("tests.notification_manager", level="INFO") as logs:
            status = manager.send(SMSMessage(recipient="123", message="hi"))

        self.assertEqual(status, {"success": False, "message": "Error 15 while sending message to 123"})
        self.assertTrue(logs.output[-1].startswith("ERROR:"))
        self.assertIn("Sending status: FAILED. Message: Error 15", logs.output[-1])

    def test_validation_error_is_logged_not_raised(self) -> None:
        mailer = mock.Mock()
        manager = make_manager(mailer=mailer)

        with self.assertLogs("tests.notification_manager", level="ERROR") as logs:
            status = manager.send(email_message(template=""))

        self.assertIsNone(status)
        self.assertIn("[DataValidationError]: [EmailMessage Validation Error]", logs.output[0])
        mailer.assert_not_called()

    def test_unavailable_for_test_is_logged_as_warning(self) -> None:
        manager = make_manager()
        manager.set_provider(RaisingSMSProvider())

        with self.assertLogs("tests.notification_manager", level="INFO") as logs:
            status = manager.send(SMSMessage(recipient="79001234567", message="hi"))

        self.assertIsNone(status)
        self.assertEqual(
            logs.output[-1],
            "WARNING:tests.notification_manager:[UnavailableForTestError]: "
            "Can not use SMS service with app.debug = true",
        )

    def test_wrong_message_for_explicit_provider_is_logged(self) -> None:
        manager = make_manager()
        manager.set_provider_by_shortname("sms")

        with self.assertLogs("tests.notification_manager", level="ERROR") as logs:
            status = manager.send(email_message())

        self.assertIsNone(status)
        self.assertIn("[WrongImplementationError]", logs.output[0])

    def test_mailer_failures_are_not_swallowed(self) -> None:
        manager = make_manager(mailer=mock.Mock(side_effect=RuntimeError("smtp down")))

        with self.assertRaises(RuntimeError):
            manager.send(email_message())


class SendDeferredTests(unittest.TestCase):
    def test_valid_message_is_enqueued_with_provider_name(self) -> None:
        enqueue = mock.Mock()
        manager = make_manager(enqueue=enqueue)
        message = SMSMessage(recipient="79001234567", message="hi")

        with self.assertLogs("tests.notification_manager", level="INFO") as logs:
            queued = manager.send_deferred(message)

        self.assertTrue(queued)
        enqueue.assert_called_once_with(message, provider="sms")
        self.assertIn(
            "Pushing message to queue, provider: sms, recipient: 79001234567",
            logs.output[0],
        )

    def test_invalid_message_is_not_enqueued(self) -> None:
        enqueue = mock.Mock()
        manager = make_manager(enqueue=enqueue)

        with self.assertLogs("tests.notification_manager", level="ERROR"):
            queued = manager.send_deferred(email_message(recipient="broken"))

        self.assertFalse(queued)
        enqueue.assert_not_called()

    def test_user_object_sms_recipient_is_logged_not_queued(self) -> None:
        published: list[bytes] = []

        def enqueue(message: NotificationMessage, *, provider: str) -> None:
            published.append(json.dumps(serialize_job(message, provider=provider)).encode("utf-8"))

        manager = make_manager(enqueue=enqueue)

        with self.assertLogs("tests.notification_manager", level="ERROR") as logs:
            queued = manager.send_deferred(SMSMessage(recipient=User(id=7), message="hi"))

        self.assertFalse(queued)
        self.assertEqual(published, [])
        self.assertIn("The phone must be a string or a number.", logs.output[0])

    def test_queue_errors_are_logged(self) -> None:
        enqueue = mock.Mock(side_effect=MissedDependencyError("kafka-python missing"))
        manager = make_manager(enqueue=enqueue)

        with self.assertLogs("tests.notification_manager", level="ERROR") as logs:
            queued = manager.send_deferred(email_message())

        self.assertFalse(queued)
        self.assertIn("[MissedDependencyError]: kafka-python missing", logs.output[0])


class LoggingSetupTests(unittest.TestCase):
    def test_default_logger_writes_dated_file_under_log_dir(self) -> None:
        with tempfile.TemporaryDirectory() as log_dir:
            with mock.patch.dict(os.environ, {"NOTIFICATION_LOG_DIR": log_dir}):
                manager = NotificationManager(enqueue=mock.Mock())
                logger = logging.getLogger("notification_dispatch.manager")
                try:
                    file_handlers = [
                        handler for handler in logger.handlers
                        if isinstance(handler, logging.FileHandler)
                    ]
                    self.assertEqual(len(file_handlers), 1)
                    self.assertTrue(file_handlers[0].baseFilename.startswith(log_dir))
                    self.assertRegex(
                        file_handlers[0].baseFilename,
                        r"service/notification_\d{4}-\d{2}-\d{2}\.log$",
                    )

                    manager.set_log_file("custom/notification.log")
                    file_handlers = [
                        handler for handler in logger.handlers
                        if isinstance(handler, logging.FileHandler)
                    ]
                    self.assertEqual(len(file_handlers), 1)
                    self.assertTrue(file_handlers[0].baseFilename.endswith("custom/notification.log"))
                finally:
                    for handler in list(logger.handlers):
                        logger.removeHandler(handler)
                        handler.close()


class StringifyRecipientTests(unittest.TestCase):
    def test_user_objects_render_by_id(self) -> None:
        self.assertEqual(stringify_recipient(User(id=7)), "User ID 7")

    def test_plain_values_render_as_text(self) -> None:
        self.assertEqual(stringify_recipient("user@example.com"), "user@example.com")
        self.assertEqual(stringify_recipient(79001234567), "79001234567")


class ProviderBaseTests(unittest.TestCase):
    def test_status_is_copied_on_read(self) -> None:
        provider = NotificationProvider()
        provider.set_status({"success": True, "message": "ok"})

        status = provider.get_status()
        status["success"] = False

        self.assertTrue(provider.get_status()["success"])


if __name__ == "__main__":
    unittest.main()
