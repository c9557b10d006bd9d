"""SMS provider backed by the SMSPilot gateway.

`success` in the recorded status only means the gateway accepted the request
without a transport or API error. Per-message delivery state, including
gateway-side failures, is spelled out in the status `message`.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from .. import events
from ..config import SMSPilotSettings, app_debug
from ..domain.sms import SMSMessage
from ..errors import MissedConfigurationError, UnavailableForTestError
from ..types import SMSResponse
from .base import NotificationProvider
from .smspilot import SMSPilotClient

# SMSPilot reports this code when our sender is blocked by the service.
ERROR_BLOCKED_BY_SERVICE = "241"

# SMSPilot HTTP API v1.9 message statuses.
SENT_STATUSES = {
    -2: "error",
    -1: "not delivered",
    0: "new",
    1: "queued",
    2: "delivered",
    3: "deferred",
}

_LEADING_CODE_RE = re.compile(r"^\s*(-?\d+)")


class SMSProvider(NotificationProvider):
    message_class = SMSMessage

    ERROR_BLOCKED_BY_SERVICE = ERROR_BLOCKED_BY_SERVICE
    SENT_STATUSES = SENT_STATUSES

    def __init__(self, sms_sender: SMSPilotClient | None = None) -> None:
        super().__init__()
        self._sms_sender = sms_sender

    def send(self, message: SMSMessage) -> None:  # type: ignore[override]
        self.check_for_instance(message)

        if self._sms_sender is None:
            self.init_sms_sender()

        response = self._sms_sender.send([message.recipient], message.message)
        self.handle_response(response, message)

    def init_sms_sender(self) -> None:
        """Build the gateway client from configuration.

        Raises `MissedConfigurationError` when SMS is switched off or the key
        is missing, and `UnavailableForTestError` in debug mode.
        """
        settings = SMSPilotSettings.from_env()
        if not settings.active:
            raise MissedConfigurationError('Config value "smspilot.active" resolved to FALSE')

        if app_debug():
            raise UnavailableForTestError("Can not use SMS service with app.debug = true")

        if not settings.api_key:
            raise MissedConfigurationError('Empty required config value for "smspilot.apikey"')

        self._sms_sender = SMSPilotClient(
            settings.api_key,
            "utf-8",
            settings.sender,
            api_url=settings.api_url,
            timeout_seconds=settings.timeout_seconds,
        )

    def handle_response(self, response: SMSResponse, message: SMSMessage) -> None:
        error = getattr(self._sms_sender, "error", None)

        if response is False:
            self.set_status(
                {
                    "success": False,
                    "message": (
                        f"Error {error_code(error)} while sending message "
                        f"to {message.recipient}"
                    ),
                }
            )
        elif isinstance(response, list):
            now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            lines = [
                f"{now} >>> Message info | id > {item.get('id')} | phone > {item.get('phone')} "
                f"| price > {item.get('price')} | status > {item.get('status')} "
                f"| status description > {describe_status(item.get('status'))} |\n"
                for item in response
            ]
            self.set_status({"success": True, "message": "".join(lines)})
        else:
            self.set_status(
                {
                    "success": False,
                    "message": (
                        f"Unexpected SMS gateway response {type(response).__name__} "
                        f"while sending message to {message.recipient}"
                    ),
                }
            )

        if error and ERROR_BLOCKED_BY_SERVICE in str(error):
            events.dispatch(events.SMSSendErrorEvent(message.recipient, str(error)))


def describe_status(status: Any) -> str:
    try:
        return SENT_STATUSES.get(int(status), "unknown")
    except (TypeError, ValueError):
        return "unknown"


def error_code(error: Any) -> int:
    """Leading integer of a gateway error string, 0 when there is none."""
    if error is None:
        return 0
    match = _LEADING_CODE_RE.match(str(error))
    return int(match.group(1)) if match else 0
