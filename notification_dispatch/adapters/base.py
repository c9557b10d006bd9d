"""Provider contract: deliver one message and remember how it went."""

from __future__ import annotations

from typing import ClassVar

from ..domain.base import NotificationMessage
from ..errors import WrongImplementationError
from ..types import SendStatus


class NotificationProvider:
    """Base class for channel providers.

    `send` performs the delivery and records a status dict of the form
    `{"success": bool, "message": str}` that callers read back through
    `get_status`.
    """

    message_class: ClassVar[type[NotificationMessage]] = NotificationMessage

    def __init__(self) -> None:
        self._status: SendStatus = {}

    def send(self, message: NotificationMessage) -> None:
        raise NotImplementedError

    def set_status(self, status: SendStatus) -> None:
        self._status = dict(status)

    def get_status(self) -> SendStatus:
        return dict(self._status)

    def check_for_instance(self, message: NotificationMessage) -> None:
        if not isinstance(message, self.message_class):
            raise WrongImplementationError(
                'Wrong implementation of "NotificationMessage" provided. '
                f'Waiting for "{self.message_class.__name__}", '
                f'got "{type(message).__name__}" for service "{type(self).__name__}"'
            )
