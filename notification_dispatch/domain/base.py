"""Base contract shared by every notification message."""

from __future__ import annotations

from typing import Any, ClassVar

from ..errors import DataValidationError
from ..types import Recipient


class NotificationMessage:
    """A recipient plus whatever payload one channel needs.

    Subclasses implement `collect_errors`; `validate` turns the collected
    messages into one `DataValidationError`.
    """

    kind: ClassVar[str] = ""

    recipient: Recipient

    def collect_errors(self) -> list[str]:
        raise NotImplementedError

    def validate(self) -> None:
        errors = self.collect_errors()
        if errors:
            label = type(self).__name__
            raise DataValidationError(
                "".join(f"[{label} Validation Error]: {error}; " for error in errors)
            )

    def is_valid(self) -> bool:
        return not self.collect_errors()

    def to_payload(self) -> dict[str, Any]:
        raise NotImplementedError
