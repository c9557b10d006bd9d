"""Console stand-ins for the mail service and the SMS gateway.

Used by local demos and smoke runs: they print what would be sent and report
success the same way the real adapters do.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Sequence

from ..types import Context


def send_template_email_via_console(
    *,
    to_email: str,
    template: str,
    context: Context,
    subject: str | None = None,
) -> None:
    print("[EMAIL]")
    print(f"to={to_email}")
    print(f"template={template}")
    print(f"subject={subject}")
    print(f"context={dict(context)}")


class ConsoleSMSClient:
    """Prints messages and answers like SMSPilot with status 0 (new)."""

    def __init__(self) -> None:
        self.error: str | None = None
        self._ids = count(1)

    def send(self, phones: Sequence[str], text: str) -> list[dict[str, Any]]:
        print("[SMS]")
        print(f"to={','.join(str(phone) for phone in phones)}")
        print(f"message={text}")
        return [
            {"id": next(self._ids), "phone": phone, "price": 0, "status": 0}
            for phone in phones
        ]
