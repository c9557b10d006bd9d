#!/usr/bin/env python3
"""Send one email and one SMS through the manager using console senders.

Nothing leaves the machine: the mailer and the SMS gateway are replaced by
printing stand-ins, and the manager log goes to NOTIFICATION_LOG_DIR.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_dispatch import (  # noqa: E402
    ConsoleSMSClient,
    EmailMessage,
    EmailProvider,
    NotificationManager,
    SMSMessage,
    SMSProvider,
    send_template_email_via_console,
)


def main() -> int:
    args = parse_args()
    factories = {
        "email": lambda: EmailProvider(send_template_email_via_console),
        "sms": lambda: SMSProvider(sms_sender=ConsoleSMSClient()),
    }

    email_status = NotificationManager(provider_factories=factories).send(
        EmailMessage(
            recipient=args.email,
            template="welcome",
            context={"name": "Demo User"},
            subject="Welcome aboard",
        )
    )
    sms_status = NotificationManager(provider_factories=factories).send(
        SMSMessage(recipient=args.phone, message="Your code: 1234")
    )

    print("")
    print("[SUMMARY]")
    for channel, status in (("email", email_status), ("sms", sms_status)):
        success = bool(status and status["success"])
        print(f"channel={channel} success={success}")
        if status:
            print(status["message"].rstrip("\n"))
    return 0 if email_status and sms_status else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the notification manager with console senders."
    )
    parser.add_argument("--email", default="user@example.com", help="Email recipient.")
    parser.add_argument("--phone", default="79001234567", help="SMS recipient.")
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
