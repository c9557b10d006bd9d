#!/usr/bin/env python3
"""Queue one SMS or email notification through `send_deferred` for local testing."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_dispatch import EmailMessage, NotificationManager, SMSMessage  # noqa: E402
from notification_dispatch.config import load_env_file  # noqa: E402


def main() -> int:
    load_env_file(REPO_ROOT / ".env")
    args = parse_args()

    if args.channel == "email":
        message = EmailMessage(
            recipient=args.to,
            template=args.template,
            context={"name": "Local Tester"},
            subject=args.subject,
        )
    else:
        message = SMSMessage(recipient=args.to, message=args.text)

    queued = NotificationManager().send_deferred(message)
    print(f"[QUEUED] channel={args.channel} to={args.to} queued={queued}")
    return 0 if queued else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Publish one deferred notification job to Kafka."
    )
    parser.add_argument("channel", choices=("email", "sms"))
    parser.add_argument("--to", required=True, help="Email address or phone number.")
    parser.add_argument("--template", default="welcome", help="Email template id.")
    parser.add_argument("--subject", default=None, help="Optional email subject.")
    parser.add_argument("--text", default="Test message", help="SMS text.")
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
