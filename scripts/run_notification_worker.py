#!/usr/bin/env python3
"""Consume deferred notification jobs from Kafka and send them.

Every job goes through a fresh `NotificationManager` pinned to the provider
named in the job. Command-line options override the matching KAFKA_*
variables from the environment or `.env`.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_dispatch.adapters.kafka_runtime import run_notification_worker_forever  # noqa: E402
from notification_dispatch.config import load_env_file  # noqa: E402


def main() -> int:
    args = parse_args()
    load_env_file(REPO_ROOT / ".env")
    if args.topic:
        os.environ["KAFKA_TOPIC_NOTIFICATIONS"] = args.topic
    if args.group_id:
        os.environ["KAFKA_GROUP_ID"] = args.group_id
    if args.no_dlq:
        os.environ["KAFKA_DLQ_ENABLED"] = "false"
    return run_notification_worker_forever()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send queued notification jobs as they arrive."
    )
    parser.add_argument("--topic", default=None, help="Jobs topic to consume.")
    parser.add_argument("--group-id", default=None, help="Kafka consumer group.")
    parser.add_argument(
        "--no-dlq",
        action="store_true",
        help="Leave unparseable jobs uncommitted instead of moving them to the DLQ.",
    )
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
