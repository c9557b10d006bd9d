"""Environment-variable configuration helpers.

All settings come from the process environment. Missing or malformed values
surface as `MissedConfigurationError` so the manager can log them like any
other dispatch failure.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import MissedConfigurationError

DEFAULT_SMSPILOT_API_URL = "https://smspilot.ru/api.php"
DEFAULT_LOG_DIR = "storage/logs"


def required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise MissedConfigurationError(f"Missing required environment variable: {name}")
    return value.strip()


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off", ""}:
        return False
    raise MissedConfigurationError(f"Invalid boolean value for {name}: {raw!r}")


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise MissedConfigurationError(f"Invalid number for {name}: {raw!r}") from exc


def app_debug() -> bool:
    """Debug mode is assumed unless the environment says otherwise."""
    return env_bool("APP_DEBUG", default=True)


def log_dir() -> str:
    return os.getenv("NOTIFICATION_LOG_DIR", DEFAULT_LOG_DIR)


@dataclass(frozen=True)
class SMSPilotSettings:
    active: bool
    api_key: str
    sender: str
    api_url: str
    timeout_seconds: float

    @classmethod
    def from_env(cls) -> "SMSPilotSettings":
        return cls(
            active=env_bool("SMSPILOT_ACTIVE", default=False),
            api_key=os.getenv("SMSPILOT_APIKEY", "").strip(),
            sender=os.getenv("SMSPILOT_FROM", "").strip(),
            api_url=os.getenv("SMSPILOT_API_URL", DEFAULT_SMSPILOT_API_URL).strip(),
            timeout_seconds=env_float("SMSPILOT_TIMEOUT_SECONDS", 10.0),
        )


def load_env_file(path: Path) -> None:
    """Load `KEY=value` lines into the environment without overriding it."""
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)
