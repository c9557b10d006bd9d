"""Queue job payload mapping.

A deferred send travels through the queue as a JSON object:

    {"job_id": "...", "provider": "email", "message": {"kind": "email", ...}}

`serialize_job` builds it from a message; `parse_job_payload` turns a
consumed payload back into the provider short name and message object. It
validates shape only; message validation stays with the manager.
"""

from __future__ import annotations

import uuid
from typing import Any, Mapping

from ..domain.base import NotificationMessage
from ..domain.email import EmailMessage
from ..domain.sms import SMSMessage
from ..types import JobPayload

def serialize_job(
    message: NotificationMessage,
    *,
    provider: str,
    job_id: str | None = None,
) -> JobPayload:
    return {
        "job_id": job_id or str(uuid.uuid4()),
        "provider": provider,
        "message": message.to_payload(),
    }


def parse_job_payload(payload: Mapping[str, Any]) -> tuple[str, NotificationMessage]:
    """Return `(provider_shortname, message)` for one queued job."""
    provider = _as_required_str(payload.get("provider"), "provider")
    raw_message = payload.get("message")
    if not isinstance(raw_message, Mapping):
        raise ValueError("Missing required field: message")

    kind = _as_required_str(raw_message.get("kind"), "message.kind")
    if kind == EmailMessage.kind:
        context = raw_message.get("context") or {}
        if not isinstance(context, Mapping):
            raise ValueError("message.context must be an object")
        message: NotificationMessage = EmailMessage(
            recipient=raw_message.get("recipient"),
            template=str(raw_message.get("template") or ""),
            context=dict(context),
            subject=_as_optional_str(raw_message.get("subject")),
        )
    elif kind == SMSMessage.kind:
        message = SMSMessage(
            recipient=raw_message.get("recipient"),
            message=str(raw_message.get("message") or ""),
        )
    else:
        raise ValueError(f"Unsupported message kind: {kind}")

    return provider, message


def _as_required_str(value: Any, field_name: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"Missing required field: {field_name}")
    return text


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
