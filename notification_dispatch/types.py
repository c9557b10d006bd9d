"""Shared type aliases for the notification dispatch package."""

from __future__ import annotations

from typing import Any, Callable, Mapping

Recipient = Any
Context = Mapping[str, Any]
SendStatus = dict[str, Any]
JobPayload = dict[str, Any]
SMSResponse = list[dict[str, Any]] | bool

MailerFn = Callable[..., None]
EnqueueFn = Callable[..., Any]
