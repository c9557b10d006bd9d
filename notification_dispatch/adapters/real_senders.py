"""Mailgun template mailer used by the email provider.

The mail service owns rendering: the message names a stored Mailgun template
and ships the context as template variables.
"""

from __future__ import annotations

import base64
import json
import os
import urllib.error
import urllib.parse
import urllib.request

from ..config import env_float, required_env
from ..types import Context


def send_template_email_via_mailgun_from_env(
    *,
    to_email: str,
    template: str,
    context: Context,
    subject: str | None = None,
) -> None:
    """Send a templated email via Mailgun REST API using environment config."""
    api_key = required_env("MAILGUN_API_KEY")
    domain = required_env("MAILGUN_DOMAIN")
    from_email = required_env("MAILGUN_FROM_EMAIL")
    base_url = os.getenv("MAILGUN_API_BASE_URL", "https://api.mailgun.net").rstrip("/")
    timeout_seconds = env_float("MAILGUN_TIMEOUT_SECONDS", 10.0)

    encoded_domain = urllib.parse.quote(domain, safe="")
    endpoint = f"{base_url}/v3/{encoded_domain}/messages"
    fields = {
        "from": from_email,
        "to": to_email,
        "template": template,
        "t:variables": json.dumps(dict(context), separators=(",", ":"), default=str),
    }
    if subject:
        fields["subject"] = subject
    payload = urllib.parse.urlencode(fields).encode("utf-8")

    request = urllib.request.Request(endpoint, data=payload, method="POST")
    request.add_header("Authorization", _basic_auth_header("api", api_key))
    request.add_header("Content-Type", "application/x-www-form-urlencoded")

    try:
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = int(response.getcode())
            if status < 200 or status >= 300:
                raise RuntimeError(f"Mailgun email send failed with status {status}")
            response.read()
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace")
        raise RuntimeError(
            f"Mailgun email send failed HTTP {exc.code}: {details[:300]}"
        ) from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"Mailgun email send failed: {exc.reason}") from exc


def _basic_auth_header(username: str, password: str) -> str:
    token = f"{username}:{password}".encode("utf-8")
    encoded = base64.b64encode(token).decode("ascii")
    return f"Basic {encoded}"
