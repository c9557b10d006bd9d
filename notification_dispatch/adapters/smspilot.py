"""Minimal SMSPilot HTTP client.

Mirrors the gateway's own client contract: `send` returns a list of per-phone
status dicts on success and `False` on failure, leaving the failure text in
`error` as `"<code> <description>"`.

See SMSPilot HTTP API v1.9 (http://www.smspilot.ru/download/SMSPilotRu-HTTP-v1.9.14.pdf).
"""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Sequence

from ..config import DEFAULT_SMSPILOT_API_URL
from ..types import SMSResponse


class SMSPilotClient:
    def __init__(
        self,
        api_key: str,
        charset: str = "utf-8",
        sender: str = "",
        *,
        api_url: str = DEFAULT_SMSPILOT_API_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.charset = charset
        self.sender = sender
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self.error: str | None = None

    def send(self, phones: Sequence[str], text: str) -> SMSResponse:
        self.error = None
        fields = {
            "send": text,
            "to": ",".join(str(phone) for phone in phones),
            "apikey": self.api_key,
            "charset": self.charset,
            "format": "json",
        }
        if self.sender:
            fields["from"] = self.sender

        try:
            body = self._post(fields)
        except RuntimeError as exc:
            self.error = f"0 {exc}"
            return False

        if not isinstance(body, dict):
            self.error = "0 Unexpected SMSPilot response"
            return False

        if "error" in body:
            error = body["error"] or {}
            code = error.get("code", 0)
            description = error.get("description") or error.get("description_ru") or ""
            self.error = f"{code} {description}".strip()
            return False

        return [
            {
                "id": item.get("server_id", item.get("id")),
                "phone": item.get("phone"),
                "price": item.get("price"),
                "status": item.get("status"),
            }
            for item in body.get("send", [])
        ]

    def _post(self, fields: dict[str, str]) -> Any:
        payload = urllib.parse.urlencode(fields).encode("utf-8")
        request = urllib.request.Request(self.api_url, data=payload, method="POST")
        request.add_header("Content-Type", "application/x-www-form-urlencoded")

        try:
            with urllib.request.urlopen(request, timeout=self.timeout_seconds) as response:
                raw = response.read()
        except urllib.error.HTTPError as exc:
            details = exc.read().decode("utf-8", errors="replace")
            raise RuntimeError(f"SMSPilot request failed HTTP {exc.code}: {details[:300]}") from exc
        except urllib.error.URLError as exc:
            raise RuntimeError(f"SMSPilot request failed: {exc.reason}") from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise RuntimeError(f"SMSPilot returned invalid JSON: {exc}") from exc
