from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import urllib3

from ..infra.config import RESEND_API_URL

http = urllib3.PoolManager()

REJECTED_FALLBACK = "Resend rejected the request"


@dataclass
class ProviderResponse:
    status: int
    data: Any = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def message_id(self) -> Optional[str]:
        if isinstance(self.data, dict):
            return self.data.get("id")
        return None

    def error_message(self) -> Any:
        """Provider `message`, then `error` (passed through as given), then a generic fallback."""
        if isinstance(self.data, dict):
            for key in ("message", "error"):
                value = self.data.get(key)
                if value:
                    return value
        return REJECTED_FALLBACK


def _decode_json(raw: bytes) -> Any:
    try:
        return json.loads(raw.decode("utf-8"))
    except (ValueError, UnicodeDecodeError, RecursionError):
        return {}


class ResendClient:
    """Single POST to the Resend emails endpoint. No retries."""

    def __init__(
        self,
        api_key: str,
        *,
        api_url: str = RESEND_API_URL,
        timeout_seconds: Optional[float] = None,
        pool: Optional[urllib3.PoolManager] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self.pool = pool or http

    def send(self, payload: Dict[str, Any]) -> ProviderResponse:
        """
        Raises urllib3.exceptions.HTTPError on transport failure.
        Non-2xx statuses are returned, not raised.
        """
        kwargs: Dict[str, Any] = {}
        if self.timeout_seconds is not None:
            kwargs["timeout"] = urllib3.Timeout(total=self.timeout_seconds)

        resp = self.pool.request(
            "POST",
            self.api_url,
            body=json.dumps(payload).encode("utf-8"),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            retries=False,
            **kwargs,
        )
        result = ProviderResponse(status=resp.status, data=_decode_json(resp.data))
        print(f"[resend] status={result.status} id={result.message_id}")
        return result
