from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class InboundRequest:
    method: str
    headers: Dict[str, str] = field(default_factory=dict)  # lower-cased names
    body: Any = None  # str, bytes, dict or None

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    @property
    def origin(self) -> Optional[str]:
        return self.header("origin")


@dataclass
class HttpResponse:
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None  # None = empty body

    def to_lambda(self) -> dict:
        headers = dict(self.headers)
        if self.body is None:
            body = ""
        else:
            headers["Content-Type"] = "application/json"
            body = json.dumps(self.body)
        return {"statusCode": self.status, "headers": headers, "body": body}


def _method(event: dict) -> str:
    # HTTP API v2 / Function URL
    m = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    if m:
        return m.upper()
    # REST API fallback
    return (event.get("httpMethod") or "").upper()


def _headers(event: dict) -> Dict[str, str]:
    h = event.get("headers") or {}
    return {str(k).lower(): v for k, v in h.items() if v is not None}


def _body(event: dict) -> Any:
    body = event.get("body")
    if isinstance(body, str) and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body).decode("utf-8", errors="replace")
        except (binascii.Error, ValueError):
            return ""
    return body


def request_from_event(event: dict) -> InboundRequest:
    event = event or {}
    return InboundRequest(method=_method(event), headers=_headers(event), body=_body(event))
