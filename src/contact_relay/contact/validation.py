from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..email.models import ContactSubmission

FILL_OUT_ERROR = "Please fill out name, email, subject, and message."
INVALID_EMAIL_ERROR = "Please enter a valid email address."


def parse_body(body: Any) -> Dict[str, Any]:
    """Structured body as-is; text is parsed as JSON. Anything unusable becomes {}."""
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except (ValueError, RecursionError):
            return {}
    return body if isinstance(body, dict) else {}


def validate(sub: ContactSubmission) -> Optional[str]:
    """First failing rule wins. Returns the error message, or None when valid."""
    if sub.missing_fields():
        return FILL_OUT_ERROR
    if "@" not in sub.email:
        return INVALID_EMAIL_ERROR
    return None
