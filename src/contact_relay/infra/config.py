from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

# Lambda sets AWS_REGION automatically; local dev may rely on AWS_DEFAULT_REGION.
AWS_REGION = (
    os.environ.get("AWS_REGION")
    or os.environ.get("AWS_DEFAULT_REGION")
    or "us-east-1"
)

RESEND_API_URL = "https://api.resend.com/emails"

DEFAULT_TO = "ilt2109@columbia.edu"
DEFAULT_FROM = "onboarding@resend.dev"
DEFAULT_SUBJECT_PREFIX = "CES Contact: "

DEFAULT_ALLOWED_ORIGINS = (
    "https://iz-tecum.github.io",  # GitHub Pages
    "https://cueconsociety.vercel.app",
)

MISSING_API_KEY_ERROR = (
    "Missing RESEND_API_KEY. Add it to the function's environment variables "
    "(or set RESEND_API_KEY_SECRET_NAME to a Secrets Manager secret holding it)."
)


def _split_origins(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_ALLOWED_ORIGINS
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or DEFAULT_ALLOWED_ORIGINS


def _float_or_none(raw: Optional[str]) -> Optional[float]:
    if not raw or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        print(f"[config] ignoring bad RESEND_TIMEOUT_SECONDS={raw!r}")
        return None


@dataclass(frozen=True)
class ContactConfig:
    """Per-invocation settings for the contact form relay."""
    api_key: Optional[str] = None
    to_address: str = DEFAULT_TO
    from_address: str = DEFAULT_FROM
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    default_origin: str = DEFAULT_ALLOWED_ORIGINS[0]
    subject_prefix: str = DEFAULT_SUBJECT_PREFIX
    api_url: str = RESEND_API_URL
    timeout_seconds: Optional[float] = None  # None = platform timeout governs
    api_key_secret_name: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ContactConfig":
        env = os.environ if environ is None else environ
        origins = _split_origins(env.get("ALLOWED_ORIGINS"))
        return cls(
            api_key=(env.get("RESEND_API_KEY") or "").strip() or None,
            to_address=env.get("CONTACT_TO") or DEFAULT_TO,
            from_address=env.get("CONTACT_FROM") or DEFAULT_FROM,
            allowed_origins=origins,
            default_origin=env.get("DEFAULT_ORIGIN") or origins[0],
            subject_prefix=env.get("CONTACT_SUBJECT_PREFIX") or DEFAULT_SUBJECT_PREFIX,
            api_url=env.get("RESEND_API_URL") or RESEND_API_URL,
            timeout_seconds=_float_or_none(env.get("RESEND_TIMEOUT_SECONDS")),
            api_key_secret_name=(env.get("RESEND_API_KEY_SECRET_NAME") or "").strip() or None,
        )

    def with_api_key(self, api_key: Optional[str]) -> "ContactConfig":
        return replace(self, api_key=api_key)
