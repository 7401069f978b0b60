from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .sanitize import escape_html, escape_multiline

REQUIRED_FIELDS = ("name", "email", "subject", "message")
HONEYPOT_FIELD = "company"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class ContactSubmission:
    """One contact form post. Values are kept as submitted; trimming is only used for checks."""
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""
    company: str = ""  # honeypot

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> "ContactSubmission":
        return cls(
            name=_as_text(body.get("name")),
            email=_as_text(body.get("email")),
            subject=_as_text(body.get("subject")),
            message=_as_text(body.get("message")),
            company=_as_text(body.get(HONEYPOT_FIELD)),
        )

    def missing_fields(self) -> List[str]:
        return [f for f in REQUIRED_FIELDS if not getattr(self, f).strip()]

    def is_bot(self) -> bool:
        return bool(self.company.strip())


@dataclass(frozen=True)
class OutboundEmail:
    from_address: str
    to: List[str]
    reply_to: str
    subject: str
    text: str
    html: str

    def to_payload(self) -> Dict[str, Any]:
        """Resend /emails request body."""
        return {
            "from": self.from_address,
            "to": list(self.to),
            "reply_to": self.reply_to,
            "subject": self.subject,
            "text": self.text,
            "html": self.html,
        }


def render_text(sub: ContactSubmission) -> str:
    # Plain text part is not interpreted as markup, so it is left unescaped.
    return f"Name: {sub.name}\nEmail: {sub.email}\n\n{sub.message}"


def render_html(sub: ContactSubmission) -> str:
    return (
        '<div style="font-family:Arial,sans-serif;line-height:1.5">'
        "<h2>New CES Contact Form Message</h2>"
        f"<p><b>Name:</b> {escape_html(sub.name)}</p>"
        f"<p><b>Email:</b> {escape_html(sub.email)}</p>"
        f"<p><b>Subject:</b> {escape_html(sub.subject)}</p>"
        "<hr/>"
        f"<p>{escape_multiline(sub.message)}</p>"
        "</div>"
    )


def build_outbound_email(
    sub: ContactSubmission,
    *,
    from_address: str,
    to_address: str,
    subject_prefix: str,
) -> OutboundEmail:
    return OutboundEmail(
        from_address=from_address,
        to=[to_address],
        reply_to=sub.email,
        subject=f"{subject_prefix}{sub.subject}",
        text=render_text(sub),
        html=render_html(sub),
    )
