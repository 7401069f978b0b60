from __future__ import annotations

_HTML_ENTITIES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(s) -> str:
    """Entity-escape & < > " ' for embedding in an HTML email body."""
    out = "" if s is None else str(s)
    for raw, entity in _HTML_ENTITIES:
        out = out.replace(raw, entity)
    return out


def newlines_to_br(s: str) -> str:
    return s.replace("\n", "<br/>")


def escape_multiline(s) -> str:
    """Escape first, then convert line breaks, so the inserted tags survive."""
    return newlines_to_br(escape_html(s))
