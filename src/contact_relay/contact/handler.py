from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from ..email.models import ContactSubmission, build_outbound_email
from ..email.resend_client import ProviderResponse, ResendClient
from ..http.cors import ALLOWED_METHODS, cors_headers, is_rejected_origin
from ..http.events import HttpResponse, InboundRequest
from ..infra.config import MISSING_API_KEY_ERROR, ContactConfig
from .validation import parse_body, validate


class EmailSender(Protocol):
    def send(self, payload: Dict[str, Any]) -> ProviderResponse: ...


class ContactRequestHandler:
    """
    Validates a contact form post and relays it to Resend.

    Flow per request:
      CORS headers -> OPTIONS preflight -> origin check -> method check ->
      credential check -> body parse -> honeypot -> validation -> send

    Every branch returns an HttpResponse; nothing is raised to the caller.
    """

    def __init__(self, config: ContactConfig, sender: Optional[EmailSender] = None):
        self.config = config
        self._sender = sender

    def sender(self) -> EmailSender:
        if self._sender is None:
            self._sender = ResendClient(
                self.config.api_key or "",
                api_url=self.config.api_url,
                timeout_seconds=self.config.timeout_seconds,
            )
        return self._sender

    def handle(self, request: InboundRequest) -> HttpResponse:
        cfg = self.config
        origin = request.origin
        headers = cors_headers(origin, cfg.allowed_origins, cfg.default_origin)

        def respond(status: int, body: Any = None) -> HttpResponse:
            return HttpResponse(status=status, headers=headers, body=body)

        if request.method == "OPTIONS":
            return respond(200)

        if is_rejected_origin(origin, cfg.allowed_origins):
            print(f"[contact] rejected origin={origin}")
            return respond(403, {"error": "Origin not allowed", "origin": origin})

        if request.method != "POST":
            headers["Allow"] = ALLOWED_METHODS
            return respond(405, {"error": "Method not allowed"})

        if not cfg.api_key:
            print("[contact] RESEND_API_KEY not configured")
            return respond(500, {"error": MISSING_API_KEY_ERROR})

        sub = ContactSubmission.from_body(parse_body(request.body))

        # Bots get the same answer as a real success.
        if sub.is_bot():
            print("[contact] honeypot filled; skipping send")
            return respond(200, {"ok": True})

        error = validate(sub)
        if error:
            return respond(400, {"error": error})

        outbound = build_outbound_email(
            sub,
            from_address=cfg.from_address,
            to_address=cfg.to_address,
            subject_prefix=cfg.subject_prefix,
        )

        try:
            result = self.sender().send(outbound.to_payload())
        except Exception as e:
            print("[error] send failed", repr(e))
            return respond(500, {"error": str(e) or "Server error"})

        if not result.ok:
            return respond(result.status, {"error": result.error_message(), "details": result.data})

        body: Dict[str, Any] = {"ok": True}
        if result.message_id is not None:
            body["id"] = result.message_id
        return respond(200, body)
