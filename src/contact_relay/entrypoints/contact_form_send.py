from __future__ import annotations

import os
from typing import Mapping, Optional

from ..contact.handler import ContactRequestHandler, EmailSender
from ..http.events import request_from_event
from ..infra.config import ContactConfig
from ..infra.secrets import load_api_key


def load_config(environ: Optional[Mapping[str, str]] = None) -> ContactConfig:
    """Read settings at call time; fall back to Secrets Manager for the API key."""
    cfg = ContactConfig.from_env(os.environ if environ is None else environ)
    if not cfg.api_key and cfg.api_key_secret_name:
        cfg = cfg.with_api_key(load_api_key(cfg.api_key_secret_name))
    return cfg


def handle_event(
    event: dict,
    *,
    config: Optional[ContactConfig] = None,
    sender: Optional[EmailSender] = None,
) -> dict:
    request = request_from_event(event)
    handler = ContactRequestHandler(config or load_config(), sender=sender)
    response = handler.handle(request)
    print(f"[contact] method={request.method} status={response.status}")
    return response.to_lambda()


def lambda_handler(event, context):
    return handle_event(event)
