from __future__ import annotations

import json
from typing import Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .aws_clients import secrets as _secrets

_KEY_FIELDS = ("RESEND_API_KEY", "api_key")

_cache: Dict[str, str] = {}


def _key_from_secret_string(secret_string: str) -> Optional[str]:
    """
    SecretString is either the bare key or a JSON object such as
    {"RESEND_API_KEY": "re_..."}.
    """
    value = (secret_string or "").strip()
    if not value:
        return None
    if value.startswith("{"):
        try:
            data = json.loads(value)
        except (ValueError, RecursionError):
            return None
        if not isinstance(data, dict):
            return None
        for field in _KEY_FIELDS:
            if data.get(field):
                return str(data[field]).strip() or None
        return None
    return value


def load_api_key(secret_name: str, client=None) -> Optional[str]:
    """Fetch the Resend key from Secrets Manager. Successful lookups are cached per secret name; None on failure."""
    if secret_name in _cache:
        return _cache[secret_name]

    client = client or _secrets()
    try:
        resp = client.get_secret_value(SecretId=secret_name)
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "")
        print(f"[secrets] get_secret_value failed secret={secret_name} code={code}")
        return None
    except BotoCoreError as e:
        print(f"[secrets] get_secret_value failed secret={secret_name}", repr(e))
        return None

    api_key = _key_from_secret_string(resp.get("SecretString") or "")
    if api_key is None:
        print(f"[secrets] no api key found in secret={secret_name}")
        return None
    _cache[secret_name] = api_key
    return api_key


def clear_cache() -> None:
    _cache.clear()
