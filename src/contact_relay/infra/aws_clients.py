from __future__ import annotations

import boto3
from botocore.config import Config

from .config import AWS_REGION

BOTO_CONFIG = Config(
    connect_timeout=5,
    read_timeout=10,
    retries={"max_attempts": 2, "mode": "standard"},
)

_secrets = None


def secrets():
    global _secrets
    if _secrets is None:
        _secrets = boto3.client("secretsmanager", region_name=AWS_REGION, config=BOTO_CONFIG)
    return _secrets
