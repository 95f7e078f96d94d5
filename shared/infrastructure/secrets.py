import os
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shared.domain.exceptions import ConfigurationError
from shared.utils import Logger

logger = Logger()

DEFAULT_SECRET_FILE = os.path.normpath(os.path.join(
    os.path.dirname(__file__), "..", "..", "measurement_webhook", "intdash-webhook-secret"
))


def load_secret_from_secrets_manager(secret_id: str, client=None) -> bytes:
    """
    Read the webhook key from AWS Secrets Manager.
    Accepts either a SecretString or a SecretBinary secret.
    """
    client = client or boto3.client("secretsmanager")
    try:
        response = client.get_secret_value(SecretId=secret_id)
    except (ClientError, BotoCoreError) as e:
        raise ConfigurationError(f"read secret {secret_id}: {e}") from e

    if response.get("SecretString"):
        secret = response["SecretString"].encode("utf-8")
    else:
        secret = response.get("SecretBinary") or b""

    if not secret:
        raise ConfigurationError(f"secret {secret_id} is empty")

    logger.info("Loaded webhook secret from Secrets Manager", secret_id=secret_id)
    return secret


def load_secret_from_file(path: str) -> bytes:
    """Read the webhook key bundled with the deployment package"""
    try:
        with open(path, "rb") as f:
            secret = f.read()
    except OSError as e:
        raise ConfigurationError(f"read secret file {path}: {e}") from e

    if not secret:
        raise ConfigurationError(f"secret file {path} is empty")
    return secret


def load_webhook_secret(
    secret_id: Optional[str] = None,
    secret_file: Optional[str] = None,
    client=None,
) -> bytes:
    """Secrets Manager wins when a secret id is configured, else the bundled file"""
    if secret_id:
        return load_secret_from_secrets_manager(secret_id, client=client)
    return load_secret_from_file(secret_file or DEFAULT_SECRET_FILE)
