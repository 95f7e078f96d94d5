import os
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from shared.domain.exceptions import ConfigurationError
from shared.infrastructure.secrets import load_webhook_secret


DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class WebhookConfig:
    """Process-wide settings, built once per Lambda container"""

    sha256_key: bytes = field(repr=False)
    sns_topic_arn: str
    measurement_api_url: Optional[str] = None
    measurement_api_token: Optional[str] = field(default=None, repr=False)
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    def __post_init__(self):
        if not self.sha256_key:
            raise ConfigurationError("webhook signing key is empty")
        if not self.sns_topic_arn:
            raise ConfigurationError("SNS_TOPIC_ARN is not set")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        secret_loader: Callable[..., bytes] = load_webhook_secret,
    ) -> "WebhookConfig":
        """
        Build the configuration from environment variables.

        Raises:
            ConfigurationError: a required setting is missing or invalid
        """
        env = os.environ if environ is None else environ

        # Checked before the secret so a missing topic fails fast without AWS calls
        sns_topic_arn = env.get("SNS_TOPIC_ARN", "")
        if not sns_topic_arn:
            raise ConfigurationError("SNS_TOPIC_ARN is not set")

        raw_timeout = env.get("MEASUREMENT_API_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT_SECONDS
        except ValueError:
            raise ConfigurationError(
                f"MEASUREMENT_API_TIMEOUT must be a number, got {raw_timeout!r}"
            )

        sha256_key = secret_loader(
            secret_id=env.get("WEBHOOK_SECRET_ID"),
            secret_file=env.get("WEBHOOK_SECRET_FILE"),
        )

        return cls(
            sha256_key=sha256_key,
            sns_topic_arn=sns_topic_arn,
            measurement_api_url=env.get("MEASUREMENT_API_URL") or None,
            measurement_api_token=env.get("MEASUREMENT_API_TOKEN") or None,
            request_timeout_seconds=timeout,
        )
