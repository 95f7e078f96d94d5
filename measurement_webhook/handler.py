"""
Measurement Webhook Lambda Handler (Adapter Layer)

AWS Lambda function behind API Gateway that receives intdash webhooks,
summarizes completed measurements and publishes the summary to SNS
"""

from shared.config import WebhookConfig
from shared.domain.exceptions import ConfigurationError
from shared.utils import Logger, lambda_response

from measurement_webhook.request_handler import build_handler


logger = Logger()

# Initialize dependencies once per container; bad configuration aborts the cold start
try:
    config = WebhookConfig.from_env()
except ConfigurationError as e:
    logger.error("Failed to provide lambda handler", error=e)
    raise

webhook_handler = build_handler(config)


def lambda_handler(event: dict, context) -> dict:
    """
    Lambda entry point for the API Gateway proxy integration

    Input event format (abridged):
    {
        "headers": {"x-intdash-signature-256": "<base64 HMAC-SHA256>"},
        "body": "{\"resource_type\": \"measurement\", \"action\": \"completed\", ...}",
        "isBase64Encoded": false
    }

    Output format:
    {
        "statusCode": 204,
        "headers": {"Content-Type": "text/plain"},
        "body": ""
    }
    """
    try:
        return webhook_handler.handle(event)
    except Exception as e:
        logger.error("Unexpected error in measurement webhook", error=e, exc_info=True)
        return lambda_response(500, "Internal server error")
