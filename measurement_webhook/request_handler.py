"""
Measurement webhook request pipeline

Verifies, parses and summarizes one API Gateway proxy request and maps the
outcome to a response. Has no import-time side effects; the Lambda module
wires it up.
"""

from typing import Any, Dict, Optional

from shared.config import WebhookConfig
from shared.domain.exceptions import (
    EmptySeriesError,
    FetchFailedError,
    MalformedPayloadError,
    PublishFailedError,
    SignatureError,
    UnsupportedEventError
)
from shared.infrastructure.measurement_repositories import (
    HttpMeasurementRepository,
    SyntheticMeasurementRepository
)
from shared.infrastructure.notifications import SNSNotificationPublisher
from shared.utils import Logger, decode_body, get_header, lambda_response

from measurement_webhook.payload import parse_webhook_event
from measurement_webhook.service import MeasurementSummaryService, NotificationService
from measurement_webhook.signature import SIGNATURE_HEADER, verify_signature


logger = Logger()


class WebhookHandler:
    """
    Maps one API Gateway proxy request to one response.
    Every failure ends the pipeline with a generic body; details are only logged.
    """

    def __init__(self, config: WebhookConfig, summary_service: MeasurementSummaryService):
        self.config = config
        self.summary_service = summary_service

    def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(
            "Got request",
            request_id=(event.get("requestContext") or {}).get("requestId"),
            path=event.get("path") or event.get("rawPath")
        )

        try:
            body = decode_body(event)
        except ValueError as e:
            logger.error("Got undecodable request body", error=e)
            return lambda_response(400, "Invalid request body")

        signature = get_header(event.get("headers"), SIGNATURE_HEADER)
        try:
            verify_signature(body, self.config.sha256_key, signature)
        except SignatureError as e:
            logger.error("Got invalid signature", error=e, error_type=type(e).__name__)
            return lambda_response(400, "Invalid signature")

        try:
            webhook_event = parse_webhook_event(body)
        except MalformedPayloadError as e:
            logger.error("Got invalid request body", error=e)
            return lambda_response(400, "Invalid request body")

        try:
            stats = self.summary_service.summarize(webhook_event)
        except UnsupportedEventError as e:
            logger.info(
                "Got unsupported resource type or action",
                resource_type=e.resource_type,
                action=e.action
            )
            return lambda_response(422, "Unsupported resource type or action")
        except (FetchFailedError, EmptySeriesError) as e:
            logger.error(
                "Failed to fetch data points",
                measurement_uuid=webhook_event.measurement_uuid,
                error=e
            )
            return lambda_response(500, "Failed to fetch data points")

        try:
            self.summary_service.publish_summary(stats)
        except PublishFailedError as e:
            logger.error("Failed to publish SNS", error=e)
            return lambda_response(500, "Failed to publish SNS")

        return lambda_response(204, "")


def build_handler(config: Optional[WebhookConfig] = None) -> WebhookHandler:
    """Wire production adapters around the configuration"""
    config = config or WebhookConfig.from_env()

    if config.measurement_api_url:
        measurement_repo = HttpMeasurementRepository(
            config.measurement_api_url,
            token=config.measurement_api_token,
            timeout=config.request_timeout_seconds
        )
    else:
        measurement_repo = SyntheticMeasurementRepository()

    notification_service = NotificationService(SNSNotificationPublisher(), config.sns_topic_arn)
    summary_service = MeasurementSummaryService(measurement_repo, notification_service)
    return WebhookHandler(config, summary_service)

