"""
Send a signed intdash webhook, either to the local handler or to a deployed endpoint.

Local run (SNS is mocked, data points come from the synthetic source):
    python scripts/manual_test_webhook.py --secret my-secret

Deployed endpoint:
    python scripts/manual_test_webhook.py --secret my-secret --url https://xxx.execute-api.../webhook
"""

import argparse
import json
import os
import sys
from unittest.mock import MagicMock

import requests

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from shared.config import WebhookConfig
from measurement_webhook.request_handler import WebhookHandler
from measurement_webhook.service import MeasurementSummaryService, NotificationService
from measurement_webhook.signature import SIGNATURE_HEADER, compute_signature
from shared.infrastructure.measurement_repositories import SyntheticMeasurementRepository
from shared.infrastructure.notifications import SNSNotificationPublisher


def build_body(resource_type: str, action: str, measurement_uuid: str) -> str:
    return json.dumps({
        "resource_type": resource_type,
        "action": action,
        "measurement_uuid": measurement_uuid
    })


def run_local(body: str, signature: str, secret: bytes) -> dict:
    sns_client = MagicMock()
    sns_client.publish.return_value = {"MessageId": "local-test"}
    topic_arn = "arn:aws:sns:us-east-1:000000000000:local-test"

    config = WebhookConfig(sha256_key=secret, sns_topic_arn=topic_arn)
    notification_service = NotificationService(SNSNotificationPublisher(client=sns_client), topic_arn)
    summary_service = MeasurementSummaryService(SyntheticMeasurementRepository(), notification_service)
    handler = WebhookHandler(config, summary_service)

    response = handler.handle({"headers": {SIGNATURE_HEADER: signature}, "body": body})

    if sns_client.publish.called:
        print("--- Published message ---")
        print(sns_client.publish.call_args.kwargs["Message"])
    return response


def run_remote(url: str, body: str, signature: str) -> dict:
    response = requests.post(
        url,
        data=body.encode("utf-8"),
        headers={"Content-Type": "application/json", SIGNATURE_HEADER: signature},
        timeout=30
    )
    return {"statusCode": response.status_code, "body": response.text}


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--secret", required=True, help="shared webhook secret")
    parser.add_argument("--url", help="deployed webhook URL; omit to run the handler locally")
    parser.add_argument("--resource-type", default="measurement")
    parser.add_argument("--action", default="completed")
    parser.add_argument("--measurement-uuid", default="00000000-0000-0000-0000-000000000000")
    parser.add_argument("--bad-signature", action="store_true", help="sign with a different key")
    args = parser.parse_args()

    secret = args.secret.encode("utf-8")
    body = build_body(args.resource_type, args.action, args.measurement_uuid)
    signing_key = b"wrong-" + secret if args.bad_signature else secret
    signature = compute_signature(body.encode("utf-8"), signing_key)

    if args.url:
        response = run_remote(args.url, body, signature)
    else:
        response = run_local(body, signature, secret)

    print(f"--- Response: {response['statusCode']} ---")
    print(response["body"] or "(empty)")


if __name__ == "__main__":
    main()
