"""
Unit tests for webhook payload parsing
"""

import pytest
from shared.domain.entities import WebhookEvent
from shared.domain.exceptions import MalformedPayloadError
from measurement_webhook.payload import parse_webhook_event


class TestParseWebhookEvent:

    def test_full_payload(self):
        event = parse_webhook_event(
            '{"resource_type":"measurement","action":"completed","measurement_uuid":"x"}'
        )
        assert event == WebhookEvent("measurement", "completed", "x")

    def test_bytes_payload(self):
        event = parse_webhook_event(b'{"resource_type":"measurement","action":"completed"}')
        assert event.resource_type == "measurement"

    def test_missing_fields_default_to_empty(self):
        event = parse_webhook_event('{"action":"completed"}')
        assert event == WebhookEvent("", "completed", "")

    def test_null_fields_default_to_empty(self):
        event = parse_webhook_event('{"resource_type":null,"action":"completed","measurement_uuid":"x"}')
        assert event.resource_type == ""

    def test_unknown_fields_are_ignored(self):
        event = parse_webhook_event(
            '{"resource_type":"measurement","action":"completed",'
            '"measurement_uuid":"x","edge_uuid":"e","extra":{"a":1}}'
        )
        assert event == WebhookEvent("measurement", "completed", "x")

    @pytest.mark.parametrize("body", ["", "not json", "{", b"\xff\xfe"])
    def test_invalid_json(self, body):
        with pytest.raises(MalformedPayloadError):
            parse_webhook_event(body)

    @pytest.mark.parametrize("body", ["[]", '"measurement"', "42", "null"])
    def test_non_object_json(self, body):
        with pytest.raises(MalformedPayloadError):
            parse_webhook_event(body)

    def test_non_string_field(self):
        with pytest.raises(MalformedPayloadError):
            parse_webhook_event('{"resource_type":"measurement","action":"completed","measurement_uuid":5}')
