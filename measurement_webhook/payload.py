import json
from typing import Union

from shared.domain.entities import WebhookEvent
from shared.domain.exceptions import MalformedPayloadError

WEBHOOK_FIELDS = ("resource_type", "action", "measurement_uuid")


def parse_webhook_event(body: Union[str, bytes]) -> WebhookEvent:
    """
    Decode the webhook body into a WebhookEvent.
    Missing fields default to an empty string, unknown fields are ignored.

    Raises:
        MalformedPayloadError: body is not a JSON object or a field is not a string
    """
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as e:
        raise MalformedPayloadError(f"unmarshal request body: {e}") from e

    if not isinstance(data, dict):
        raise MalformedPayloadError(
            f"request body must be a JSON object, got {type(data).__name__}"
        )

    values = {}
    for name in WEBHOOK_FIELDS:
        value = data.get(name)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise MalformedPayloadError(
                f"field {name!r} must be a string, got {type(value).__name__}"
            )
        values[name] = value

    return WebhookEvent(**values)
