import base64
import binascii
import json
import os
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional


LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Logger:
    """
    Structured logger for Lambda functions.
    Prints one JSON object per line so CloudWatch Insights can query fields.
    """

    def __init__(self, service_name: str = "measurement-webhook", level: Optional[str] = None):
        self.service_name = service_name
        level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
        self.level = LOG_LEVELS.get(level_name, LOG_LEVELS["INFO"])

    def _log(self, level: str, message: str, exc_info: bool = False, **kwargs) -> None:
        if LOG_LEVELS[level] < self.level:
            return

        entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "service": self.service_name,
            "message": message,
        }
        for key, value in kwargs.items():
            entry[key] = str(value) if isinstance(value, BaseException) else value

        if exc_info and sys.exc_info()[0] is not None:
            entry["traceback"] = traceback.format_exc()

        print(json.dumps(entry, default=str))

    def debug(self, message: str, **kwargs) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log("ERROR", message, **kwargs)


def lambda_response(status_code: int, body: str = "") -> Dict[str, Any]:
    """Build an API Gateway proxy response with a plain text body"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/plain"},
        "body": body,
    }


def get_header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    """
    Case-insensitive header lookup.
    REST APIs keep the sender's casing, HTTP APIs lowercase everything.
    """
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def decode_body(event: Mapping[str, Any]) -> bytes:
    """
    Return the raw request body as bytes.

    Raises:
        ValueError: body is flagged base64 but cannot be decoded
    """
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except binascii.Error as e:
            raise ValueError(f"body is not valid base64: {e}") from e
    if isinstance(body, bytes):
        return body
    return body.encode("utf-8")
