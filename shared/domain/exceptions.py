"""
Domain Exceptions
"""


class DomainError(Exception):
    """Base domain exception"""
    pass


class ConfigurationError(DomainError):
    """Raised when required configuration is missing or invalid"""
    pass


class SignatureError(DomainError):
    """Base class for webhook signature failures"""
    pass


class MissingSignatureError(SignatureError):
    """Raised when the signature header is empty or absent"""
    def __init__(self, header_name: str):
        self.header_name = header_name
        super().__init__(f"signature header {header_name!r} is empty")


class MalformedSignatureError(SignatureError):
    """Raised when the signature is not valid base64"""
    pass


class SignatureMismatchError(SignatureError):
    """Raised when the computed digest differs from the supplied one"""
    def __init__(self, expected_hex: str, actual_hex: str):
        self.expected_hex = expected_hex
        self.actual_hex = actual_hex
        super().__init__(f"signature mismatch, want {expected_hex}, got {actual_hex}")


class MalformedPayloadError(DomainError):
    """Raised when the webhook body cannot be decoded"""
    pass


class UnsupportedEventError(DomainError):
    """Raised when the webhook is not a completed measurement"""
    def __init__(self, resource_type: str, action: str):
        self.resource_type = resource_type
        self.action = action
        super().__init__(
            f"unsupported resource type or action: {resource_type!r}/{action!r}"
        )


class FetchFailedError(DomainError):
    """Raised when measurement data points cannot be fetched"""
    def __init__(self, measurement_uuid: str, reason: str):
        self.measurement_uuid = measurement_uuid
        self.reason = reason
        super().__init__(f"fetch data points for {measurement_uuid}: {reason}")


class EmptySeriesError(DomainError):
    """Raised when statistics are requested for an empty series"""
    def __init__(self):
        super().__init__("cannot summarize an empty series")


class PublishFailedError(DomainError):
    """Raised when the notification topic rejects a publish"""
    def __init__(self, topic_arn: str, reason: str):
        self.topic_arn = topic_arn
        self.reason = reason
        super().__init__(f"publish SNS to {topic_arn}: {reason}")
