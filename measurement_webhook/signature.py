"""
Webhook signature verification

intdash signs every delivery with HMAC-SHA256 over the raw body and sends
the base64 encoded digest in the x-intdash-signature-256 header.
"""

import base64
import binascii
import hashlib
import hmac
from typing import Optional

from shared.domain.exceptions import (
    MalformedSignatureError,
    MissingSignatureError,
    SignatureMismatchError,
)

SIGNATURE_HEADER = "x-intdash-signature-256"


def compute_signature(body: bytes, key: bytes) -> str:
    """Base64 encoded HMAC-SHA256 of body, as the sender computes it"""
    digest = hmac.new(key, body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_signature(body: bytes, key: bytes, signature: Optional[str]) -> None:
    """
    Check that signature is the HMAC-SHA256 of body under key.

    Raises:
        MissingSignatureError: signature is empty or absent
        MalformedSignatureError: signature is not valid base64
        SignatureMismatchError: digests differ
    """
    if not signature:
        raise MissingSignatureError(SIGNATURE_HEADER)

    try:
        want_sum = base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedSignatureError(f"decode signature: {e}") from e

    got_sum = hmac.new(key, body, hashlib.sha256).digest()

    if not hmac.compare_digest(want_sum, got_sum):
        raise SignatureMismatchError(want_sum.hex(), got_sum.hex())
