"""
Unit tests for webhook signature verification
"""

import base64
import hashlib
import hmac

import pytest
from shared.domain.exceptions import (
    MalformedSignatureError,
    MissingSignatureError,
    SignatureError,
    SignatureMismatchError
)
from measurement_webhook.signature import compute_signature, verify_signature


KEY = b"intdash-webhook-secret"
BODY = b'{"resource_type":"measurement","action":"completed","measurement_uuid":"x"}'


class TestComputeSignature:

    def test_matches_reference_hmac(self):
        expected = base64.b64encode(hmac.new(KEY, BODY, hashlib.sha256).digest()).decode()
        assert compute_signature(BODY, KEY) == expected


class TestVerifySignature:

    @pytest.mark.parametrize("body,key", [
        (BODY, KEY),
        (b"", KEY),
        (b"\x00\xff binary", b"k"),
        ("日本語".encode("utf-8"), b"another key"),
    ])
    def test_valid_signature(self, body, key):
        verify_signature(body, key, compute_signature(body, key))

    @pytest.mark.parametrize("signature", [None, ""])
    def test_missing_signature(self, signature):
        with pytest.raises(MissingSignatureError):
            verify_signature(BODY, KEY, signature)

    @pytest.mark.parametrize("signature", ["not base64!", "abc", "====", "YWJj\n"])
    def test_malformed_signature(self, signature):
        with pytest.raises(MalformedSignatureError):
            verify_signature(BODY, KEY, signature)

    @pytest.mark.parametrize("byte_index,bit", [(0, 0), (0, 7), (15, 3), (31, 7)])
    def test_flipped_bit_fails(self, byte_index, bit):
        digest = bytearray(base64.b64decode(compute_signature(BODY, KEY)))
        digest[byte_index] ^= 1 << bit
        tampered = base64.b64encode(bytes(digest)).decode()

        with pytest.raises(SignatureMismatchError):
            verify_signature(BODY, KEY, tampered)

    def test_wrong_key_fails(self):
        with pytest.raises(SignatureMismatchError):
            verify_signature(BODY, KEY, compute_signature(BODY, b"other key"))

    def test_modified_body_fails(self):
        signature = compute_signature(BODY, KEY)
        with pytest.raises(SignatureMismatchError):
            verify_signature(BODY + b" ", KEY, signature)

    def test_truncated_digest_fails(self):
        digest = base64.b64decode(compute_signature(BODY, KEY))
        with pytest.raises(SignatureMismatchError):
            verify_signature(BODY, KEY, base64.b64encode(digest[:16]).decode())

    def test_all_failures_share_base_class(self):
        assert issubclass(MissingSignatureError, SignatureError)
        assert issubclass(MalformedSignatureError, SignatureError)
        assert issubclass(SignatureMismatchError, SignatureError)
