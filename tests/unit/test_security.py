# tests/unit/test_security.py

import base64
from unittest.mock import patch

from scim_webhook.core.security import (
    decode_secret_token,
    encode_secret_token,
    secrets_match,
)


def test_decode_secret_token_with_and_without_padding():
    secret = b"abcd1"
    token = base64.b64encode(secret).decode()
    assert token.endswith("=")

    assert decode_secret_token(token) == secret
    assert decode_secret_token(token.rstrip("=")) == secret


def test_decode_secret_token_rejects_invalid_base64():
    assert decode_secret_token("not base64!!") is None
    assert decode_secret_token("a") is None


def test_encode_secret_token_is_inverse():
    secret = bytes(range(256))
    assert decode_secret_token(encode_secret_token(secret)) == secret


def test_secrets_match_uses_constant_time_compare():
    with patch("scim_webhook.core.security.hmac.compare_digest", return_value=True) as cmp:
        assert secrets_match(b"a", b"b") is True

    cmp.assert_called_once_with(b"a", b"b")


def test_secrets_match_detects_trailing_byte_difference():
    assert secrets_match(b"secret-bytes", b"secret-bytes") is True
    assert secrets_match(b"secret-bytes", b"secret-bytez") is False
    assert secrets_match(b"secret-bytes", b"secret-byte") is False
