# scim_webhook/core/security.py

import base64
import binascii
import hmac
from typing import Optional


def decode_secret_token(token: str) -> Optional[bytes]:
    """
    Decode a base64 SCIM token into raw secret bytes.

    Missing padding is tolerated. Returns None when the token is not
    valid base64.
    """
    padded = token + "=" * (-len(token) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError):
        return None


def secrets_match(expected: bytes, provided: bytes) -> bool:
    # hmac.compare_digest runs in time independent of where the inputs differ
    return hmac.compare_digest(expected, provided)


def encode_secret_token(secret: bytes) -> str:
    """Inverse of decode_secret_token; used when issuing tokens to an IdP."""
    return base64.b64encode(secret).decode("ascii")
