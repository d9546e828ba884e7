"""Signed bearer token utilities.

Token format::

    base64url(payload) + "." + base64url(HMAC-SHA256(secret, payload))

where ``payload`` is the compact JSON object ``{"u": <username>, "iat": <ms>}``
and base64url is unpadded. The payload is readable by the holder; only its
integrity is protected.
"""

import base64
import binascii
import json
import time

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac
from pydantic import BaseModel

from remark.util.error import ConfigError


class TokenPayload(BaseModel):
    """Decoded token payload."""

    username: str
    issued_at: int  # epoch milliseconds


class TokenError(Exception):
    """Token-related error."""

    pass


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(value: str) -> bytes:
    padded = value + "=" * (-len(value) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise TokenError("Malformed token segment") from e


def _mac(secret: str) -> hmac.HMAC:
    return hmac.HMAC(secret.encode("utf-8"), hashes.SHA256())


def _require_secret(secret: str | None) -> str:
    if not secret:
        raise ConfigError("auth_secret_not_set")
    return secret


def create_token(username: str, secret: str | None, issued_at: int | None = None) -> str:
    """Create a signed token for the user.

    Args:
        username: Normalized username
        secret: Signing secret
        issued_at: Issue time in epoch milliseconds (defaults to now)

    Returns:
        Encoded token

    Raises:
        ConfigError: If no secret is configured
    """
    key = _require_secret(secret)
    if issued_at is None:
        issued_at = time.time_ns() // 1_000_000

    payload = json.dumps({"u": username, "iat": issued_at}, separators=(",", ":"))
    payload_bytes = payload.encode("utf-8")

    mac = _mac(key)
    mac.update(payload_bytes)
    signature = mac.finalize()

    return f"{_b64url_encode(payload_bytes)}.{_b64url_encode(signature)}"


def verify_token(token: str, secret: str | None) -> TokenPayload:
    """Verify and decode a token.

    The signature is checked with the MAC primitive's own constant-time
    ``verify`` before the payload is parsed.

    Args:
        token: Token to verify
        secret: Signing secret

    Returns:
        Token payload if valid

    Raises:
        ConfigError: If no secret is configured
        TokenError: If the token is malformed or the signature does not match
    """
    key = _require_secret(secret)

    parts = token.split(".")
    if len(parts) != 2:
        raise TokenError("Invalid token shape")

    payload_bytes = _b64url_decode(parts[0])
    signature = _b64url_decode(parts[1])

    mac = _mac(key)
    mac.update(payload_bytes)
    try:
        mac.verify(signature)
    except InvalidSignature:
        raise TokenError("Invalid token signature")

    try:
        payload = json.loads(payload_bytes.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TokenError("Invalid token payload") from e

    if not isinstance(payload, dict) or not isinstance(payload.get("u"), str):
        raise TokenError("Invalid token payload")

    issued_at = payload.get("iat")
    if isinstance(issued_at, bool) or not isinstance(issued_at, (int, float)):
        issued_at = 0

    return TokenPayload(username=payload["u"], issued_at=int(issued_at))
