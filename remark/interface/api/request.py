"""Request parsing helpers shared by routes."""

import json
from typing import Any

from fastapi import Request

from remark.domain.error import AuthError
from remark.interface.error import MalformedBodyError

BEARER_PREFIX = "Bearer "


async def read_json_object(request: Request) -> dict[str, Any]:
    """Read the request body as a JSON object.

    An empty body and any JSON value that is not an object both read as
    ``{}``, so missing fields surface as field-level validation errors.

    Raises:
        MalformedBodyError: If the body is not valid JSON
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise MalformedBodyError()
    if not isinstance(parsed, dict):
        return {}
    return parsed


def body_string(body: dict[str, Any], field: str) -> str:
    """Read a body field as a string; missing or null reads as ``""``."""
    value = body.get(field)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return ""


def bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        AuthError: ``missing_token`` if the header is absent or not a bearer header
    """
    header = authorization or ""
    token = header[len(BEARER_PREFIX) :].strip() if header.startswith(BEARER_PREFIX) else ""
    if not token:
        raise AuthError("missing_token")
    return token
