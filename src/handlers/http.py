"""Event envelope helpers shared by both function handlers."""

from __future__ import annotations

import base64
import binascii
import hmac
import json
from collections.abc import Mapping
from typing import Any

from src.handlers.schemas import InvalidRequestError

JSON_HEADERS = {"Content-Type": "application/json"}


def json_response(status_code: int, payload: dict[str, Any]) -> dict[str, Any]:
    """Build the function response envelope."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(payload),
    }


def decode_body(event: Mapping[str, Any]) -> Any:
    """Return the JSON-decoded event body.

    Handles ``isBase64Encoded`` bodies and bodies that the runtime already
    decoded into a dict. Raises InvalidRequestError on anything else.
    """
    body = event.get("body")
    if body is None or body == "":
        raise InvalidRequestError("Invalid request body. Expected a JSON object.")
    if isinstance(body, dict):
        return body
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8", errors="replace")

    if event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidRequestError("Invalid request body. Not valid base64.") from e

    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise InvalidRequestError(f"Invalid request body. Not valid JSON: {e.msg}") from e


def get_header(headers: Mapping[str, Any] | None, name: str) -> str | None:
    """Case-insensitive header lookup. The exact-case key wins when both exist."""
    if not headers:
        return None
    if name in headers:
        value = headers[name]
        return value if isinstance(value, str) else None
    lowered = name.lower()
    for key, value in headers.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value if isinstance(value, str) else None
    return None


def verify_shared_secret(received: str | None, expected: str) -> bool:
    """Constant-time comparison of a header value against the configured secret.

    An unconfigured (empty) secret never authorizes anything.
    """
    if not expected or not received:
        return False
    return hmac.compare_digest(received.encode(), expected.encode())
