"""Redaction of secrets from request data before it is written to debug output."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "session_token",
    "tncpw_session",
    "token",
    "secret",
    "password",
    "password_confirm",
    "new_password",
    "new_password_confirm",
    "authorization",
    "cookie",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a JSON-like value.

    Builds a new structure; the original payload is never mutated.

    Args:
        payload: A dict, list or scalar to redact.

    Returns:
        A copy with values of sensitive keys replaced by "[REDACTED]".
    """
    if isinstance(payload, Mapping):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list | tuple):
        return [redact_payload(item) for item in payload]
    else:
        return payload


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a plain dict of headers with sensitive values redacted."""
    return {
        key: REDACTED_VALUE if key.lower() in REDACT_KEYS else value
        for key, value in headers.items()
    }
