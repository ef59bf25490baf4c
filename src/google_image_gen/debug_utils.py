"""Debug utilities for the provider clients.

google-image-gen v0.1.0
"""

from __future__ import annotations

from typing import Any, Callable

__all__ = [
    "EventCallback",
    "API_KEY_HEADER",
    "sanitize_for_debug",
    "sanitize_headers",
    "mask_token",
]

EventCallback = Callable[[dict[str, Any]], None]

API_KEY_HEADER = "x-goog-api-key"

# Request/response fields that carry base64 image payloads
_IMAGE_PAYLOAD_KEYS = frozenset({"data", "bytesBase64Encoded"})


def sanitize_for_debug(data: Any) -> Any:
    """Replace image payloads (Interactions `data`, Imagen `bytesBase64Encoded`) with their length."""
    if isinstance(data, dict):
        return {
            k: f"<base64:{len(v)} chars>" if k in _IMAGE_PAYLOAD_KEYS and isinstance(v, str) and v
            else sanitize_for_debug(v)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [sanitize_for_debug(item) for item in data]
    return data


def sanitize_headers(headers: dict[str, str]) -> dict[str, str]:
    """Mask the API key header."""
    return {
        k: mask_token(v) if k.lower() == API_KEY_HEADER else v
        for k, v in headers.items()
    }


def mask_token(token: str) -> str:
    """Mask a token, keeping only the first and last 4 characters."""
    if not token:
        return "(empty)"
    if len(token) <= 8:
        return token[:2] + "***"
    return f"{token[:4]}...{token[-4:]}"
