"""Security helpers for configuration handling."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlparse

import httpx

from .exceptions import ConfigurationRejectedError
from .options import FILE, POST_FIELDS, URL, USERPWD

SENSITIVE_OPTIONS = frozenset({USERPWD, POST_FIELDS})


def redact_config(config: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``config`` that is safe to log."""
    redacted: dict[str, Any] = {}
    for key, value in config.items():
        if key in SENSITIVE_OPTIONS and value is not None:
            redacted[key] = "[REDACTED]"
        elif key == FILE and value is not None:
            redacted[key] = getattr(value, "name", repr(value))
        else:
            redacted[key] = value
    return redacted


def validate_url(url: str) -> None:
    """Reject URLs that the transport cannot send a request to."""
    if "\x00" in url:
        raise ConfigurationRejectedError("Invalid URL", option=URL)
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ConfigurationRejectedError("URL must include scheme and host", option=URL)
    if parsed.scheme not in {"http", "https"}:
        raise ConfigurationRejectedError(f"Unsupported URL scheme: {parsed.scheme}", option=URL)
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ConfigurationRejectedError(str(exc), option=URL, cause=exc) from exc
