"""Option names and the builders that assemble request configuration mappings.

Every builder takes an optional configuration mapping and returns a new
``dict`` with its keys applied, so calls chain without aliasing::

    config = config_defaults("https://example.com/form")
    config = config_post({"q": "curler"}, config)
    config = config_authentication("user", "secret", config)
"""

from __future__ import annotations

from typing import IO, Any, Mapping, Sequence
from urllib.parse import urlencode

HEADER = "header"
RETURN_TRANSFER = "return_transfer"
URL = "url"
POST = "post"
POST_FIELDS = "post_fields"
USERPWD = "userpwd"
FILE = "file"
SSL_VERIFY_PEER = "ssl_verify_peer"
SSL_VERIFY_HOST = "ssl_verify_host"
TIMEOUT = "timeout"

SUPPORTED_OPTIONS = frozenset(
    {
        HEADER,
        RETURN_TRANSFER,
        URL,
        POST,
        POST_FIELDS,
        USERPWD,
        FILE,
        SSL_VERIFY_PEER,
        SSL_VERIFY_HOST,
        TIMEOUT,
    }
)

RequestConfig = dict[str, Any]


def _copy(config: Mapping[str, Any] | None) -> RequestConfig:
    if config is None:
        return {}
    return dict(config)


def config_defaults(url: str) -> RequestConfig:
    """Return a fresh default configuration for ``url``."""
    return {
        HEADER: False,
        RETURN_TRANSFER: True,
        URL: url,
    }


def merge_defaults(url: str, config: Mapping[str, Any] | None = None) -> RequestConfig:
    """Fill the keys missing from ``config`` with the defaults for ``url``.

    Keys already present in ``config`` are kept as they are.
    """
    merged = config_defaults(url)
    if config:
        merged.update(config)
    return merged


def encode_fields(fields: Mapping[str, Any] | Sequence[tuple[str, Any]] | str) -> str:
    if isinstance(fields, str):
        return fields
    return urlencode(fields, doseq=True)


def config_post(
    fields: Mapping[str, Any] | Sequence[tuple[str, Any]] | str,
    config: Mapping[str, Any] | None = None,
) -> RequestConfig:
    """Switch the request to POST with ``fields`` as the form body.

    ``fields`` may be an already-encoded query string or key/value pairs.
    """
    updated = _copy(config)
    updated[POST] = True
    updated[POST_FIELDS] = encode_fields(fields)
    return updated


def config_authentication(
    username: str,
    password: str,
    config: Mapping[str, Any] | None = None,
) -> RequestConfig:
    updated = _copy(config)
    updated[USERPWD] = f"{username}:{password}"
    return updated


def config_save_file(file_handle: IO[bytes], config: Mapping[str, Any] | None = None) -> RequestConfig:
    """Write the payload into ``file_handle``; the transfer then yields a boolean."""
    updated = config_return_boolean(config)
    updated[FILE] = file_handle
    return updated


def config_return_boolean(config: Mapping[str, Any] | None = None) -> RequestConfig:
    updated = _copy(config)
    updated[RETURN_TRANSFER] = False
    return updated


def config_disable_certificate_verification(config: Mapping[str, Any] | None = None) -> RequestConfig:
    updated = _copy(config)
    updated[SSL_VERIFY_PEER] = False
    updated[SSL_VERIFY_HOST] = False
    return updated


def config_timeout(seconds: float, config: Mapping[str, Any] | None = None) -> RequestConfig:
    updated = _copy(config)
    updated[TIMEOUT] = seconds
    return updated
