from __future__ import annotations

import io

import pytest

from curler.exceptions import ConfigurationRejectedError
from curler.options import FILE, POST_FIELDS, URL, USERPWD
from curler.security import redact_config, validate_url


def test_redact_config_hides_credentials_and_body() -> None:
    handle = io.BytesIO()
    redacted = redact_config({URL: "http://example.test/a", USERPWD: "u:p", POST_FIELDS: "k=v", FILE: handle})

    assert redacted[URL] == "http://example.test/a"
    assert redacted[USERPWD] == "[REDACTED]"
    assert redacted[POST_FIELDS] == "[REDACTED]"
    assert redacted[FILE] == repr(handle)


@pytest.mark.parametrize("url", ["http://example.test/a", "https://example.test"])
def test_validate_url_accepts_http_and_https(url) -> None:
    validate_url(url)


@pytest.mark.parametrize(
    "url",
    ["example.test/a", "ftp://example.test/a", "http://exa\x00mple.test", "http://example.test:abc/a"],
)
def test_validate_url_rejects(url) -> None:
    with pytest.raises(ConfigurationRejectedError):
        validate_url(url)


def test_validate_url_reports_bad_port_as_url_option() -> None:
    with pytest.raises(ConfigurationRejectedError) as excinfo:
        validate_url("http://example.test:abc/a")
    assert excinfo.value.option == URL
