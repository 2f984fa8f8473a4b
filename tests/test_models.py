from __future__ import annotations

import io

import pytest

from curler.exceptions import ConfigurationRejectedError
from curler.models import TransferOptions
from curler.options import FILE, RETURN_TRANSFER, TIMEOUT, URL, USERPWD, config_defaults


def test_from_config_accepts_defaults() -> None:
    options = TransferOptions.from_config(config_defaults("http://example.test/a"))

    assert options.url == "http://example.test/a"
    assert options.return_transfer is True
    assert options.header is False
    assert options.ssl_verify_peer is True
    assert options.credentials is None


def test_from_config_rejects_unsupported_option() -> None:
    config = {URL: "http://bad.test", "unsupported": 1}

    with pytest.raises(ConfigurationRejectedError) as excinfo:
        TransferOptions.from_config(config)

    assert excinfo.value.option == "unsupported"


def test_from_config_requires_url() -> None:
    with pytest.raises(ConfigurationRejectedError):
        TransferOptions.from_config({RETURN_TRANSFER: True})


def test_file_forces_boolean_return_mode() -> None:
    config = {URL: "http://example.test/a", FILE: io.BytesIO(), RETURN_TRANSFER: True}
    assert TransferOptions.from_config(config).return_transfer is False


def test_file_must_be_writable() -> None:
    with pytest.raises(ConfigurationRejectedError) as excinfo:
        TransferOptions.from_config({URL: "http://example.test/a", FILE: "/tmp/out.dat"})
    assert excinfo.value.option == "file"


def test_credentials_split_on_first_colon() -> None:
    options = TransferOptions.from_config({URL: "http://example.test/a", USERPWD: "user:pa:ss"})
    assert options.credentials == ("user", "pa:ss")


def test_credentials_without_separator_are_rejected() -> None:
    with pytest.raises(ConfigurationRejectedError):
        TransferOptions.from_config({URL: "http://example.test/a", USERPWD: "user"})


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(ConfigurationRejectedError):
        TransferOptions.from_config({URL: "http://example.test/a", TIMEOUT: 0})
