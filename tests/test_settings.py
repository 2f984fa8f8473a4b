from __future__ import annotations

import pytest

from curler.exceptions import CurlerValidationError
from curler.settings import Settings, __version__


def test_from_env_defaults(monkeypatch) -> None:
    for name in ("CURLER_MAX_RETRIES", "CURLER_TIMEOUT", "CURLER_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    assert Settings.from_env() == Settings(max_retries=0, timeout=30.0, user_agent=f"curler/{__version__}")


def test_from_env_reads_variables(monkeypatch) -> None:
    monkeypatch.setenv("CURLER_MAX_RETRIES", "3")
    monkeypatch.setenv("CURLER_TIMEOUT", "2.5")
    monkeypatch.setenv("CURLER_USER_AGENT", "tests/1.0")

    assert Settings.from_env() == Settings(max_retries=3, timeout=2.5, user_agent="tests/1.0")


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CURLER_MAX_RETRIES", "many"),
        ("CURLER_MAX_RETRIES", "-1"),
        ("CURLER_TIMEOUT", "0"),
    ],
)
def test_from_env_rejects_bad_values(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(CurlerValidationError) as excinfo:
        Settings.from_env()
    assert excinfo.value.option == name
