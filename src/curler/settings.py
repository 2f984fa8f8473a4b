"""Process-wide defaults resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from .exceptions import CurlerValidationError

__version__ = "0.1.0"

T = TypeVar("T")

MAX_RETRIES_ENV_VAR = "CURLER_MAX_RETRIES"
TIMEOUT_ENV_VAR = "CURLER_TIMEOUT"
USER_AGENT_ENV_VAR = "CURLER_USER_AGENT"


@dataclass(frozen=True)
class Settings:
    max_retries: int = 0
    timeout: float = 30.0
    user_agent: str = f"curler/{__version__}"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``CURLER_*`` variables, falling back to the defaults."""
        defaults = cls()
        max_retries = _parse_env(MAX_RETRIES_ENV_VAR, int, defaults.max_retries)
        if max_retries < 0:
            raise CurlerValidationError("max_retries must be non-negative", option=MAX_RETRIES_ENV_VAR)
        timeout = _parse_env(TIMEOUT_ENV_VAR, float, defaults.timeout)
        if timeout <= 0:
            raise CurlerValidationError("timeout must be greater than 0", option=TIMEOUT_ENV_VAR)
        user_agent = os.getenv(USER_AGENT_ENV_VAR) or defaults.user_agent
        return cls(max_retries=max_retries, timeout=timeout, user_agent=user_agent)


def _parse_env(name: str, cast: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise CurlerValidationError(f"invalid value {raw!r}", option=name, cause=exc) from exc
