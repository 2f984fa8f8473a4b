"""Curler-specific exceptions."""

from __future__ import annotations


class CurlerError(Exception):
    """Base exception for all curler failures."""

    def __init__(
        self,
        message: str,
        *,
        option: str | None = None,
        path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.option = option
        self.path = path
        self.cause = cause

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        if self.option is None:
            return str(self.args[0])
        return f"{self.option}: {self.args[0]}"


class CurlerValidationError(CurlerError):
    """Raised when arguments passed to curler are invalid."""


class ConfigurationRejectedError(CurlerError):
    """Raised when a configuration mapping cannot be turned into a transfer handle."""


class FileOpenError(CurlerError):
    """Raised when the download destination cannot be opened for writing."""
