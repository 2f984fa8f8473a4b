"""Typed view of a request configuration mapping."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .exceptions import ConfigurationRejectedError
from .options import FILE, RETURN_TRANSFER

logger = logging.getLogger(__name__)


class TransferOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str
    header: bool = False
    return_transfer: bool = True
    post: bool = False
    post_fields: str | None = None
    userpwd: str | None = None
    file: Any = None
    ssl_verify_peer: bool = True
    ssl_verify_host: bool = True
    timeout: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _file_forces_boolean_return(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and data.get(FILE) is not None and data.get(RETURN_TRANSFER, True):
            logger.debug("output file attached, switching to boolean return mode")
            data = {**data, RETURN_TRANSFER: False}
        return data

    @field_validator("file")
    @classmethod
    def _check_file(cls, value: Any) -> Any:
        if value is not None and not callable(getattr(value, "write", None)):
            raise ValueError("file must be a writable file object")
        return value

    @field_validator("userpwd")
    @classmethod
    def _check_userpwd(cls, value: str | None) -> str | None:
        if value is not None and ":" not in value:
            raise ValueError("credentials must look like 'user:password'")
        return value

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be greater than 0")
        return value

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "TransferOptions":
        """Validate ``config``, raising :class:`ConfigurationRejectedError` on any bad option."""
        try:
            return cls.model_validate(dict(config))
        except ValidationError as exc:
            first = exc.errors()[0]
            option = ".".join(str(part) for part in first.get("loc", ())) or None
            raise ConfigurationRejectedError(
                "Unsupported configuration options",
                option=option,
                cause=exc,
            ) from exc

    @property
    def credentials(self) -> tuple[str, str] | None:
        if self.userpwd is None:
            return None
        username, _, password = self.userpwd.partition(":")
        return username, password
