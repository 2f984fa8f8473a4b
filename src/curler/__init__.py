"""Build request configurations and run them through httpx, optionally with retries."""

from .client import (
    TransferHandle,
    create,
    download,
    execute,
    fetch,
    get,
    post,
    request,
    submit,
)
from .exceptions import (
    ConfigurationRejectedError,
    CurlerError,
    CurlerValidationError,
    FileOpenError,
)
from .models import TransferOptions
from .options import (
    FILE,
    HEADER,
    POST,
    POST_FIELDS,
    RETURN_TRANSFER,
    SSL_VERIFY_HOST,
    SSL_VERIFY_PEER,
    TIMEOUT,
    URL,
    USERPWD,
    config_authentication,
    config_defaults,
    config_disable_certificate_verification,
    config_post,
    config_return_boolean,
    config_save_file,
    config_timeout,
    encode_fields,
    merge_defaults,
)
from .settings import Settings, __version__

__all__ = [
    "TransferHandle",
    "TransferOptions",
    "Settings",
    "create",
    "download",
    "execute",
    "fetch",
    "get",
    "post",
    "request",
    "submit",
    "config_authentication",
    "config_defaults",
    "config_disable_certificate_verification",
    "config_post",
    "config_return_boolean",
    "config_save_file",
    "config_timeout",
    "encode_fields",
    "merge_defaults",
    "HEADER",
    "RETURN_TRANSFER",
    "URL",
    "POST",
    "POST_FIELDS",
    "USERPWD",
    "FILE",
    "SSL_VERIFY_PEER",
    "SSL_VERIFY_HOST",
    "TIMEOUT",
    "CurlerError",
    "CurlerValidationError",
    "ConfigurationRejectedError",
    "FileOpenError",
    "__version__",
]
