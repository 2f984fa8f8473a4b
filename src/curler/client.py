"""Transfer handles, the retrying executor and the convenience entry points."""

from __future__ import annotations

import logging
import os
import ssl
import sys
from typing import IO, Any, Mapping, Sequence

import httpx

from .exceptions import CurlerValidationError, FileOpenError
from .models import TransferOptions
from .options import RequestConfig, config_defaults, config_post, config_save_file, merge_defaults
from .security import redact_config, validate_url
from .settings import Settings

logger = logging.getLogger(__name__)

TransferResult = bytes | bool

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _build_verify(options: TransferOptions) -> bool | ssl.SSLContext:
    if not options.ssl_verify_peer:
        return False
    if not options.ssl_verify_host:
        context = ssl.create_default_context()
        context.check_hostname = False
        return context
    return True


def _format_head(response: httpx.Response) -> bytes:
    status = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    lines = [status.encode("ascii", errors="replace")]
    lines.extend(key + b": " + value for key, value in response.headers.raw)
    return b"\r\n".join(lines) + b"\r\n\r\n"


def _rewind(sink: IO[bytes]) -> None:
    seekable = getattr(sink, "seekable", None)
    if seekable is not None and seekable():
        sink.seek(0)
        sink.truncate()


class TransferHandle:
    """A fully configured request that can be performed one or more times."""

    def __init__(
        self,
        options: TransferOptions,
        *,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.options = options
        self.settings = settings or Settings.from_env()
        timeout = options.timeout if options.timeout is not None else self.settings.timeout
        self._httpx = httpx.Client(
            auth=options.credentials,
            headers={"User-Agent": self.settings.user_agent},
            timeout=timeout,
            verify=_build_verify(options),
            follow_redirects=False,
            trust_env=False,
            transport=transport,
        )

    def __enter__(self) -> "TransferHandle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._httpx.close()

    def _request_args(self) -> dict[str, Any]:
        options = self.options
        is_post = options.post or options.post_fields is not None
        args: dict[str, Any] = {"method": "POST" if is_post else "GET", "url": options.url}
        if is_post:
            body = options.post_fields or ""
            args["content"] = body.encode()
            args["headers"] = {"Content-Type": FORM_CONTENT_TYPE}
        return args

    def perform(self) -> TransferResult:
        """Run a single transfer.

        Returns the payload in return-transfer mode, otherwise ``True`` once the
        payload has been written to the output file (or stdout). Returns
        ``False`` when the transfer itself fails; HTTP error statuses are not
        failures.
        """
        options = self.options
        sink: IO[bytes] | None = None
        if not options.return_transfer:
            sink = options.file if options.file is not None else sys.stdout.buffer
            if options.file is not None:
                _rewind(sink)

        args = self._request_args()
        logger.debug("%s %s", args["method"], args["url"])
        try:
            with self._httpx.stream(**args) as response:
                if sink is not None:
                    if options.header:
                        sink.write(_format_head(response))
                    for chunk in response.iter_bytes():
                        sink.write(chunk)
                    sink.flush()
                    return True
                body = response.read()
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            logger.warning("transfer to %s failed: %s", options.url, exc)
            return False

        if options.header:
            return _format_head(response) + body
        return body


def create(
    url: str,
    config: Mapping[str, Any] | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    settings: Settings | None = None,
) -> TransferHandle:
    """Build a transfer handle from ``config``, filling any gaps with the defaults for ``url``.

    Raises :class:`ConfigurationRejectedError` when an option is unsupported or invalid.
    """
    configurations = merge_defaults(url, config)
    logger.debug("creating transfer handle with %s", redact_config(configurations))
    options = TransferOptions.from_config(configurations)
    validate_url(options.url)
    return TransferHandle(options, settings=settings, transport=transport)


def execute(handle: TransferHandle, max_retries: int = 0) -> TransferResult:
    """Perform ``handle``, retrying immediately on failure.

    At most ``max_retries + 1`` attempts are made. There is no backoff and no
    distinction between failure causes. The last result is returned as is.
    """
    if max_retries < 0:
        raise CurlerValidationError("max_retries must be non-negative")

    attempt = 0
    while True:
        attempt += 1
        result = handle.perform()
        if result is not False or attempt > max_retries:
            break
        logger.debug("attempt %d failed, %d retries left", attempt, max_retries - attempt + 1)

    if result is False and max_retries:
        logger.info("transfer failed after %d attempts", attempt)
    return result


def request(
    url: str,
    config: Mapping[str, Any] | None = None,
    *,
    max_retries: int | None = None,
    transport: httpx.BaseTransport | None = None,
    settings: Settings | None = None,
) -> TransferResult:
    settings = settings or Settings.from_env()
    retries = settings.max_retries if max_retries is None else max_retries
    with create(url, config, transport=transport, settings=settings) as handle:
        return execute(handle, retries)


def download(
    url: str,
    file_path: str | os.PathLike[str],
    config: RequestConfig | None = None,
    *,
    max_retries: int | None = None,
    transport: httpx.BaseTransport | None = None,
    settings: Settings | None = None,
) -> TransferResult:
    """Run a GET (or the request described by ``config``) and save the payload to ``file_path``."""
    try:
        file_handle = open(file_path, "w+b")
    except OSError as exc:
        raise FileOpenError(
            f"Could not open the file '{file_path}'",
            path=os.fspath(file_path),
            cause=exc,
        ) from exc

    with file_handle:
        base = config if config is not None else config_defaults(url)
        configurations = config_save_file(file_handle, base)
        return request(
            url,
            configurations,
            max_retries=max_retries,
            transport=transport,
            settings=settings,
        )


def fetch(
    url: str,
    file_path: str | os.PathLike[str] | None = None,
    *,
    max_retries: int | None = None,
    transport: httpx.BaseTransport | None = None,
    settings: Settings | None = None,
) -> TransferResult:
    if file_path is not None:
        return download(url, file_path, max_retries=max_retries, transport=transport, settings=settings)
    return request(url, max_retries=max_retries, transport=transport, settings=settings)


def submit(
    url: str,
    fields: Mapping[str, Any] | Sequence[tuple[str, Any]] | str,
    file_path: str | os.PathLike[str] | None = None,
    *,
    max_retries: int | None = None,
    transport: httpx.BaseTransport | None = None,
    settings: Settings | None = None,
) -> TransferResult:
    configurations = config_post(fields, config_defaults(url))
    if file_path is not None:
        return download(
            url,
            file_path,
            configurations,
            max_retries=max_retries,
            transport=transport,
            settings=settings,
        )
    return request(url, configurations, max_retries=max_retries, transport=transport, settings=settings)


def get(
    url: str,
    file_path: str | os.PathLike[str] | None = None,
    *,
    max_retries: int | None = None,
    transport: httpx.BaseTransport | None = None,
    settings: Settings | None = None,
) -> TransferResult:
    return fetch(url, file_path, max_retries=max_retries, transport=transport, settings=settings)


def post(
    url: str,
    fields: Mapping[str, Any] | Sequence[tuple[str, Any]] | str,
    file_path: str | os.PathLike[str] | None = None,
    *,
    max_retries: int | None = None,
    transport: httpx.BaseTransport | None = None,
    settings: Settings | None = None,
) -> TransferResult:
    return submit(url, fields, file_path, max_retries=max_retries, transport=transport, settings=settings)
