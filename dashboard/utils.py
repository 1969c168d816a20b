"""
Response helpers shared by the REST handlers.

Each helper works against the small capability protocols below so it can be
driven by any HTTP framework; the FastAPI bindings live in ``adapters``.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any, Optional, Protocol

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT = "text/plain"
NAMESPACE_WILDCARD = "*"


class Logger(Protocol):
    """Logging sink; a ``logging.Logger`` or ``LoggerAdapter`` qualifies."""

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None: ...

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None: ...


class RestRequest(Protocol):
    @property
    def method(self) -> str: ...

    @property
    def url_path(self) -> str: ...

    def path_parameter(self, name: str) -> str: ...


class RestResponse(Protocol):
    def add_header(self, name: str, value: str) -> None: ...

    def write_header(self, status_code: int) -> None: ...

    def write_error(self, status_code: int, err: Optional[BaseException]) -> None: ...

    def write_error_string(self, status_code: int, message: str) -> None: ...


def _sanitize(err: BaseException) -> str:
    return str(err).replace("/", "")


def respond_error(response: RestResponse, err: BaseException, status_code: int, *, logger: Logger) -> None:
    """Log ``err`` and answer with its text as a plain-text error body."""

    logger.error("Error: %s", _sanitize(err), extra={"status_code": status_code})
    response.add_header("Content-Type", CONTENT_TYPE_TEXT)
    response.write_error(status_code, err)


def respond_error_message(response: RestResponse, message: str, status_code: int, *, logger: Logger) -> None:
    """Answer with a plain-text message when there is no underlying exception."""

    logger.debug("Error message: %s", message, extra={"status_code": status_code})
    response.add_header("Content-Type", CONTENT_TYPE_TEXT)
    response.write_error_string(status_code, message)


def respond_message_and_log_error(
    response: RestResponse,
    err: BaseException,
    message: str,
    status_code: int,
    *,
    logger: Logger,
) -> None:
    """
    Log ``err`` but return only ``message`` to the client.

    The exception text stays in the logs so internal detail is not leaked in
    the response body.
    """

    logger.error("Error: %s", _sanitize(err), extra={"status_code": status_code})
    logger.debug("Message: %s", message, extra={"status_code": status_code})
    response.add_header("Content-Type", CONTENT_TYPE_TEXT)
    response.write_error_string(status_code, message)


def write_response_location(request: RestRequest, response: RestResponse, identifier: str) -> None:
    """
    Set ``Content-Location`` and answer 201 Created.

    For POST requests the location is the collection path plus ``identifier``;
    any other method reports the request path as-is. Must be called before the
    body is written, since headers cannot be added afterwards.
    """

    location = request.url_path
    if request.method == "POST":
        location = f"{location}/{identifier}"
    response.add_header("Content-Location", location)
    response.write_header(HTTPStatus.CREATED)


def get_namespace(request: RestRequest) -> str:
    """Return the ``namespace`` path parameter, mapping ``*`` to ``""`` (all namespaces)."""

    namespace = request.path_parameter("namespace")
    if namespace == NAMESPACE_WILDCARD:
        return ""
    return namespace


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON token {token!r}")


def get_content_type(content: bytes | str) -> str:
    """
    Classify a payload as JSON or plain text.

    Bytes must be UTF-8 without a byte order mark. Numbers are only checked for
    syntax, so integers of any length are accepted.
    """

    try:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        json.loads(text, parse_int=str, parse_float=str, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return CONTENT_TYPE_TEXT
    return CONTENT_TYPE_JSON
