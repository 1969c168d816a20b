"""FastAPI bindings for the request/response protocols used by ``utils``."""

from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import quote

from fastapi import Request
from fastapi.responses import Response

# RFC 3986 pchar plus "/"; anything else is percent-encoded.
PATH_SAFE = "/:@!$&'()*+,;=-._~"


class ResponseCommittedError(RuntimeError):
    """Raised when headers or a status are written after the response was committed."""


class FastAPIRequest:
    """Read-only view over an incoming FastAPI request."""

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def method(self) -> str:
        return self._request.method.upper()

    @property
    def url_path(self) -> str:
        raw_path = self._request.scope.get("raw_path")
        if raw_path is not None:
            return raw_path.split(b"?", 1)[0].decode("latin-1")
        return quote(self._request.url.path, safe=PATH_SAFE)

    def path_parameter(self, name: str) -> str:
        value = self._request.path_params.get(name)
        return "" if value is None else str(value)


class BufferedResponse:
    """
    Collects headers, status and body until rendered with ``to_response``.

    The first status write commits the response; later header or status writes
    raise ``ResponseCommittedError``.
    """

    def __init__(self) -> None:
        self.headers: Dict[str, str] = {}
        self.status_code = 200
        self.body = b""
        self.committed = False

    def add_header(self, name: str, value: str) -> None:
        if self.committed:
            raise ResponseCommittedError(f"cannot add header {name!r}: response already committed")
        self.headers[name] = value

    def write_header(self, status_code: int) -> None:
        if self.committed:
            raise ResponseCommittedError("response status already written")
        self.status_code = int(status_code)
        self.committed = True

    def write_error(self, status_code: int, err: Optional[BaseException]) -> None:
        if err is None:
            self.write_header(status_code)
            return
        self.write_error_string(status_code, str(err))

    def write_error_string(self, status_code: int, message: str) -> None:
        self.write_header(status_code)
        self.body = message.encode("utf-8")

    def to_response(self) -> Response:
        return Response(content=self.body, status_code=self.status_code, headers=self.headers)
