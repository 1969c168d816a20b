from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

if TYPE_CHECKING:  # pragma: no cover - hints only
    from fastapi.testclient import TestClient


class RecordingResponse:
    """Response double capturing every call made by the helpers in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.headers: dict[str, str] = {}
        self.status_code: int | None = None
        self.body: str | None = None

    def add_header(self, name: str, value: str) -> None:
        self.calls.append(("add_header", name, value))
        self.headers[name] = value

    def write_header(self, status_code: int) -> None:
        self.calls.append(("write_header", status_code))
        self.status_code = status_code

    def write_error(self, status_code: int, err: BaseException | None) -> None:
        self.calls.append(("write_error", status_code, err))
        self.status_code = status_code
        self.body = None if err is None else str(err)

    def write_error_string(self, status_code: int, message: str) -> None:
        self.calls.append(("write_error_string", status_code, message))
        self.status_code = status_code
        self.body = message


class StubRequest:
    def __init__(self, method: str = "GET", url_path: str = "/", **path_params: str) -> None:
        self.method = method
        self.url_path = url_path
        self._path_params = path_params

    def path_parameter(self, name: str) -> str:
        return self._path_params.get(name, "")


@pytest.fixture
def response() -> RecordingResponse:
    return RecordingResponse()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """configure_logging replaces root handlers; put the originals back after each test."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def make_client(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, str] | None], TestClient]:
    """Factory fixture to build a TestClient with optional environment overrides."""

    def factory(env: dict[str, str] | None = None) -> TestClient:
        from dashboard import config as app_config
        from dashboard.main import create_app
        from fastapi.testclient import TestClient

        for key, value in (env or {}).items():
            monkeypatch.setenv(key, value)

        app_config.get_settings.cache_clear()
        app = create_app()
        return TestClient(app, raise_server_exceptions=False)

    return factory


@pytest.fixture
def make_request() -> Callable[..., StubRequest]:
    """Factory fixture building request doubles: ``make_request("POST", "/foo", namespace="default")``."""

    return StubRequest
