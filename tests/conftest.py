"""Shared test fixtures for edgeclient.

Provides a fake service built on :class:`httpx.MockTransport` that records
every request, plus config isolation and output reset fixtures. These are
discovered by pytest automatically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from edgeclient.output import OutputFormat, OutputManager, reset_output, set_output
from edgeclient.transport import Transport


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    CliRunner swaps sys.stdout/sys.stderr during a test; a manager created
    then would keep stale stream references.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Fake service
# ---------------------------------------------------------------------------


class FakeService:
    """Records requests and answers them with a configurable handler.

    ``handler`` receives the :class:`httpx.Request` and returns an
    :class:`httpx.Response`. The default answers ``200 {}``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def reply(self, data: Any, status_code: int = 200) -> None:
        """Answer every subsequent request with *data* as JSON."""
        self.handler = lambda request: httpx.Response(status_code, json=data)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        """Raw (still escaped) path of the last request, without the query."""
        return self.last.url.raw_path.decode("ascii").split("?", 1)[0]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self._handle), follow_redirects=True)


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def transport(service: FakeService) -> Transport:
    """A Transport whose HTTP traffic goes to *service*."""
    t = Transport(client=service.client())
    yield t
    t.close()


# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear EDGECLIENT_* variables and chdir into *tmp_path*."""
    for var in [
        "EDGECLIENT_BASE_URL",
        "EDGECLIENT_TIMEOUT",
        "EDGECLIENT_VERIFY_SSL",
        "EDGECLIENT_TOKEN_SOURCE",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def json_output() -> OutputManager:
    output = OutputManager(format=OutputFormat.JSON, no_color=True)
    set_output(output)
    yield output
    reset_output()
