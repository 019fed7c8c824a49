"""Shared fixtures: a PlayStoreAPI wired to an in-memory httpx transport."""

from typing import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from playstore_api import DeviceProperties, PlayStoreAPI
from playstore_api.transport.http import HttpClient


class Recorder:
    """Replays queued responses and keeps every request it saw."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, content: bytes = b"", status_code: int = 200) -> None:
        self.responses.append(httpx.Response(status_code, content=content))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(200, content=b"")
        return self.responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @staticmethod
    def form(request: httpx.Request) -> dict[str, str]:
        return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}

    @staticmethod
    def query(request: httpx.Request) -> dict[str, str]:
        return dict(request.url.params)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_api(recorder: Recorder) -> Callable[..., PlayStoreAPI]:
    def _make(**kwargs) -> PlayStoreAPI:
        http = HttpClient(client=httpx.Client(transport=httpx.MockTransport(recorder.handler)))
        kwargs.setdefault("device", DeviceProperties())
        return PlayStoreAPI(http=http, **kwargs)
    return _make


@pytest.fixture
def api(make_api) -> PlayStoreAPI:
    """Logged-in client."""
    return make_api(token="tok3n", gsf_id="1a2b")
