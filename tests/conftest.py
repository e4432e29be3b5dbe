"""Shared fixtures: a call-counting stub OpenCode backend."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from oho.client.client import OpencodeClient

BASE_URL = "http://opencode.test:4096"


class StubBackend:
    """In-process OpenCode Server built on :class:`httpx.MockTransport`.

    Routes map ``(method, path)`` to ``(status, body)``; unknown routes
    answer 404.  Every request is recorded in :attr:`requests`.
    """

    def __init__(self, routes: dict[tuple[str, str], tuple[int, str]] | None = None) -> None:
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def add(self, method: str, path: str, body: str, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text='{"error":"not found"}')
        status, body = route
        return httpx.Response(status, text=body)


@pytest.fixture
def backend() -> StubBackend:
    return StubBackend()


@pytest.fixture
def client(backend: StubBackend) -> Iterator[OpencodeClient]:
    with OpencodeClient(BASE_URL, transport=backend.transport()) as c:
        yield c
