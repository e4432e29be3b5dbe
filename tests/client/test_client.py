"""Tests for OpencodeClient with httpx.MockTransport."""

from __future__ import annotations

import base64
import json

import httpx
import pytest

from oho.client.client import OpencodeClient
from oho.client.errors import APIError, TransportError
from oho.config import Settings
from tests.conftest import BASE_URL, StubBackend


class TestOpencodeClient:
    def test_get_returns_raw_text(self, client: OpencodeClient, backend: StubBackend) -> None:
        backend.add("GET", "/project", '[ {"id": "p"} ]')
        assert client.get("/project") == '[ {"id": "p"} ]'

    def test_accept_header(self, client: OpencodeClient, backend: StubBackend) -> None:
        backend.add("GET", "/config", "{}")
        client.get("/config")
        assert backend.requests[0].headers["Accept"] == "application/json"

    def test_post_sends_json(self, client: OpencodeClient, backend: StubBackend) -> None:
        backend.add("POST", "/session", "{}")
        client.post("/session", {"title": "t"})

        request = backend.requests[0]
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"title": "t"}

    def test_query_params(self, client: OpencodeClient, backend: StubBackend) -> None:
        backend.add("GET", "/find/file", "[]")
        client.get("/find/file", params={"q": "a b"})
        assert backend.requests[0].url.params["q"] == "a b"

    def test_status_error(self, client: OpencodeClient, backend: StubBackend) -> None:
        backend.add("GET", "/session/x", "not found", status=404)

        with pytest.raises(APIError) as excinfo:
            client.get("/session/x")

        assert excinfo.value.status_code == 404
        assert str(excinfo.value) == "API error [404]: not found"

    def test_transport_error(self) -> None:
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with OpencodeClient(BASE_URL, transport=httpx.MockTransport(fail)) as client:
            with pytest.raises(TransportError, match="request failed: connection refused"):
                client.get("/global/health")

    def test_no_auth_without_password(self, client: OpencodeClient, backend: StubBackend) -> None:
        backend.add("GET", "/session", "[]")
        client.get("/session")
        assert "Authorization" not in backend.requests[0].headers


class TestFromSettings:
    def test_basic_auth(self) -> None:
        backend = StubBackend({("GET", "/session"): (200, "[]")})
        settings = Settings(host="h", port=1, username="opencode", password="secret")

        with OpencodeClient.from_settings(settings, transport=backend.transport()) as client:
            assert client.base_url == "http://h:1"
            client.get("/session")

        auth = backend.requests[0].headers["Authorization"]
        assert auth == "Basic " + base64.b64encode(b"opencode:secret").decode()
        assert backend.requests[0].url.host == "h"
