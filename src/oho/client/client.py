"""OpencodeClient — synchronous JSON client for the OpenCode Server API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from oho.client.errors import APIError, TransportError

if TYPE_CHECKING:
    from oho.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class OpencodeClient:
    """Issues requests against the OpenCode Server and returns raw body text.

    Response bodies are never parsed here; callers decide whether to decode
    the JSON or pass it through untouched.

    Usage::

        with OpencodeClient.from_settings(settings) as client:
            body = client.get("/global/health")
    """

    def __init__(
        self,
        base_url: str,
        *,
        username: str = "",
        password: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        auth = httpx.BasicAuth(username, password) if username and password else None
        self._http = httpx.Client(
            base_url=self._base_url,
            auth=auth,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> OpencodeClient:
        return cls(
            settings.base_url,
            username=settings.username,
            password=settings.password,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def __enter__(self) -> OpencodeClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> str:
        """Send one request and return the response body as text.

        Raises:
            TransportError: The connection failed or timed out.
            APIError: The server answered with status 400 or above.
        """
        logger.debug("%s %s params=%s", method, path, params)
        try:
            response = self._http.request(
                method,
                path,
                params=params,
                json=body,
            )
        except httpx.HTTPError as exc:
            raise TransportError(str(exc)) from exc

        if response.status_code >= 400:
            raise APIError(response.status_code, response.text)
        return response.text

    def get(self, path: str, params: dict[str, str] | None = None) -> str:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> str:
        return self.request("POST", path, body=body)

    def delete(self, path: str) -> str:
        return self.request("DELETE", path)
