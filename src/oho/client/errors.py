"""Shared error types for the HTTP client layer."""


class OhoClientError(Exception):
    """Base error for all failures talking to the OpenCode Server."""


class TransportError(OhoClientError):
    """The request never produced an HTTP response."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"request failed: {detail}")


class APIError(OhoClientError):
    """The server answered with a 4xx/5xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error [{status_code}]: {body}")
