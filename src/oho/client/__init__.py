"""HTTP client for the OpenCode Server API."""

from oho.client.client import OpencodeClient
from oho.client.errors import APIError, OhoClientError, TransportError

__all__ = [
    "APIError",
    "OhoClientError",
    "OpencodeClient",
    "TransportError",
]
