"""MCPBridge — serves the OpenCode tool table over stdio JSON-RPC.

One request per input line, one response per request, handled strictly in
order on the calling thread.  The only session state is ``initialized``,
which gates ``tools/list`` and ``tools/call``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import IO, TYPE_CHECKING, Any

from pydantic import ValidationError

from oho import __version__
from oho.client.errors import OhoClientError
from oho.mcp.errors import ToolError
from oho.mcp.models import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_NAME,
    SERVER_NOT_INITIALIZED,
    CallToolParams,
    CallToolResult,
    InitializeParams,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
)
from oho.mcp.tools import ToolRegistry, default_registry
from oho.utils.telemetry import ATTR_RPC_METHOD, ATTR_TOOL_IS_ERROR, ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from oho.client.client import OpencodeClient

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

NOTIFICATION_INITIALIZED = "notifications/initialized"


class MCPBridge:
    """Line-oriented JSON-RPC 2.0 server for the MCP tool methods.

    Usage::

        with OpencodeClient.from_settings(settings) as client:
            MCPBridge(client).serve(sys.stdin.buffer, sys.stdout.buffer)

    :meth:`handle_line` is the unit the loop is built on; it returns the
    response dict for a line, or ``None`` when nothing must be written.
    """

    def __init__(
        self,
        client: OpencodeClient,
        registry: ToolRegistry | None = None,
    ) -> None:
        self._client = client
        self._registry = registry or default_registry()
        self._initialized = False
        self._methods: dict[str, Callable[[JsonRpcRequest], JsonRpcResponse]] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
            "ping": self._ping,
        }

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def serve(self, reader: IO[bytes], writer: IO[bytes]) -> None:
        """Read requests from *reader* until end of input, answering on *writer*.

        Both streams are binary: lines split on LF only, and bytes that are
        not UTF-8 fail that one line with a parse error.  A read error ends
        the loop after being logged; it is not raised.
        """
        logger.info("MCP bridge ready (backend %s)", self._client.base_url)
        try:
            for raw in reader:
                response = self.handle_line(raw)
                if response is not None:
                    self._write(writer, response)
        except OSError as exc:
            logger.error("Error reading input: %s", exc)
        logger.info("Input closed, MCP bridge stopping")

    def handle_line(self, raw: bytes | str) -> dict[str, Any] | None:
        line = raw.strip()
        if not line:
            return None

        try:
            request = JsonRpcRequest.model_validate_json(line)
        except ValueError as exc:  # ValidationError or UnicodeDecodeError
            logger.debug("Unparsable input line: %s", exc)
            return JsonRpcResponse.failure(None, PARSE_ERROR, "Parse error").to_wire()

        response = self.handle_request(request)
        return response.to_wire() if response is not None else None

    def handle_request(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Dispatch one request; ``None`` means it was a notification."""
        if request.method == NOTIFICATION_INITIALIZED:
            logger.debug("Client finished initialization")
            return None

        handler = self._methods.get(request.method)
        if handler is None:
            return JsonRpcResponse.failure(
                request.id, METHOD_NOT_FOUND, f"Method not found: {request.method}"
            )

        with _tracer.start_as_current_span("oho.rpc") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)
            return handler(request)

    @staticmethod
    def _write(writer: IO[bytes], response: dict[str, Any]) -> None:
        writer.write((json.dumps(response, ensure_ascii=False) + "\n").encode("utf-8"))
        writer.flush()

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    def _initialize(self, request: JsonRpcRequest) -> JsonRpcResponse:
        params = _params_object(request)
        if params is None:
            return _invalid_params(request)

        try:
            client_params = InitializeParams.model_validate(params)
        except ValidationError as exc:
            logger.debug("Ignoring malformed initialize params: %s", exc)
            client_params = InitializeParams()
        logger.info(
            "initialize from %s %s (protocol %s)",
            client_params.client_info.name or "<unknown>",
            client_params.client_info.version,
            client_params.protocol_version or "<unset>",
        )

        result = InitializeResult(
            server_info=ServerInfo(name=SERVER_NAME, version=__version__),
        )
        self._initialized = True
        return JsonRpcResponse.success(request.id, result.model_dump(by_alias=True))

    def _tools_list(self, request: JsonRpcRequest) -> JsonRpcResponse:
        if not self._initialized:
            return _not_initialized(request)
        tools = [d.model_dump(by_alias=True) for d in self._registry.descriptors()]
        return JsonRpcResponse.success(request.id, {"tools": tools})

    def _tools_call(self, request: JsonRpcRequest) -> JsonRpcResponse:
        if not self._initialized:
            return _not_initialized(request)

        params = _params_object(request)
        if params is None:
            return _invalid_params(request)
        try:
            call = CallToolParams.model_validate(params)
        except ValidationError:
            return _invalid_params(request)

        result = self.call_tool(call.name, call.arguments or {})
        return JsonRpcResponse.success(request.id, result.model_dump(by_alias=True))

    def _ping(self, request: JsonRpcRequest) -> JsonRpcResponse:
        return JsonRpcResponse.success(request.id, {"status": "pong"})

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def call_tool(self, name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Run one tool; every failure is folded into an ``isError`` result."""
        with _tracer.start_as_current_span("oho.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            try:
                text = self._registry.call(self._client, name, arguments)
            except ToolError as exc:
                logger.warning("Tool %s rejected: %s", name, exc)
                result = CallToolResult.failure(str(exc))
            except OhoClientError as exc:
                logger.warning("Tool %s failed: %s", name, exc)
                result = CallToolResult.failure(str(exc))
            else:
                result = CallToolResult.success(text)
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)
            return result


def _params_object(request: JsonRpcRequest) -> dict[str, Any] | None:
    """Absent params read as ``{}``; anything but an object is rejected."""
    if request.params is None:
        return {}
    if isinstance(request.params, dict):
        return request.params
    return None


def _invalid_params(request: JsonRpcRequest) -> JsonRpcResponse:
    return JsonRpcResponse.failure(request.id, INVALID_PARAMS, "Invalid params")


def _not_initialized(request: JsonRpcRequest) -> JsonRpcResponse:
    return JsonRpcResponse.failure(request.id, SERVER_NOT_INITIALIZED, "Server not initialized")
