"""MCP models — JSON-RPC 2.0 messages and tool payloads.

Implements the message format the bridge speaks on stdin/stdout for the
``initialize``, ``tools/list`` and ``tools/call`` methods of the Model
Context Protocol.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "oho"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------

PARSE_ERROR = -32700
INVALID_PARAMS = -32600
METHOD_NOT_FOUND = -32601
SERVER_NOT_INITIALIZED = -32000

# Strict so a `true` id is rejected instead of echoed back as 1.
RequestId = StrictInt | StrictFloat | StrictStr | None


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification read from stdin."""

    jsonrpc: str = "2.0"
    id: RequestId = None
    method: str = ""
    params: Any = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` and ``error`` is set.
    """

    jsonrpc: str = "2.0"
    id: RequestId = None
    result: Any = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls,
        request_id: RequestId,
        code: int,
        message: str,
        data: Any = None,
    ) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message, data=data))

    def to_wire(self) -> dict[str, Any]:
        """Dump to the on-the-wire dict: ``id`` always present, one of result/error."""
        wire: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            wire["error"] = self.error.model_dump(exclude_none=True)
        else:
            wire["result"] = self.result
        return wire


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ClientInfo(BaseModel):
    name: str = ""
    version: str = ""


class InitializeParams(BaseModel):
    """Parameters of ``initialize``; every field is optional."""

    model_config = {"populate_by_name": True}

    protocol_version: str = Field(default="", alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=dict)
    client_info: ClientInfo = Field(default_factory=ClientInfo, alias="clientInfo")


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    """Answer to ``initialize``."""

    model_config = {"populate_by_name": True}

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo = Field(alias="serverInfo")


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = {"populate_by_name": True}

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class CallToolParams(BaseModel):
    """Parameters of ``tools/call``."""

    name: str = ""
    arguments: dict[str, Any] | None = None


class ToolContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """The result payload of ``tools/call``.

    Tool-level failures are reported here with ``isError`` set, never through
    the JSON-RPC ``error`` field.
    """

    model_config = {"populate_by_name": True}

    content: list[ToolContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def success(cls, text: str) -> CallToolResult:
        return cls(content=[ToolContent(text=text)], is_error=False)

    @classmethod
    def failure(cls, text: str) -> CallToolResult:
        return cls(content=[ToolContent(text=text)], is_error=True)
