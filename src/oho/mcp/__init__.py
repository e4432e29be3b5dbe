"""MCP bridge — exposes OpenCode endpoints as Model Context Protocol tools."""

from oho.mcp.errors import MissingArgumentError, ToolError, UnknownToolError
from oho.mcp.models import (
    CallToolResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolDescriptor,
)
from oho.mcp.server import MCPBridge
from oho.mcp.tools import Tool, ToolRegistry, default_registry

__all__ = [
    "CallToolResult",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPBridge",
    "MissingArgumentError",
    "Tool",
    "ToolDescriptor",
    "ToolError",
    "ToolRegistry",
    "UnknownToolError",
    "default_registry",
]
