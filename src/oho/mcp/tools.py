"""Tool table — the OpenCode endpoints exposed as MCP tools.

Each :class:`Tool` pairs a static :class:`ToolDescriptor` with a handler
that performs exactly one call through :class:`OpencodeClient` and returns
the raw response body.  :func:`default_registry` builds the table once; the
bridge only ever looks tools up by name.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from oho.client.client import OpencodeClient
from oho.mcp.errors import MissingArgumentError, UnknownToolError
from oho.mcp.models import ToolDescriptor

ToolHandler = Callable[[OpencodeClient, dict[str, Any]], str]


@dataclass(frozen=True)
class Tool:
    descriptor: ToolDescriptor
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Name-to-tool map that keeps declaration order for ``tools/list``.

    Usage::

        registry = ToolRegistry()
        registry.register(tool)

        registry.descriptors()                 # ordered, for tools/list
        registry.call(client, "session_list", {})
    """

    def __init__(self, tools: Iterable[Tool] = ()) -> None:
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: Tool) -> None:
        if tool.name in self._tools:
            msg = f"Duplicate tool name: {tool.name}"
            raise ValueError(msg)
        self._tools[tool.name] = tool

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[ToolDescriptor]:
        return [tool.descriptor for tool in self._tools.values()]

    def call(self, client: OpencodeClient, name: str, arguments: dict[str, Any]) -> str:
        """Run the named tool and return its text.

        Raises:
            UnknownToolError: *name* is not registered.
            MissingArgumentError: A required argument is missing.
            OhoClientError: The backend call failed.
        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool.handler(client, arguments)


# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------


def _require(arguments: dict[str, Any], key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value:
        raise MissingArgumentError(key)
    return value


def _optional(arguments: dict[str, Any], key: str) -> str:
    value = arguments.get(key)
    return value if isinstance(value, str) else ""


def _segment(value: str) -> str:
    return quote(value, safe="")


def _schema(properties: Iterable[str] = (), required: Iterable[str] = ()) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {prop: {"type": "string"} for prop in properties},
        "required": list(required),
    }


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _get(path: str) -> ToolHandler:
    """Handler for a fixed GET endpoint that takes no arguments."""

    def handler(client: OpencodeClient, arguments: dict[str, Any]) -> str:
        return client.get(path)

    return handler


def session_create(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    body: dict[str, str] = {}
    for key in ("title", "path"):
        value = _optional(arguments, key)
        if value:
            body[key] = value
    return client.post("/session", body)


def session_get(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    session_id = _require(arguments, "sessionId")
    return client.get(f"/session/{_segment(session_id)}")


def session_delete(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    session_id = _require(arguments, "sessionId")
    body = client.delete(f"/session/{_segment(session_id)}")
    return f"Session {session_id} deleted: {body}"


def message_list(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    session_id = _require(arguments, "sessionId")
    return client.get(f"/session/{_segment(session_id)}/message")


def message_add(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    session_id = _require(arguments, "sessionId")
    content = _require(arguments, "content")
    body = {"parts": [{"type": "text", "text": content}]}
    return client.post(f"/session/{_segment(session_id)}/message", body)


def file_list(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    path = _optional(arguments, "path")
    if path:
        return client.get("/file", params={"path": path})
    return client.get("/file")


def file_content(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    path = _require(arguments, "path")
    return client.get("/file/" + quote(path.lstrip("/"), safe="/"))


def find_text(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    pattern = _require(arguments, "pattern")
    return client.get("/find/text", params={"q": pattern})


def find_file(client: OpencodeClient, arguments: dict[str, Any]) -> str:
    query = _require(arguments, "query")
    return client.get("/find/file", params={"q": query})


# ---------------------------------------------------------------------------
# Static table
# ---------------------------------------------------------------------------


def _tool(
    name: str,
    description: str,
    handler: ToolHandler,
    properties: Iterable[str] = (),
    required: Iterable[str] = (),
) -> Tool:
    descriptor = ToolDescriptor(
        name=name,
        description=description,
        input_schema=_schema(properties, required),
    )
    return Tool(descriptor=descriptor, handler=handler)


def default_tools() -> list[Tool]:
    """The sixteen OpenCode tools, in ``tools/list`` order."""
    return [
        _tool("session_list", "List all OpenCode sessions", _get("/session")),
        _tool(
            "session_create",
            "Create a new OpenCode session",
            session_create,
            properties=("title", "path"),
        ),
        _tool(
            "session_get",
            "Get details of a session",
            session_get,
            properties=("sessionId",),
            required=("sessionId",),
        ),
        _tool(
            "session_delete",
            "Delete a session",
            session_delete,
            properties=("sessionId",),
            required=("sessionId",),
        ),
        _tool("session_status", "Get the status of all sessions", _get("/session/status")),
        _tool(
            "message_list",
            "List all messages in a session",
            message_list,
            properties=("sessionId",),
            required=("sessionId",),
        ),
        _tool(
            "message_add",
            "Send a message to a session",
            message_add,
            properties=("sessionId", "content"),
            required=("sessionId", "content"),
        ),
        _tool("config_get", "Get the OpenCode configuration", _get("/config")),
        _tool("project_list", "List all projects", _get("/project")),
        _tool("project_current", "Get the current project", _get("/project/current")),
        _tool("provider_list", "List all available AI providers", _get("/provider")),
        _tool(
            "file_list",
            "List files in a directory",
            file_list,
            properties=("path",),
        ),
        _tool(
            "file_content",
            "Read the content of a file",
            file_content,
            properties=("path",),
            required=("path",),
        ),
        _tool(
            "find_text",
            "Search for text in the project",
            find_text,
            properties=("pattern",),
            required=("pattern",),
        ),
        _tool(
            "find_file",
            "Search for files by name",
            find_file,
            properties=("query",),
            required=("query",),
        ),
        _tool("global_health", "Check OpenCode Server health", _get("/global/health")),
    ]


def default_registry() -> ToolRegistry:
    return ToolRegistry(default_tools())
