"""Error types raised by MCP tool handlers.

All of them surface to the MCP client as a ``tools/call`` result with
``isError`` set; the subclasses exist so logs and callers in Python can tell
bad input from an unknown tool.
"""


class ToolError(Exception):
    """Base error for a tool call that could not be completed."""


class UnknownToolError(ToolError):
    """No tool with this name is registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingArgumentError(ToolError):
    """A required argument was absent, empty, or not a string."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} is required")
