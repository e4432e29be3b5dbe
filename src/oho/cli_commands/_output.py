"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from oho.mcp.models import ToolDescriptor

console = Console()
err_console = Console(stderr=True)


def print_tools_table(tools: list[ToolDescriptor], *, as_json: bool = False) -> None:
    """Pretty-print the MCP tool table, or dump it as JSON."""
    if as_json:
        data = [t.model_dump(by_alias=True) for t in tools]
        console.print_json(json.dumps(data))
        return

    table = Table(title="MCP Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = tool.input_schema.get("required", [])
        table.add_row(
            tool.name,
            _truncate(tool.description),
            ", ".join(required) or "-",
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
