"""``oho mcpserver`` — serve OpenCode tools to MCP clients over stdio."""

from __future__ import annotations

import sys

import click

from oho.cli_commands._output import err_console, print_tools_table
from oho.config import Settings


@click.command()
@click.option("--list-tools", is_flag=True, help="Print the tool table and exit.")
@click.option("--telemetry", is_flag=True, help="Export tracing spans to stderr.")
@click.pass_obj
def mcpserver(settings: Settings, list_tools: bool, telemetry: bool) -> None:
    """Start an MCP server on stdin/stdout.

    Each JSON-RPC request is answered by a single call to the OpenCode
    Server configured with --host/--port.
    """
    from oho.client.client import OpencodeClient
    from oho.mcp.server import MCPBridge
    from oho.mcp.tools import default_registry

    registry = default_registry()

    if list_tools:
        print_tools_table(registry.descriptors(), as_json=settings.json_output)
        return

    if telemetry:
        from oho.utils.telemetry import configure_telemetry

        try:
            configure_telemetry()
        except ImportError as exc:
            err_console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    with OpencodeClient.from_settings(settings) as client:
        bridge = MCPBridge(client, registry)
        bridge.serve(click.get_binary_stream("stdin"), click.get_binary_stream("stdout"))
