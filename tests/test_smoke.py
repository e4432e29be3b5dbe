"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import oho

    assert oho.__version__ == "1.0.0"


def test_cli_entrypoint() -> None:
    from oho.cli import main

    assert callable(main)


def test_mcp_exports() -> None:
    from oho.mcp import (
        CallToolResult,
        JsonRpcRequest,
        JsonRpcResponse,
        MCPBridge,
        ToolRegistry,
        default_registry,
    )

    assert MCPBridge is not None
    assert ToolRegistry is not None
    assert JsonRpcRequest is not None
    assert JsonRpcResponse is not None
    assert CallToolResult is not None
    assert len(default_registry()) == 16
