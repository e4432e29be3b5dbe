"""Tests for the JSON-RPC and MCP payload models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from oho.mcp.models import (
    CallToolResult,
    InitializeParams,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolDescriptor,
)


class TestJsonRpcRequest:
    def test_parse_full(self) -> None:
        req = JsonRpcRequest.model_validate_json(
            '{"jsonrpc":"2.0","id":"a1","method":"ping","params":{"x":1}}'
        )
        assert req.id == "a1"
        assert req.method == "ping"
        assert req.params == {"x": 1}

    def test_notification_has_no_id(self) -> None:
        req = JsonRpcRequest.model_validate_json('{"jsonrpc":"2.0","method":"notifications/initialized"}')
        assert req.id is None
        assert req.params is None

    def test_numeric_id_stays_int(self) -> None:
        req = JsonRpcRequest.model_validate_json('{"id":3,"method":"ping"}')
        assert req.id == 3
        assert isinstance(req.id, int)

    @pytest.mark.parametrize("raw", ["true", "false"])
    def test_rejects_boolean_id(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            JsonRpcRequest.model_validate_json(f'{{"id":{raw},"method":"ping"}}')

    def test_string_id_not_coerced(self) -> None:
        req = JsonRpcRequest.model_validate_json('{"id":"7","method":"ping"}')
        assert req.id == "7"

    def test_rejects_non_object(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcRequest.model_validate_json("[1]")


class TestJsonRpcResponse:
    def test_success_wire_form(self) -> None:
        wire = JsonRpcResponse.success(1, {"status": "pong"}).to_wire()
        assert wire == {"jsonrpc": "2.0", "id": 1, "result": {"status": "pong"}}

    def test_failure_wire_form_keeps_null_id(self) -> None:
        wire = JsonRpcResponse.failure(None, -32700, "Parse error").to_wire()
        assert wire == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32700, "message": "Parse error"},
        }

    def test_failure_with_data(self) -> None:
        wire = JsonRpcResponse.failure(2, -32601, "Method not found: x", data={"m": "x"}).to_wire()
        assert wire["error"]["data"] == {"m": "x"}
        assert "result" not in wire


class TestMCPPayloads:
    def test_initialize_params_aliases(self) -> None:
        params = InitializeParams.model_validate(
            {"protocolVersion": "2024-11-05", "clientInfo": {"name": "x", "version": "1"}}
        )
        assert params.protocol_version == "2024-11-05"
        assert params.client_info.name == "x"
        assert params.capabilities == {}

    def test_initialize_result_dump(self) -> None:
        result = InitializeResult(server_info=ServerInfo(name="oho", version="1.0.0"))
        assert result.model_dump(by_alias=True) == {
            "protocolVersion": "2024-11-05",
            "capabilities": {"tools": {}},
            "serverInfo": {"name": "oho", "version": "1.0.0"},
        }

    def test_tool_descriptor_alias(self) -> None:
        tool = ToolDescriptor(name="t", input_schema={"type": "object"})
        assert tool.model_dump(by_alias=True)["inputSchema"] == {"type": "object"}

    def test_call_tool_result(self) -> None:
        assert CallToolResult.failure("nope").model_dump(by_alias=True) == {
            "content": [{"type": "text", "text": "nope"}],
            "isError": True,
        }
        assert CallToolResult.success("ok").is_error is False
