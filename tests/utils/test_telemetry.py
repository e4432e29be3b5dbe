"""Tests for the telemetry helpers."""

from __future__ import annotations

import builtins
from typing import Any
from unittest.mock import patch

import pytest
from opentelemetry import trace

from oho.utils.telemetry import ATTR_TOOL_NAME, configure_telemetry, get_tracer


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        assert isinstance(get_tracer("oho.test"), trace.Tracer)

    def test_spans_work_without_sdk(self) -> None:
        tracer = get_tracer()
        with tracer.start_as_current_span("oho.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, "session_list")


class TestConfigureTelemetry:
    def test_missing_sdk_raises_helpful_error(self) -> None:
        real_import = builtins.__import__

        def fake_import(name: str, *args: Any, **kwargs: Any) -> Any:
            if name.startswith("opentelemetry.sdk"):
                raise ImportError(name)
            return real_import(name, *args, **kwargs)

        with (
            patch("builtins.__import__", side_effect=fake_import),
            pytest.raises(ImportError, match="oho\\[otel\\]"),
        ):
            configure_telemetry()
