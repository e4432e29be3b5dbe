"""OpenTelemetry tracing helpers for oho.

Provides a thin wrapper around the OpenTelemetry API so the bridge can call
``get_tracer()`` without caring whether the SDK is installed.  When the SDK
is *not* configured the API returns no-op implementations.

Usage::

    from oho.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("oho.tool.call") as span:
        span.set_attribute(ATTR_TOOL_NAME, "session_list")

To activate real tracing, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install oho[otel]``).  Spans are exported
to stderr because stdout carries the JSON-RPC stream.
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used throughout oho instrumentation
# ---------------------------------------------------------------------------

ATTR_RPC_METHOD = "oho.rpc.method"
ATTR_TOOL_NAME = "oho.tool.name"
ATTR_TOOL_IS_ERROR = "oho.tool.is_error"
ATTR_SERVER_URL = "oho.server.url"

_INSTRUMENTATION_NAME = "oho"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(*, service_name: str = "oho") -> None:
    """Configure OpenTelemetry tracing with a stderr span exporter.

    Raises
    ------
    ImportError
        If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace.export import SimpleSpanProcessor  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install oho[otel]"
        )
        raise ImportError(msg) from exc

    resource = Resource.create({"service.name": service_name})  # pyright: ignore[reportUnknownVariableType,reportUnknownMemberType]
    provider = TracerProvider(resource=resource)  # pyright: ignore[reportUnknownVariableType]
    _add_stderr_exporter(provider, SimpleSpanProcessor)
    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]


def _add_stderr_exporter(provider: Any, processor_cls: Any) -> None:
    from opentelemetry.sdk.trace.export import ConsoleSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]

    provider.add_span_processor(processor_cls(ConsoleSpanExporter(out=sys.stderr)))
