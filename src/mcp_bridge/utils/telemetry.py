"""Tracing for bridge round trips.

Modules take a tracer from :func:`get_tracer` at import time.  Until
:func:`configure_telemetry` installs an SDK provider, the OpenTelemetry
API hands out no-op spans, so the ``otel`` extra stays optional.
"""

from __future__ import annotations

from typing import Any, Literal

from opentelemetry import trace

# Span attribute keys
ATTR_RPC_METHOD = "mcp.rpc.method"
ATTR_RPC_ID = "mcp.rpc.id"
ATTR_CONTENT_TYPE = "mcp.response.content_type"
ATTR_TOOL_NAME = "mcp.tool.name"
ATTR_ITEM_INDEX = "bridge.item.index"
ATTR_CONTINUE_ON_FAIL = "bridge.continue_on_fail"

_INSTRUMENTATION_NAME = "mcp_bridge"

Exporter = Literal["console", "otlp"]


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return the tracer for *name* (no-op until telemetry is configured)."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "mcp-bridge",
    exporter: Exporter = "console",
    otlp_endpoint: str | None = None,
) -> None:
    """Install a global tracer provider exporting bridge spans.

    ``exporter="console"`` prints each span as it ends.  ``"otlp"`` batches
    spans to *otlp_endpoint* over gRPC.

    Raises:
        ImportError: ``opentelemetry-sdk`` (or, for OTLP, the exporter
            package) is not installed.
        ValueError: ``exporter="otlp"`` without an endpoint.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = "configure_telemetry() needs opentelemetry-sdk: pip install 'mcp-bridge[otel]'"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(_span_processor(exporter, otlp_endpoint))
    trace.set_tracer_provider(provider)


def _span_processor(exporter: Exporter, otlp_endpoint: str | None) -> Any:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    if exporter == "console":
        return SimpleSpanProcessor(ConsoleSpanExporter())

    if not otlp_endpoint:
        raise ValueError("otlp exporter requires otlp_endpoint")
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
            OTLPSpanExporter,
        )
    except ImportError as exc:
        msg = "OTLP export needs opentelemetry-exporter-otlp: pip install 'mcp-bridge[otel]'"
        raise ImportError(msg) from exc
    return BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))
