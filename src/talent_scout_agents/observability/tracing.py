"""Optional OpenTelemetry tracing for discovery runs."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from talent_scout_core.config.settings import Settings

logger = structlog.get_logger()

# Module-level tracer, set by configure_tracing(); None while disabled.
_tracer: Any = None


def configure_tracing(settings: Settings) -> None:
    """Configure OpenTelemetry tracing based on settings.

    OTEL imports are deferred so the default ``none`` exporter never
    loads them.
    """
    global _tracer

    if settings.otel_exporter == "none":
        _tracer = None
        return

    from opentelemetry import trace
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider

    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)

    if settings.otel_exporter == "console":
        from opentelemetry.sdk.trace.export import (
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )

        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    elif settings.otel_exporter == "otlp":
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.trace.export import BatchSpanProcessor

        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otel_endpoint))
        )

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer("talent-scout")
    logger.info("tracing_configured", exporter=settings.otel_exporter)


def disable_tracing() -> None:
    """Drop the module tracer; spans become no-ops."""
    global _tracer
    _tracer = None


def get_tracer() -> Any:
    """Return the active tracer, or None when tracing is disabled."""
    return _tracer


@asynccontextmanager
async def trace_span(name: str, **attributes: Any) -> AsyncGenerator[Any, None]:
    """Wrap a block in a span; yields the span or None when disabled."""
    if _tracer is None:
        yield None
        return

    with _tracer.start_as_current_span(name) as span:
        for key, value in attributes.items():
            span.set_attribute(key, value)
        yield span


@asynccontextmanager
async def trace_discovery_run(run_id: str) -> AsyncGenerator[Any, None]:
    """Root span covering one discovery pipeline invocation."""
    async with trace_span("discovery.run", **{"discovery.run_id": run_id}) as span:
        yield span
