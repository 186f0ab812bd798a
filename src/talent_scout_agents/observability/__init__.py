"""Observability: structured logging and optional tracing."""

from talent_scout_agents.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
    unbind_run_context,
)
from talent_scout_agents.observability.tracing import (
    configure_tracing,
    disable_tracing,
    get_tracer,
    trace_discovery_run,
    trace_span,
)

__all__ = [
    "bind_run_context",
    "clear_run_context",
    "configure_logging",
    "configure_tracing",
    "disable_tracing",
    "get_tracer",
    "trace_discovery_run",
    "trace_span",
    "unbind_run_context",
]
