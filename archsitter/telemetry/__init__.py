"""Telemetry and observability for archsitter.

Logging setup plus OpenTelemetry tracing built on Strands' telemetry
support. Process and task spans wrap the automatic agent/LLM/tool spans
created by Strands.

Usage:
    from archsitter.telemetry import init_telemetry, process_span

    init_telemetry()

    with process_span("adr-documentation", run_id="run-1"):
        ...

Environment Variables:
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    OTEL_EXPORTER_OTLP_ENDPOINT: OTLP collector endpoint - default: http://localhost:4317
    OTEL_SERVICE_NAME: Service name for traces - default: archsitter
    OTEL_TRACES_EXPORTER: Exporter type (otlp, console, none) - default: none
    OTEL_SDK_DISABLED: Disable all telemetry - default: false
"""

from .config import (
    ExporterType,
    TelemetryConfig,
    init_telemetry,
    is_telemetry_enabled,
    shutdown_telemetry,
)
from .spans import (
    get_tracer,
    process_span,
    record_error,
    task_span,
)

__all__ = [
    # Configuration
    "ExporterType",
    "TelemetryConfig",
    "init_telemetry",
    "shutdown_telemetry",
    "is_telemetry_enabled",
    # Spans
    "get_tracer",
    "process_span",
    "task_span",
    "record_error",
]
