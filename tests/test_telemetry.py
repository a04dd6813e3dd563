"""Tests for telemetry configuration and process/task spans."""

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from archsitter.telemetry import ExporterType, TelemetryConfig, spans
from archsitter.telemetry.spans import process_span, record_error, task_span


@pytest.fixture
def exporter(monkeypatch):
    """Route the process tracer to an in-memory exporter."""
    memory = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(memory))
    monkeypatch.setattr(spans, "get_tracer", lambda: provider.get_tracer(spans.TRACER_NAME))
    return memory


class TestTelemetryConfig:
    def test_defaults(self, monkeypatch):
        for name in (
            "OTEL_TRACES_EXPORTER",
            "LOG_LEVEL",
            "OTEL_SERVICE_NAME",
            "OTEL_EXPORTER_OTLP_ENDPOINT",
            "OTEL_SDK_DISABLED",
        ):
            monkeypatch.delenv(name, raising=False)

        config = TelemetryConfig.from_env()

        assert config.traces_exporter is ExporterType.NONE
        assert config.log_level == "INFO"
        assert config.service_name == "archsitter"
        assert config.otlp_endpoint == "http://localhost:4317"
        assert config.otel_disabled is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OTEL_TRACES_EXPORTER", "OTLP")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("OTEL_SERVICE_NAME", "arch-ci")
        monkeypatch.setenv("OTEL_SDK_DISABLED", "1")

        config = TelemetryConfig.from_env()

        assert config.traces_exporter is ExporterType.OTLP
        assert config.log_level == "DEBUG"
        assert config.service_name == "arch-ci"
        assert config.otel_disabled is True

    def test_unknown_exporter_falls_back_to_none(self, monkeypatch):
        monkeypatch.setenv("OTEL_TRACES_EXPORTER", "zipkin")

        assert TelemetryConfig.from_env().traces_exporter is ExporterType.NONE


class TestSpans:
    def test_task_span_nested_under_process_span(self, exporter):
        with process_span("specializations/software-architecture/adr-documentation", "run-1"):
            with task_span("adr-drafting", "technical-writer", "0003-adr-drafting"):
                pass

        task, process = exporter.get_finished_spans()
        assert process.name == "process:specializations/software-architecture/adr-documentation"
        assert process.attributes["process.run_id"] == "run-1"
        assert task.name == "task:adr-drafting"
        assert task.attributes["task.agent"] == "technical-writer"
        assert task.attributes["task.effect_id"] == "0003-adr-drafting"
        assert task.parent.span_id == process.context.span_id
        assert process.status.status_code is StatusCode.OK

    def test_exception_marks_span_as_error(self, exporter):
        with pytest.raises(RuntimeError):
            with task_span("adr-review", "architecture-review-board", "0005-adr-review"):
                raise RuntimeError("agent crashed")

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR
        assert span.events[0].name == "exception"

    def test_record_error_attributes(self, exporter):
        with process_span("p", "run-1") as span:
            record_error(span, ValueError("bad output"), task_name="adr-review")

        (finished,) = exporter.get_finished_spans()
        assert finished.attributes["error"] is True
        assert finished.attributes["error.type"] == "ValueError"
        assert finished.attributes["error.message"] == "bad output"
        assert finished.attributes["error.task"] == "adr-review"

    def test_failed_task_records_exception_once(self, exporter):
        with pytest.raises(ValueError):
            with task_span("adr-review", "architecture-review-board", "0005-adr-review") as span:
                error = ValueError("bad output")
                record_error(span, error, task_name="adr-review")
                raise error

        (finished,) = exporter.get_finished_spans()
        assert [event.name for event in finished.events] == ["exception"]
        assert finished.status.status_code is StatusCode.ERROR
