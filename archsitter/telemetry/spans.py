"""Custom spans for process and task-level tracing.

Span Hierarchy:
    process_span (root)
    └── task_span (per task call)
        └── agent_span (created by Strands)
            └── llm_span (created by Strands)
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Span, StatusCode

logger = logging.getLogger(__name__)

TRACER_NAME = "archsitter.processes"


def get_tracer() -> trace.Tracer:
    """Get the tracer used for process and task spans."""
    return trace.get_tracer(TRACER_NAME)


@contextmanager
def _traced(name: str, attributes: dict[str, Any]) -> Generator[Span, None, None]:
    with get_tracer().start_as_current_span(
        name=name,
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
            span.set_status(StatusCode.OK)
        except Exception as e:
            span.record_exception(e)
            span.set_status(StatusCode.ERROR, str(e)[:100])
            raise


@contextmanager
def process_span(
    process_id: str,
    run_id: str,
    **attributes: Any,
) -> Generator[Span, None, None]:
    """Create the root span for one process run.

    Args:
        process_id: Catalog id of the process
        run_id: Run identifier of the execution context
        **attributes: Additional span attributes

    Example:
        with process_span("adr-documentation", ctx.run_id) as span:
            result = spec.run(inputs, ctx)
            span.set_attribute("process.success", result["success"])
    """
    span_attributes = {
        "process.id": process_id,
        "process.run_id": run_id,
    }
    span_attributes.update(attributes)

    with _traced(f"process:{process_id}", span_attributes) as span:
        yield span


@contextmanager
def task_span(
    task_name: str,
    agent_name: str,
    effect_id: str,
    **attributes: Any,
) -> Generator[Span, None, None]:
    """Create a span for one task call, nested under the process span."""
    span_attributes = {
        "task.name": task_name,
        "task.agent": agent_name,
        "task.effect_id": effect_id,
    }
    span_attributes.update(attributes)

    with _traced(f"task:{task_name}", span_attributes) as span:
        yield span


def record_error(span: Span, error: Exception, task_name: str | None = None) -> None:
    """Record an error on a span with structured attributes.

    The exception event itself is added by the enclosing process or task
    span when the error propagates out of it.

    Args:
        span: The span to record the error on
        error: The exception that occurred
        task_name: Optional task name if the error came from a task call
    """
    error_message = str(error)

    span.set_attribute("error", True)
    span.set_attribute("error.type", type(error).__name__)
    span.set_attribute("error.message", error_message[:500])

    if task_name:
        span.set_attribute("error.task", task_name)

    span.set_status(StatusCode.ERROR, error_message[:100])
