"""Process context that runs tasks with Strands agents.

Each task call creates a fresh ``strands.Agent`` whose system prompt is
built from the task's role, instructions and output format, and whose
``structured_output_model`` is the task's output model. Transient
network errors are retried; every other failure surfaces as a
``TaskExecutionError``.
"""

import json
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from strands import Agent

from archsitter.agents.hooks import TaskAgentHooks
from archsitter.agents.model_provider import create_model
from archsitter.config import TASK_MAX_RETRIES, TASK_RETRY_DELAY_SECONDS, get_agent_profile
from archsitter.runtime.context import (
    BreakpointRequest,
    BreakpointResponse,
    ProcessContext,
    TaskCall,
)
from archsitter.runtime.errors import TaskExecutionError
from archsitter.runtime.task import TaskDefinition
from archsitter.telemetry.spans import record_error, task_span

logger = logging.getLogger(__name__)

Approver = Callable[[BreakpointRequest], BreakpointResponse | bool]


# =============================================================================
# Error Handling Helpers
# =============================================================================

_TOKEN_LIMIT_INDICATORS = [
    "maxtoken",
    "max_token",
    "max tokens",
    "context length",
    "too long",
    "exceeds the max",
    "input is too long",
    "input too large",
]

_TRANSIENT_INDICATORS = [
    "response ended prematurely",
    "connection reset",
    "connection aborted",
    "broken pipe",
    "timed out",
    "read timed out",
    "network is unreachable",
    "internal server error",
    "throttling",
    "service unavailable",
]


def _error_chain_text(error: BaseException) -> str:
    """Lower-cased text of an error and its __cause__ chain."""
    parts = [str(error).lower()]
    cause = error.__cause__
    while cause:
        parts.append(str(cause).lower())
        cause = cause.__cause__
    return " ".join(parts)


def _is_token_limit_error(error: BaseException) -> bool:
    combined = _error_chain_text(error)
    return any(indicator in combined for indicator in _TOKEN_LIMIT_INDICATORS)


def _is_transient_error(error: BaseException) -> bool:
    """Check if an error is a transient network error worth retrying.

    Walks the full exception chain to catch errors wrapped by the
    Strands SDK's EventLoopException.
    """
    combined = _error_chain_text(error)
    return any(indicator in combined for indicator in _TRANSIENT_INDICATORS)


def _classify_error(error: BaseException) -> str:
    if _is_token_limit_error(error):
        return "token_limit"
    if _is_transient_error(error):
        return "transient"
    return "agent_error"


def _get_user_friendly_error(error: BaseException, task_name: str) -> str:
    if _is_token_limit_error(error):
        return (
            f"Token limit exceeded while running {task_name}. "
            "Shorten the process inputs or raise DEFAULT_MAX_TOKENS in .env."
        )
    return str(error)


# =============================================================================
# Prompt Assembly
# =============================================================================


def build_system_prompt(descriptor: dict[str, Any]) -> str:
    """System prompt for a task agent."""
    prompt = descriptor["agent"]["prompt"]
    lines = [f"You are a {prompt['role']}.", "", "## Instructions"]
    lines.extend(f"- {instruction}" for instruction in prompt["instructions"])
    lines.extend(["", "## Output", prompt["outputFormat"]])
    return "\n".join(lines)


def build_task_query(descriptor: dict[str, Any]) -> str:
    """User message for a task agent: the task statement plus its JSON context."""
    prompt = descriptor["agent"]["prompt"]
    context = json.dumps(prompt["context"], indent=2, default=str)
    return f"{prompt['task']}\n\n## Context\n```json\n{context}\n```"


# =============================================================================
# Context
# =============================================================================


class AgentProcessContext(ProcessContext):
    """Runs tasks with Strands agents and asks an approver at breakpoints.

    Args:
        approver: Callable answering breakpoints. Returns a BreakpointResponse
            or a bool. When omitted, breakpoints are approved automatically.
        output_dir: When set, each task's descriptor and validated result are
            written to ``<output_dir>/tasks/<effect_id>/{input,result}.json``.
        run_id: Optional run identifier.
        model_factory: Callable creating the Strands model (defaults to
            ``create_model``).
    """

    def __init__(
        self,
        approver: Approver | None = None,
        output_dir: str | Path | None = None,
        run_id: str | None = None,
        model_factory: Callable[..., Any] = create_model,
    ):
        super().__init__(run_id=run_id)
        self.approver = approver
        self.output_dir = Path(output_dir) if output_dir else None
        self.model_factory = model_factory

    def _create_agent(self, task_def: TaskDefinition, descriptor: dict[str, Any]) -> Agent:
        profile = get_agent_profile(task_def.agent_name)
        model = self.model_factory(
            tier=profile.model_tier,
            max_tokens=profile.max_tokens,
            temperature=profile.temperature,
            **profile.timeout_config.to_dict(),
        )
        return Agent(
            system_prompt=build_system_prompt(descriptor),
            name=task_def.agent_name,
            model=model,
            hooks=[TaskAgentHooks(task_def.name)],
            structured_output_model=task_def.output_model,
            trace_attributes={
                "task.name": task_def.name,
                "process.run_id": self.run_id,
                **profile.trace_attributes,
            },
            callback_handler=None,
        )

    def _write_json(self, relative_path: str, data: Any) -> None:
        if self.output_dir is None:
            return
        path = self.output_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")

    def _invoke(self, task_def: TaskDefinition, descriptor: dict[str, Any]) -> BaseModel:
        query = build_task_query(descriptor)
        for attempt in range(TASK_MAX_RETRIES + 1):
            try:
                result = self._create_agent(task_def, descriptor)(query)
            except Exception as e:
                if _is_transient_error(e) and attempt < TASK_MAX_RETRIES:
                    logger.warning(
                        f"Transient error in task {task_def.name} "
                        f"(attempt {attempt + 1}/{TASK_MAX_RETRIES + 1}), "
                        f"retrying in {TASK_RETRY_DELAY_SECONDS}s: {e}"
                    )
                    time.sleep(TASK_RETRY_DELAY_SECONDS)
                    continue
                raise

            output = getattr(result, "structured_output", None)
            if output is None:
                raise TaskExecutionError(
                    task_def.name, "agent returned no structured output", "agent_error"
                )
            return output

        # Unreachable: the last attempt either returns or raises
        raise TaskExecutionError(task_def.name, "retries exhausted", "transient")

    def _run_task(self, task_def: TaskDefinition, call: TaskCall) -> BaseModel:
        descriptor = call.descriptor
        self._write_json(descriptor["io"]["inputJsonPath"], descriptor)

        with task_span(task_def.name, task_def.agent_name, call.effect_id) as span:
            try:
                output = self._invoke(task_def, descriptor)
            except TaskExecutionError as e:
                record_error(span, e, task_def.name)
                raise
            except Exception as e:
                error_type = _classify_error(e)
                logger.error(
                    f"Task {task_def.name} failed: {e}",
                    extra={"task": task_def.name, "error_type": error_type},
                )
                record_error(span, e, task_def.name)
                raise TaskExecutionError(
                    task_def.name, _get_user_friendly_error(e, task_def.name), error_type
                ) from e

        self._write_json(
            descriptor["io"]["outputJsonPath"], output.model_dump(mode="json", by_alias=True)
        )
        return output

    def _request_approval(self, request: BreakpointRequest) -> BreakpointResponse:
        if self.approver is None:
            logger.warning(f"No approver configured, auto-approving breakpoint '{request.title}'")
            return BreakpointResponse(approved=True)

        answer = self.approver(request)
        if isinstance(answer, BreakpointResponse):
            return answer
        return BreakpointResponse(approved=bool(answer))
