"""Tests for the agent-backed process context."""

import json
from unittest.mock import MagicMock

import pytest

from archsitter.agents.hooks import TaskAgentHooks
from archsitter.config import ModelTier
from archsitter.runtime import agent_context
from archsitter.runtime.agent_context import (
    AgentProcessContext,
    _classify_error,
    build_system_prompt,
    build_task_query,
)
from archsitter.runtime.context import BreakpointRequest, BreakpointResponse
from archsitter.runtime.errors import ProcessHalted, TaskExecutionError
from archsitter.runtime.models import TaskOutput
from archsitter.runtime.task import define_task


class Verdict(TaskOutput):
    verdict: str


@pytest.fixture
def review_task(tmp_path):
    prompts = tmp_path / "prompts.yaml"
    prompts.write_text(
        "design-review:\n"
        "  role: principal architect\n"
        "  task: Review the design of {projectName}\n"
        "  instructions:\n"
        "    - Check coupling\n",
        encoding="utf-8",
    )
    return define_task(
        "design-review",
        title="Review {projectName}",
        agent="architecture-review-board",
        output_model=Verdict,
        prompt_source=prompts,
    )


@pytest.fixture
def agent_cls(monkeypatch):
    """Replace strands.Agent in the context module and return the mock class."""
    mock_cls = MagicMock()
    mock_cls.return_value.return_value = MagicMock(
        structured_output=Verdict(verdict="approve", artifacts=[])
    )
    monkeypatch.setattr(agent_context, "Agent", mock_cls)
    monkeypatch.setattr(agent_context, "TASK_RETRY_DELAY_SECONDS", 0)
    return mock_cls


@pytest.fixture
def model_factory():
    return MagicMock(return_value=MagicMock(name="model"))


# ---------------------------------------------------------------------------
# Prompt assembly
# ---------------------------------------------------------------------------


class TestPromptAssembly:
    def test_system_prompt_and_query(self, review_task):
        descriptor = review_task.build({"projectName": "Ledger"}, "0001-design-review")

        system_prompt = build_system_prompt(descriptor)
        query = build_task_query(descriptor)

        assert system_prompt.startswith("You are a principal architect.")
        assert "- Check coupling" in system_prompt
        assert "verdict (string)" in system_prompt
        assert query.startswith("Review the design of Ledger")
        assert '"projectName": "Ledger"' in query


# ---------------------------------------------------------------------------
# Task execution
# ---------------------------------------------------------------------------


class TestRunTask:
    def test_returns_structured_output(self, agent_cls, model_factory, review_task):
        ctx = AgentProcessContext(model_factory=model_factory)

        result = ctx.task(review_task, {"projectName": "Ledger"})

        assert result.verdict == "approve"
        kwargs = agent_cls.call_args[1]
        assert kwargs["name"] == "architecture-review-board"
        assert kwargs["structured_output_model"] is Verdict
        assert kwargs["trace_attributes"]["task.name"] == "design-review"
        assert kwargs["model"] is model_factory.return_value

    def test_model_follows_agent_profile(self, agent_cls, model_factory, review_task):
        ctx = AgentProcessContext(model_factory=model_factory)

        ctx.task(review_task, {"projectName": "Ledger"})

        kwargs = model_factory.call_args[1]
        assert kwargs["tier"] is ModelTier.REASONING
        assert kwargs["temperature"] == 0.2
        assert kwargs["read_timeout"] == 300.0

    def test_writes_input_and_result(self, agent_cls, model_factory, review_task, tmp_path):
        ctx = AgentProcessContext(model_factory=model_factory, output_dir=tmp_path)

        ctx.task(review_task, {"projectName": "Ledger"})

        task_dir = tmp_path / "tasks" / "0001-design-review"
        descriptor = json.loads((task_dir / "input.json").read_text(encoding="utf-8"))
        result = json.loads((task_dir / "result.json").read_text(encoding="utf-8"))
        assert descriptor["title"] == "Review Ledger"
        assert result == {"verdict": "approve", "artifacts": []}

    def test_transient_error_is_retried(self, agent_cls, model_factory, review_task):
        agent_cls.return_value.side_effect = [
            ConnectionError("Connection reset by peer"),
            MagicMock(structured_output=Verdict(verdict="revise", artifacts=[])),
        ]
        ctx = AgentProcessContext(model_factory=model_factory)

        result = ctx.task(review_task, {"projectName": "Ledger"})

        assert result.verdict == "revise"
        assert agent_cls.return_value.call_count == 2

    def test_transient_error_gives_up_after_retries(self, agent_cls, model_factory, review_task):
        agent_cls.return_value.side_effect = TimeoutError("Read timed out")
        ctx = AgentProcessContext(model_factory=model_factory)

        with pytest.raises(TaskExecutionError) as exc_info:
            ctx.task(review_task, {"projectName": "Ledger"})

        assert exc_info.value.error_type == "transient"
        assert agent_cls.return_value.call_count == 3

    def test_token_limit_error(self, agent_cls, model_factory, review_task):
        agent_cls.return_value.side_effect = RuntimeError("Input is too long for requested model")
        ctx = AgentProcessContext(model_factory=model_factory)

        with pytest.raises(TaskExecutionError) as exc_info:
            ctx.task(review_task, {"projectName": "Ledger"})

        assert exc_info.value.error_type == "token_limit"
        assert "DEFAULT_MAX_TOKENS" in str(exc_info.value)
        assert agent_cls.return_value.call_count == 1

    def test_missing_structured_output(self, agent_cls, model_factory, review_task):
        agent_cls.return_value.return_value = MagicMock(structured_output=None)
        ctx = AgentProcessContext(model_factory=model_factory)

        with pytest.raises(TaskExecutionError, match="no structured output") as exc_info:
            ctx.task(review_task, {"projectName": "Ledger"})

        assert exc_info.value.error_type == "agent_error"


class TestClassifyError:
    def test_walks_cause_chain(self):
        try:
            try:
                raise OSError("Service Unavailable")
            except OSError as inner:
                raise RuntimeError("event loop failed") from inner
        except RuntimeError as e:
            assert _classify_error(e) == "transient"

    def test_plain_error(self):
        assert _classify_error(ValueError("bad json")) == "agent_error"


# ---------------------------------------------------------------------------
# Breakpoints
# ---------------------------------------------------------------------------


class TestApproval:
    def test_auto_approves_without_approver(self):
        ctx = AgentProcessContext(model_factory=MagicMock())

        assert ctx.breakpoint("Approve?", "Review").approved is True

    def test_bool_approver(self):
        ctx = AgentProcessContext(approver=lambda request: False, model_factory=MagicMock())

        with pytest.raises(ProcessHalted):
            ctx.breakpoint("Approve?", "Review")

    def test_response_approver_sees_request(self):
        seen: list[BreakpointRequest] = []

        def approver(request):
            seen.append(request)
            return BreakpointResponse(True, "fine")

        ctx = AgentProcessContext(approver=approver, run_id="run-7", model_factory=MagicMock())

        assert ctx.breakpoint("Approve?", "Review", context={"k": 1}).feedback == "fine"
        assert seen[0].context == {"runId": "run-7", "files": [], "k": 1}


class TestTaskAgentHooks:
    def test_records_execution_time(self):
        hooks = TaskAgentHooks("design-review")
        event = MagicMock()
        event.agent.name = "architecture-review-board"
        event.result.stop_reason = "end_turn"

        hooks._on_before_invocation(event)
        hooks._on_after_invocation(event)

        assert hooks.execution_time >= 0.0

    def test_registers_both_callbacks(self):
        registry = MagicMock()

        TaskAgentHooks("design-review").register_hooks(registry)

        assert registry.add_callback.call_count == 2
