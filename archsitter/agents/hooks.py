"""Agent lifecycle hooks for observability.

Records timing and logs lifecycle events for every Strands agent a task
runs. Registered by ``AgentProcessContext``.
"""

import logging
import time

from opentelemetry import trace
from strands.hooks import (
    AfterInvocationEvent,
    BeforeInvocationEvent,
    HookProvider,
    HookRegistry,
)

logger = logging.getLogger(__name__)


class TaskAgentHooks(HookProvider):
    """Observability hooks for task agent invocations.

    Purely observational: never retries or changes agent behaviour.
    """

    def __init__(self, task_name: str):
        self.task_name = task_name
        self._start_time: float | None = None
        self.execution_time: float = 0.0

    def register_hooks(self, registry: HookRegistry, **kwargs) -> None:
        registry.add_callback(BeforeInvocationEvent, self._on_before_invocation)
        registry.add_callback(AfterInvocationEvent, self._on_after_invocation)

    def _on_before_invocation(self, event: BeforeInvocationEvent) -> None:
        self._start_time = time.time()
        agent_name = getattr(event.agent, "name", "unknown")
        logger.info(f"Agent {agent_name} started task {self.task_name}")

    def _on_after_invocation(self, event: AfterInvocationEvent) -> None:
        self.execution_time = time.time() - (self._start_time or time.time())
        agent_name = getattr(event.agent, "name", "unknown")

        result = getattr(event, "result", None)
        if result is None:
            logger.warning(
                f"Agent {agent_name} finished task {self.task_name} in "
                f"{self.execution_time:.2f}s with no result"
            )
            return

        stop_reason = getattr(result, "stop_reason", "unknown")
        logger.info(
            f"Agent {agent_name} finished task {self.task_name} in "
            f"{self.execution_time:.2f}s (stop_reason={stop_reason})"
        )

        span = trace.get_current_span()
        span.set_attribute("agent.name", agent_name)
        span.set_attribute("agent.execution_time_seconds", self.execution_time)
        span.set_attribute("agent.stop_reason", str(stop_reason))
