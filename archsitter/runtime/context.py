"""Execution context handed to every process.

Processes only ever talk to a ``ProcessContext``:

    result = ctx.task(some_task, {"projectName": name})
    a, b = ctx.parallel_all([lambda: ctx.task(t1, args), lambda: ctx.task(t2, args)])
    ctx.breakpoint(question="Approve?", title="Review", context={...})

Subclasses decide how a task is executed (``_run_task``) and how a
breakpoint is answered (``_request_approval``).
"""

import concurrent.futures
import itertools
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TypeVar

from archsitter.config import MAX_PARALLEL_TASKS
from archsitter.runtime.errors import ProcessHalted
from archsitter.runtime.models import Artifact, TaskOutput
from archsitter.runtime.task import TaskDefinition

logger = logging.getLogger(__name__)

T = TypeVar("T")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass
class BreakpointRequest:
    """A pause for human review."""

    question: str
    title: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class BreakpointResponse:
    """The reviewer's answer to a breakpoint."""

    approved: bool = True
    feedback: str | None = None


@dataclass
class TaskCall:
    """Record of one task invocation."""

    effect_id: str
    task_name: str
    args: dict[str, Any]
    descriptor: dict[str, Any]


def artifact_files(
    artifacts: Sequence[Artifact], default_format: str = "markdown"
) -> list[dict[str, Any]]:
    """Breakpoint file list for artifacts that carry no format of their own."""
    files = []
    for artifact in artifacts:
        entry = {"path": artifact.path, "format": artifact.format or default_format}
        if artifact.language:
            entry["language"] = artifact.language
        if artifact.label:
            entry["label"] = artifact.label
        files.append(entry)
    return files


class ProcessContext(ABC):
    """Base execution context.

    Attributes:
        run_id: Identifier of this run
        task_calls: Every task invocation, in call order
        breakpoints: Every breakpoint request, in call order
        logs: (level, message) pairs written through ``log``
    """

    def __init__(self, run_id: str | None = None):
        self.run_id = run_id or uuid.uuid4().hex
        self.task_calls: list[TaskCall] = []
        self.breakpoints: list[BreakpointRequest] = []
        self.logs: list[tuple[str, str]] = []
        self._counter = itertools.count(1)
        self._lock = threading.Lock()
        self._local = threading.local()

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    @abstractmethod
    def _run_task(self, task_def: TaskDefinition, call: TaskCall) -> Any:
        """Execute a task call and return its raw or validated output."""

    @abstractmethod
    def _request_approval(self, request: BreakpointRequest) -> BreakpointResponse:
        """Answer a breakpoint."""

    # ------------------------------------------------------------------
    # Process-facing API
    # ------------------------------------------------------------------

    def now(self) -> datetime:
        """Current UTC time."""
        return datetime.now(UTC)

    def log(self, level: str, message: str) -> None:
        """Log a process message and keep it on the context."""
        logger.log(
            _LOG_LEVELS.get(level.lower(), logging.INFO), message, extra={"run_id": self.run_id}
        )
        with self._lock:
            self.logs.append((level, message))

    def _next_effect_id(self, task_name: str) -> str:
        with self._lock:
            return f"{next(self._counter):04d}-{task_name}"

    def task(self, task_def: TaskDefinition, args: dict[str, Any]) -> TaskOutput:
        """Run one task and return its validated output."""
        effect_id = self._next_effect_id(task_def.name)
        call = TaskCall(effect_id, task_def.name, args, task_def.build(args, effect_id))
        with self._lock:
            self.task_calls.append(call)

        started = getattr(self._local, "started", None)
        if started is not None:
            self._local.started = None
            started.set()

        logger.debug(f"Task {effect_id}: {call.descriptor['title']}")
        raw = self._run_task(task_def, call)
        return task_def.parse_output(raw)

    def parallel_all(
        self, thunks: Sequence[Callable[[], T]] | Mapping[str, Callable[[], T]]
    ) -> list[T] | dict[str, T]:
        """Run zero-argument callables concurrently.

        A list returns results in the same order; a dict returns a dict with
        the same keys. When a callable raises, the remaining ones still finish
        and the first error in input order is re-raised.
        """
        if isinstance(thunks, Mapping):
            keys = list(thunks.keys())
            calls = list(thunks.values())
        else:
            keys = None
            calls = list(thunks)

        if not calls:
            return {} if keys is not None else []

        outcomes = self._execute_all(calls)

        for _, error in outcomes:
            if error is not None:
                raise error

        results = [result for result, _ in outcomes]
        if keys is not None:
            return dict(zip(keys, results, strict=True))
        return results

    def _execute_all(
        self, calls: list[Callable[[], Any]]
    ) -> list[tuple[Any, BaseException | None]]:
        """Run the callables on a thread pool, returning (result, error) per input.

        Callables are started in input order: the next one is submitted only
        once the previous one has allocated its first effect id or returned,
        so effect ids of the first task in each callable follow input order.
        """
        started = [threading.Event() for _ in calls]

        def run(index: int) -> Any:
            self._local.started = started[index]
            try:
                return calls[index]()
            finally:
                self._local.started = None
                started[index].set()

        outcomes: list[tuple[Any, BaseException | None]] = []
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=min(MAX_PARALLEL_TASKS, len(calls))
        ) as executor:
            futures = []
            for index in range(len(calls)):
                futures.append(executor.submit(run, index))
                started[index].wait()

            for future in futures:
                try:
                    outcomes.append((future.result(), None))
                except Exception as e:
                    outcomes.append((None, e))
        return outcomes

    def breakpoint(
        self,
        question: str,
        title: str,
        context: dict[str, Any] | None = None,
        artifacts: Sequence[Artifact] = (),
    ) -> BreakpointResponse:
        """Pause for review.

        Raises:
            ProcessHalted: If the reviewer rejects
        """
        payload = {"runId": self.run_id, "files": artifact_files(artifacts)}
        payload.update(context or {})
        request = BreakpointRequest(question=question, title=title, context=payload)
        with self._lock:
            self.breakpoints.append(request)

        logger.info(f"Breakpoint: {title}")
        response = self._request_approval(request)
        if not response.approved:
            logger.warning(f"Breakpoint '{title}' rejected: {response.feedback or 'no feedback'}")
            raise ProcessHalted(title, response.feedback)
        return response
