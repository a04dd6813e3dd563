"""Exception hierarchy for process execution."""

from typing import Any


class ArchsitterError(Exception):
    """Base class for all archsitter errors."""


class TaskExecutionError(ArchsitterError):
    """Raised when a task cannot produce a result.

    Attributes:
        task_name: Name of the task that failed
        error_type: One of "token_limit", "transient", "agent_error", "validation"
    """

    def __init__(self, task_name: str, message: str, error_type: str = "agent_error"):
        super().__init__(f"Task '{task_name}' failed: {message}")
        self.task_name = task_name
        self.error_type = error_type


class TaskOutputValidationError(TaskExecutionError):
    """Raised when a task result does not match the task's output model."""

    def __init__(self, task_name: str, errors: list[dict[str, Any]]):
        summary = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in errors[:5]
        )
        super().__init__(task_name, f"output failed validation ({summary})", "validation")
        self.errors = errors


class ProcessHalted(ArchsitterError):
    """Raised when a reviewer rejects a breakpoint."""

    def __init__(self, breakpoint_title: str, feedback: str | None = None):
        message = f"Process halted at breakpoint '{breakpoint_title}'"
        if feedback:
            message = f"{message}: {feedback}"
        super().__init__(message)
        self.breakpoint_title = breakpoint_title
        self.feedback = feedback


class UnknownProcessError(ArchsitterError, KeyError):
    """Raised when a process id or slug is not in the registry."""

    def __init__(self, process_id: str):
        super().__init__(f"Unknown process: {process_id}")
        self.process_id = process_id

    def __str__(self) -> str:
        return self.args[0]


class ScriptExhaustedError(ArchsitterError):
    """Raised by the scripted context when no response is left for a task."""

    def __init__(self, task_name: str):
        super().__init__(f"No scripted response left for task '{task_name}'")
        self.task_name = task_name
