"""Declarative task definitions.

A task is a prompt for a named agent plus the pydantic model its JSON
response must satisfy. Definitions carry no execution logic: a
``ProcessContext`` builds the descriptor with ``TaskDefinition.build``
and decides how to obtain the result.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_core import to_jsonable_python

from archsitter.prompts.prompt_loader import TaskPrompt, load_task_prompt
from archsitter.runtime.errors import TaskOutputValidationError
from archsitter.runtime.models import TaskOutput

logger = logging.getLogger(__name__)


def to_context(args: dict[str, Any]) -> dict[str, Any]:
    """Convert task args (which may hold models) into camelCase JSON data.

    Top-level args that are None are left out, as are unset model fields.
    """
    data = to_jsonable_python(args, by_alias=True, exclude_none=True)
    return {key: value for key, value in data.items() if value is not None}


def render_template(template: str, context: dict[str, Any]) -> str:
    """Fill {placeholders} from the context, leaving the text as-is when one is missing."""
    try:
        return template.format_map(context)
    except (KeyError, IndexError, AttributeError, TypeError, ValueError):
        return template


def _schema_type(prop: dict[str, Any]) -> str:
    if "type" in prop:
        return prop["type"]
    if "$ref" in prop or "allOf" in prop:
        return "object"
    for option in prop.get("anyOf", []):
        if option.get("type") != "null":
            return _schema_type(option)
    return "any"


@dataclass(frozen=True)
class TaskDefinition:
    """One agent task.

    Attributes:
        name: Task name, unique within its process (e.g. "adr-drafting")
        title: Title template, formatted with the task args
        agent_name: Name of the agent persona that runs the task
        output_model: Pydantic model the agent output must validate against
        labels: Free-form labels for cataloguing
        prompt_source: Path to the prompts.yaml holding this task's prompt
        kind: Executor kind; every task here is an agent task
    """

    name: str
    title: str
    agent_name: str
    output_model: type[TaskOutput]
    labels: tuple[str, ...] = field(default_factory=tuple)
    prompt_source: Path | None = None
    kind: str = "agent"

    def prompt(self) -> TaskPrompt:
        """Load this task's prompt text."""
        return load_task_prompt(self.prompt_source, self.name)

    def render_title(self, args: dict[str, Any]) -> str:
        """Format the title template with the task args."""
        return render_template(self.title, to_context(args))

    def output_schema(self) -> dict[str, Any]:
        """JSON Schema of the expected output, with camelCase property names."""
        return self.output_model.model_json_schema(by_alias=True)

    def output_format(self) -> str:
        """Describe the expected JSON shape for the prompt."""
        prompt = self.prompt()
        if prompt.output_format:
            return prompt.output_format

        schema = self.output_schema()
        fields = [
            f"{name} ({_schema_type(prop)})" for name, prop in schema.get("properties", {}).items()
        ]
        return f"JSON with {', '.join(fields)}"

    def build(self, args: dict[str, Any], effect_id: str) -> dict[str, Any]:
        """Build the task descriptor handed to an executor.

        Args:
            args: Task arguments; become the prompt context
            effect_id: Identifier of this task call

        Returns:
            Descriptor dict with kind, title, agent, io and labels
        """
        prompt = self.prompt()
        context = to_context(args)
        return {
            "kind": self.kind,
            "title": render_template(self.title, context),
            "agent": {
                "name": self.agent_name,
                "prompt": {
                    "role": prompt.role,
                    "task": render_template(prompt.task, context),
                    "context": context,
                    "instructions": [
                        render_template(line, context) for line in prompt.instructions
                    ],
                    "outputFormat": self.output_format(),
                },
                "outputSchema": self.output_schema(),
            },
            "io": {
                "inputJsonPath": f"tasks/{effect_id}/input.json",
                "outputJsonPath": f"tasks/{effect_id}/result.json",
            },
            "labels": [render_template(label, context) for label in self.labels],
        }

    def parse_output(self, raw: Any) -> TaskOutput:
        """Validate a raw result into the output model.

        Raises:
            TaskOutputValidationError: If the result does not match the model
        """
        if isinstance(raw, self.output_model):
            return raw
        if isinstance(raw, TaskOutput):
            raw = raw.model_dump(by_alias=True)
        try:
            if isinstance(raw, str | bytes):
                return self.output_model.model_validate_json(raw)
            return self.output_model.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Output of task '{self.name}' failed validation: {e.error_count()} errors")
            raise TaskOutputValidationError(self.name, e.errors()) from e


def define_task(
    name: str,
    *,
    title: str,
    agent: str,
    output_model: type[TaskOutput],
    labels: list[str] | tuple[str, ...] = (),
    prompt_source: Path,
) -> TaskDefinition:
    """Declare a task. Used at import time by each process's tasks module."""
    return TaskDefinition(
        name=name,
        title=title,
        agent_name=agent,
        output_model=output_model,
        labels=tuple(labels),
        prompt_source=prompt_source,
    )
