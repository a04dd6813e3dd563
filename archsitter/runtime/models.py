"""Base models shared by every task output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model whose JSON form uses camelCase keys.

    Accepts both the camelCase alias and the Python field name on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_json_dict(self) -> dict:
        """Dump with camelCase keys, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Artifact(CamelModel):
    """File produced by a task, as reported by the agent."""

    path: str | None = None
    type: str | None = None
    format: str | None = None
    label: str | None = None
    language: str | None = None


class TaskOutput(CamelModel):
    """Base for every task's structured output."""

    artifacts: list[Artifact] = Field(description="Files written by the task")


class PlanningOutput(TaskOutput):
    """Output of a planning task that reports its content inline instead of as files."""

    artifacts: list[Artifact] = Field(default_factory=list, description="Files written, if any")
