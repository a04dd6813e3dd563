"""Helpers shared by every process module."""

import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from archsitter.runtime.models import Artifact, CamelModel

PROCESS_ID_PREFIX = "specializations/software-architecture"


class ProcessInputs(CamelModel):
    """Base for process input models. Unknown keys are kept."""


def process_id(slug: str) -> str:
    """Full catalog id for a process slug."""
    return f"{PROCESS_ID_PREFIX}/{slug}"


def parse_inputs(model: type[ProcessInputs], inputs: Any) -> ProcessInputs:
    """Validate raw inputs (dict or model) into the process's input model."""
    if isinstance(inputs, model):
        return inputs
    if isinstance(inputs, BaseModel):
        inputs = inputs.model_dump(by_alias=True)
    return model.model_validate(inputs or {})


def elapsed_seconds(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds()


def dump_artifacts(artifacts: Iterable[Artifact]) -> list[dict[str, Any]]:
    return [artifact.to_json_dict() for artifact in artifacts]


def dump(value: Any) -> Any:
    """JSON-ready form of task outputs (models, or lists and dicts of them)."""
    if value is None:
        return None
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list | tuple):
        return [dump(item) for item in value]
    if isinstance(value, dict):
        return {key: dump(item) for key, item in value.items()}
    return value


def metadata(slug: str, start: datetime, **extra: Any) -> dict[str, Any]:
    """Result metadata block: process id, ISO start time and extras."""
    return {"process_id": process_id(slug), "timestamp": start.isoformat(), **extra}


def error_result(
    slug: str,
    start: datetime,
    error: str,
    phase: str,
    artifacts: Iterable[Artifact] = (),
    **extra: Any,
) -> dict[str, Any]:
    """Result for a process that stopped at a failed quality gate."""
    return {
        "success": False,
        "error": error,
        "phase": phase,
        **extra,
        "artifacts": dump_artifacts(artifacts),
        "metadata": metadata(slug, start),
    }


_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def first_number(text: Any) -> float | None:
    """First number in a string such as "< 200ms p95", or None."""
    if isinstance(text, int | float):
        return float(text)
    if not isinstance(text, str):
        return None
    match = _NUMBER.search(text)
    return float(match.group()) if match else None


_DURATION_UNITS = {
    "ms": 1 / 60000,
    "s": 1 / 60,
    "sec": 1 / 60,
    "secs": 1 / 60,
    "second": 1 / 60,
    "seconds": 1 / 60,
    "m": 1.0,
    "min": 1.0,
    "mins": 1.0,
    "minute": 1.0,
    "minutes": 1.0,
    "h": 60.0,
    "hr": 60.0,
    "hrs": 60.0,
    "hour": 60.0,
    "hours": 60.0,
}
_DURATION = re.compile(r"(\d+(?:\.\d+)?)\s*([a-zA-Z]*)")


def duration_minutes(text: Any) -> float | None:
    """Parse a duration such as "< 5 minutes" or "90s" into minutes.

    A bare number is read as minutes. Returns None when no number is present.
    """
    if isinstance(text, int | float):
        return float(text)
    if not isinstance(text, str):
        return None
    match = _DURATION.search(text)
    if not match:
        return None
    value, unit = float(match.group(1)), match.group(2).lower()
    return value * _DURATION_UNITS.get(unit, 1.0)
