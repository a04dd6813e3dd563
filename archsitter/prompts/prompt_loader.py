"""
Prompt loader for process tasks.

Each process package ships a ``prompts.yaml`` next to its ``tasks.py``
holding one entry per task name:

    decision-analysis:
      role: senior software architect and decision analyst
      task: Analyze whether the decision warrants an ADR
      instructions:
        - Evaluate if decision is architecturally significant
      output_format: optional free-text override

Loaded files are cached by path.
"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from archsitter.runtime.errors import ArchsitterError

logger = logging.getLogger(__name__)

# Global cache for loaded prompt files
_prompt_cache: dict[Path, dict[str, "TaskPrompt"]] = {}
_cache_lock = threading.Lock()


class PromptLoadError(ArchsitterError):
    """Exception raised when a prompt file or entry cannot be loaded."""

    pass


@dataclass(frozen=True)
class TaskPrompt:
    """Prompt text for one task."""

    role: str
    task: str
    instructions: list[str] = field(default_factory=list)
    output_format: str | None = None


def _parse_entry(task_name: str, entry: object, prompt_file: Path) -> TaskPrompt:
    if not isinstance(entry, dict):
        raise PromptLoadError(f"Prompt entry '{task_name}' in {prompt_file} must be a mapping")

    missing = [key for key in ("role", "task") if not entry.get(key)]
    if missing:
        raise PromptLoadError(
            f"Prompt entry '{task_name}' in {prompt_file} is missing: {', '.join(missing)}"
        )

    instructions = entry.get("instructions") or []
    if not isinstance(instructions, list):
        raise PromptLoadError(
            f"Prompt entry '{task_name}' in {prompt_file} has non-list instructions"
        )

    return TaskPrompt(
        role=str(entry["role"]).strip(),
        task=str(entry["task"]).strip(),
        instructions=[str(line).strip() for line in instructions],
        output_format=entry.get("output_format"),
    )


def load_prompts(prompt_file: Path, use_cache: bool = True) -> dict[str, TaskPrompt]:
    """
    Load every task prompt from a prompts.yaml file.

    Args:
        prompt_file: Path to the YAML file
        use_cache: Whether to use cached prompts (default: True)

    Returns:
        Mapping of task name to TaskPrompt

    Raises:
        PromptLoadError: If the file cannot be read or parsed
    """
    prompt_file = Path(prompt_file)

    with _cache_lock:
        if use_cache and prompt_file in _prompt_cache:
            return _prompt_cache[prompt_file]

    try:
        raw = yaml.safe_load(prompt_file.read_text(encoding="utf-8")) or {}
    except FileNotFoundError:
        error_msg = f"Prompt file not found: {prompt_file}"
        logger.error(error_msg)
        raise PromptLoadError(error_msg) from None
    except PermissionError:
        error_msg = f"Permission denied reading prompt file: {prompt_file}"
        logger.error(error_msg)
        raise PromptLoadError(error_msg) from None
    except yaml.YAMLError as e:
        error_msg = f"Invalid YAML in prompt file {prompt_file}: {e}"
        logger.error(error_msg)
        raise PromptLoadError(error_msg) from e

    if not isinstance(raw, dict):
        raise PromptLoadError(f"Prompt file {prompt_file} must contain a mapping of task names")

    prompts = {name: _parse_entry(name, entry, prompt_file) for name, entry in raw.items()}
    logger.debug(f"Loaded {len(prompts)} prompts from {prompt_file}")

    with _cache_lock:
        _prompt_cache[prompt_file] = prompts

    return prompts


def load_task_prompt(prompt_file: Path, task_name: str) -> TaskPrompt:
    """
    Load the prompt for a single task.

    Raises:
        PromptLoadError: If the file cannot be loaded or has no entry for the task
    """
    prompts = load_prompts(prompt_file)
    try:
        return prompts[task_name]
    except KeyError:
        raise PromptLoadError(f"No prompt for task '{task_name}' in {prompt_file}") from None


def clear_prompt_cache() -> None:
    """Clear the prompt cache."""
    with _cache_lock:
        _prompt_cache.clear()
    logger.debug("Prompt cache cleared")
