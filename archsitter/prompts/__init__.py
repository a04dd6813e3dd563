"""Task prompt loading."""

from .prompt_loader import (
    PromptLoadError,
    TaskPrompt,
    clear_prompt_cache,
    load_prompts,
    load_task_prompt,
)

__all__ = [
    "PromptLoadError",
    "TaskPrompt",
    "clear_prompt_cache",
    "load_prompts",
    "load_task_prompt",
]
