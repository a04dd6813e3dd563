"""Structured evaluation and selection of a technology for a project."""

from .models import TechStackEvaluationInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "TechStackEvaluationInputs", "process"]
