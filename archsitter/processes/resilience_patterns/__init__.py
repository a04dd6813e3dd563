"""Resilience pattern selection, implementation, chaos testing and runbooks."""

from .models import ResiliencePatternsInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "ResiliencePatternsInputs", "process"]
