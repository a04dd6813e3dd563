"""Aligning architecture with CI/CD, deployment strategy and release practice."""

from .models import DevopsAlignmentInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "DevopsAlignmentInputs", "process"]
