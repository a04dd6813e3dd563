"""Data models, storage selection, data flow, governance and migration planning."""

from .models import DataArchitectureInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "DataArchitectureInputs", "process"]
