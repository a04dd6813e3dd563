"""Cloud-native architecture design from strategy through infrastructure as code."""

from .models import CloudArchitectureInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "CloudArchitectureInputs", "process"]
