"""Strategic domain-driven design: subdomains, bounded contexts and context maps."""

from .models import DddStrategicModelingInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "DddStrategicModelingInputs", "process"]
