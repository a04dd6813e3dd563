"""API design and specification with security, performance and quality gates."""

from .models import ApiDesignInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "ApiDesignInputs", "process"]
