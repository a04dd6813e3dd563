"""Architecture Decision Record lifecycle: analysis, drafting, review, publication."""

from .models import AdrDocumentationInputs
from .process import SLUG, process
from .tasks import TASKS

__all__ = ["SLUG", "TASKS", "AdrDocumentationInputs", "process"]
