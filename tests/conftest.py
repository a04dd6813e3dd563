"""Shared test fixtures and helpers.

Process tests drive a process end to end with a ``ScriptedProcessContext``
and canned task responses; the fixtures here keep that boilerplate short.
"""

import pytest

from archsitter.prompts.prompt_loader import clear_prompt_cache
from archsitter.testing import ScriptedProcessContext


@pytest.fixture(autouse=True)
def _fresh_prompt_cache():
    """Each test loads prompts.yaml files from disk."""
    clear_prompt_cache()
    yield
    clear_prompt_cache()


@pytest.fixture(autouse=True)
def _no_trace_export(monkeypatch):
    """Keep tests from exporting traces or picking up a developer's LLM settings."""
    monkeypatch.setenv("OTEL_TRACES_EXPORTER", "none")
    monkeypatch.delenv("LLM_PROVIDER", raising=False)


@pytest.fixture
def make_ctx():
    """Factory for a scripted context: ``make_ctx(responses, approvals=None)``."""

    def _make(responses, approvals=None, **kwargs):
        return ScriptedProcessContext(responses, approvals, **kwargs)

    return _make


@pytest.fixture
def md():
    """Factory for a markdown artifact entry as an agent reports it."""

    def _md(path, **extra):
        return {"path": path, "format": "markdown", **extra}

    return _md
