"""Deterministic execution helpers for tests and dry runs."""

from .scripted import ScriptedProcessContext

__all__ = ["ScriptedProcessContext"]
