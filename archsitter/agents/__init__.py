"""Strands model creation and agent lifecycle hooks."""
