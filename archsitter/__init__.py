"""archsitter: software-architecture workflow processes run by LLM agents."""

__version__ = "0.1.0"
