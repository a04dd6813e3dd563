"""Centralized configuration for archsitter.

This module is the single source of truth for quality-gate thresholds,
agent model profiles, retry and timeout settings used by the processes
and the agent-backed runtime.

Design Principles:
- Quality-gate thresholds live here, not inline in process code
- Agent profiles are declared once and looked up by agent name
- Unknown agents fall back to a default profile
- Enums for type-safe tier values
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# =============================================================================
# Enums for Type Safety
# =============================================================================


class ModelTier(Enum):
    """Model tier for cost/quality routing."""

    HEAVY = "heavy"  # Design and synthesis tasks
    LIGHT = "light"  # Bookkeeping tasks (numbering, indexing, publishing)
    REASONING = "reasoning"  # Reviews, validation and scoring

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid tier values as strings."""
        return [tier.value for tier in cls]


# =============================================================================
# Timeout Configuration
# =============================================================================


@dataclass(frozen=True)
class TimeoutConfig:
    """Timeout configuration for model clients."""

    read_timeout: float
    connect_timeout: float
    streaming: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for passing to create_model."""
        return {
            "read_timeout": self.read_timeout,
            "connect_timeout": self.connect_timeout,
            "streaming": self.streaming,
        }


TIMEOUT_STANDARD = TimeoutConfig(read_timeout=300.0, connect_timeout=60.0)
TIMEOUT_EXTENDED = TimeoutConfig(read_timeout=600.0, connect_timeout=60.0)


# =============================================================================
# Token Limits
# =============================================================================

TOKENS_BRIEF = 2000
TOKENS_STANDARD = 5000
TOKENS_EXTENDED = 8000


# =============================================================================
# Task Execution
# =============================================================================

TASK_MAX_RETRIES = 2
TASK_RETRY_DELAY_SECONDS = 5
MAX_PARALLEL_TASKS = 4


# =============================================================================
# Quality Gates
# =============================================================================

# ADR documentation
ADR_QUALITY_THRESHOLD = 80

# API design
API_SECURITY_THRESHOLD_EXTERNAL = 80
API_SECURITY_THRESHOLD_INTERNAL = 70
API_DESIGN_QUALITY_THRESHOLD = 75
API_REQUIRED_REQUIREMENT_CATEGORIES = ("functional", "nonFunctional", "security", "scalability")

# Data architecture
DATA_STORAGE_CANDIDATES_TO_EVALUATE = 3
DATA_REQUIRED_QUALITY_ATTRIBUTES = ("scalability", "availability", "consistency")

# DDD strategic modeling
DDD_MIN_BUSINESS_CAPABILITIES = 2
DDD_QUALITY_THRESHOLD = 75

# DevOps alignment
DEVOPS_REQUIRED_PIPELINE_STAGES = (
    "source-control",
    "build",
    "test",
    "security-scan",
    "artifact-storage",
    "deployment",
)
DEVOPS_REQUIRED_SLIS = ("latency", "error-rate", "availability", "throughput")

# Tech-stack evaluation
TECH_STACK_REQUIREMENTS_THRESHOLD = 70
TECH_STACK_MIN_CANDIDATES = 3

# Cloud architecture
CLOUD_DEFAULT_TARGET_QUALITY = 85


# =============================================================================
# Agent Profiles
# =============================================================================


@dataclass
class AgentProfile:
    """Model settings for one named agent.

    Attributes:
        name: Agent name as declared on the task definition
        model_tier: Model tier used to resolve the model id
        max_tokens: Maximum output tokens
        timeout_config: Client timeout settings
        temperature: Sampling temperature
        trace_attributes: Extra attributes attached to the agent's OTEL spans
    """

    name: str
    model_tier: ModelTier = ModelTier.HEAVY
    max_tokens: int = TOKENS_STANDARD
    timeout_config: TimeoutConfig = TIMEOUT_STANDARD
    temperature: float = 0.4
    trace_attributes: dict[str, Any] = field(default_factory=dict)


_REASONING_AGENTS = (
    "adr-validator",
    "architecture-review-board",
    "architecture-quality-validator",
    "model-validator",
    "quality-assessor",
    "resilience-validator",
)

_LIGHT_AGENTS = (
    "adr-manager",
    "adr-indexer",
    "adr-publisher",
    "release-manager",
)

_EXTENDED_AGENTS = (
    "technical-writer",
    "documentation-specialist",
    "iac-engineer",
    "iac-architect",
)


def _build_profiles() -> dict[str, AgentProfile]:
    profiles: dict[str, AgentProfile] = {}
    for name in _REASONING_AGENTS:
        profiles[name] = AgentProfile(name=name, model_tier=ModelTier.REASONING, temperature=0.2)
    for name in _LIGHT_AGENTS:
        profiles[name] = AgentProfile(name=name, model_tier=ModelTier.LIGHT, max_tokens=TOKENS_BRIEF)
    for name in _EXTENDED_AGENTS:
        profiles[name] = AgentProfile(
            name=name,
            max_tokens=TOKENS_EXTENDED,
            timeout_config=TIMEOUT_EXTENDED,
        )
    return profiles


AGENT_PROFILES: dict[str, AgentProfile] = _build_profiles()


def get_agent_profile(agent_name: str) -> AgentProfile:
    """Return the profile for an agent, or a heavy-tier default."""
    profile = AGENT_PROFILES.get(agent_name)
    if profile is None:
        return AgentProfile(name=agent_name)
    return profile
