"""Multi-provider LLM model factory.

Dispatches to the correct Strands SDK model class based on the ``LLM_PROVIDER``
environment variable (default: ``bedrock``). Providers other than Bedrock
import their Strands model class lazily so the core install stays lean.

Resolution order for model IDs:
  1. Explicit ``model_id`` argument
  2. ``{PROVIDER}_{TIER}_MODEL_ID`` env var  (e.g. ``ANTHROPIC_HEAVY_MODEL_ID``)
  3. Reasoning → heavy fallback
  4. ``PROVIDER_DEFAULTS``
"""

import logging
import os
from collections.abc import Callable
from enum import Enum
from typing import Any

from archsitter.config import ModelTier

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Provider enum
# ---------------------------------------------------------------------------


class LLMProvider(Enum):
    """Supported LLM providers."""

    BEDROCK = "bedrock"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    OLLAMA = "ollama"


PROVIDER_DEFAULTS: dict[LLMProvider, dict[str, str]] = {
    LLMProvider.BEDROCK: {
        "reasoning": "us.anthropic.claude-sonnet-4-20250514-v1:0",
        "heavy": "us.anthropic.claude-sonnet-4-20250514-v1:0",
        "light": "us.anthropic.claude-3-5-haiku-20241022-v1:0",
    },
    LLMProvider.ANTHROPIC: {
        "reasoning": "claude-sonnet-4-20250514",
        "heavy": "claude-sonnet-4-20250514",
        "light": "claude-3-5-haiku-20241022",
    },
    LLMProvider.OPENAI: {
        "reasoning": "o3-mini",
        "heavy": "gpt-4o",
        "light": "gpt-4o-mini",
    },
    LLMProvider.OLLAMA: {
        "reasoning": "llama3.1:70b",
        "heavy": "llama3.1:70b",
        "light": "llama3.1:8b",
    },
}


def get_active_provider() -> LLMProvider:
    """Return the active LLM provider from the ``LLM_PROVIDER`` env var.

    Raises:
        ValueError: If the env var value is not a recognised provider.
    """
    raw = os.getenv("LLM_PROVIDER", "bedrock").strip().lower()
    try:
        return LLMProvider(raw)
    except ValueError:
        valid = ", ".join(p.value for p in LLMProvider)
        raise ValueError(f"Unknown LLM_PROVIDER '{raw}'. Valid options: {valid}") from None


def get_model_id_for_tier(tier: ModelTier | str) -> str:
    """Return the model ID for a tier, respecting the active provider.

    Raises:
        ValueError: If the tier is invalid.
    """
    tier_value = tier.value if isinstance(tier, ModelTier) else tier
    if tier_value not in ModelTier.values():
        raise ValueError(
            f"Invalid tier '{tier_value}'. Must be one of: {', '.join(sorted(ModelTier.values()))}"
        )

    provider = get_active_provider()

    env_key = f"{provider.value.upper()}_{tier_value.upper()}_MODEL_ID"
    from_env = os.getenv(env_key)
    if from_env:
        return from_env

    if tier_value == ModelTier.REASONING.value:
        heavy_env_key = f"{provider.value.upper()}_HEAVY_MODEL_ID"
        heavy_from_env = os.getenv(heavy_env_key)
        if heavy_from_env:
            logger.warning("%s not set, falling back to %s", env_key, heavy_env_key)
            return heavy_from_env

    default_id = PROVIDER_DEFAULTS[provider][tier_value]
    logger.info("Using default model for %s/%s: %s", provider.value, tier_value, default_id)
    return default_id


def get_default_max_tokens() -> int:
    """Resolve max_tokens from DEFAULT_MAX_TOKENS env var (default: 5000)."""
    return int(os.getenv("DEFAULT_MAX_TOKENS", "5000"))


# ---------------------------------------------------------------------------
# Provider factory registry
# ---------------------------------------------------------------------------

_PROVIDER_FACTORIES: dict[LLMProvider, Callable[..., Any]] = {}

_BEDROCK_ONLY_KWARGS = ("read_timeout", "connect_timeout", "region_name")


def _register_provider(provider: LLMProvider):
    """Decorator to register a provider factory function."""

    def decorator(fn):
        _PROVIDER_FACTORIES[provider] = fn
        return fn

    return decorator


def _strip_bedrock_kwargs(kwargs: dict) -> None:
    """Remove Bedrock-specific kwargs that other providers don't accept."""
    for key in _BEDROCK_ONLY_KWARGS:
        kwargs.pop(key, None)


@_register_provider(LLMProvider.BEDROCK)
def _create_bedrock(
    model_id,
    max_tokens,
    streaming,
    temperature,
    read_timeout: float = 300.0,
    connect_timeout: float = 60.0,
    region_name: str | None = None,
    **kwargs,
):
    from botocore.config import Config
    from strands.models.bedrock import BedrockModel

    region_name = region_name or os.getenv("AWS_REGION")
    if not region_name:
        raise ValueError(
            "region_name not provided and AWS_REGION environment "
            "variable is not set. Please configure it in your .env file."
        )

    # Transport-level retries only; task-level retries live in the agent context
    boto_config = Config(
        read_timeout=read_timeout,
        connect_timeout=connect_timeout,
        retries={"max_attempts": 3, "mode": "standard"},
    )

    logger.info(
        f"Creating BedrockModel: model={model_id}, region={region_name}, "
        f"read_timeout={read_timeout}s, connect_timeout={connect_timeout}s"
    )

    return BedrockModel(
        model_id=model_id,
        region_name=region_name,
        boto_client_config=boto_config,
        streaming=streaming,
        temperature=temperature,
        max_tokens=max_tokens,
        **kwargs,
    )


@_register_provider(LLMProvider.ANTHROPIC)
def _create_anthropic(model_id, max_tokens, streaming, temperature, **kwargs):
    _strip_bedrock_kwargs(kwargs)

    try:
        from strands.models.anthropic import AnthropicModel
    except ImportError as e:
        raise ImportError(
            "Anthropic provider requires the 'anthropic' package. "
            "Install it with: pip install 'archsitter[anthropic]'"
        ) from e

    client_args = {}
    api_key = os.getenv("ANTHROPIC_API_KEY")
    if api_key:
        client_args["api_key"] = api_key

    params = {}
    if temperature is not None:
        params["temperature"] = temperature

    return AnthropicModel(
        client_args=client_args or None,
        model_id=model_id,
        max_tokens=max_tokens,
        params=params or None,
    )


@_register_provider(LLMProvider.OPENAI)
def _create_openai(model_id, max_tokens, streaming, temperature, **kwargs):
    _strip_bedrock_kwargs(kwargs)

    try:
        from strands.models.openai import OpenAIModel
    except ImportError as e:
        raise ImportError(
            "OpenAI provider requires the 'openai' package. "
            "Install it with: pip install 'archsitter[openai]'"
        ) from e

    client_args = {}
    api_key = os.getenv("OPENAI_API_KEY")
    if api_key:
        client_args["api_key"] = api_key

    params = {}
    if max_tokens is not None:
        params["max_tokens"] = max_tokens
    if temperature is not None:
        params["temperature"] = temperature

    return OpenAIModel(
        client_args=client_args or None,
        model_id=model_id,
        params=params or None,
    )


@_register_provider(LLMProvider.OLLAMA)
def _create_ollama(model_id, max_tokens, streaming, temperature, **kwargs):
    _strip_bedrock_kwargs(kwargs)

    try:
        from strands.models.ollama import OllamaModel
    except ImportError as e:
        raise ImportError(
            "Ollama provider requires the 'ollama' package. "
            "Install it with: pip install 'archsitter[ollama]'"
        ) from e

    ollama_kwargs = {
        "host": os.getenv("OLLAMA_HOST", "http://localhost:11434"),
        "model_id": model_id,
    }
    if max_tokens is not None:
        ollama_kwargs["max_tokens"] = max_tokens
    if temperature is not None:
        ollama_kwargs["temperature"] = temperature

    return OllamaModel(**ollama_kwargs)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def create_model(
    model_id: str | None = None,
    tier: ModelTier | str = ModelTier.HEAVY,
    max_tokens: int | None = None,
    streaming: bool = False,
    temperature: float = 0.4,
    **kwargs,
):
    """Create a Strands model instance for the active provider.

    Args:
        model_id: Model identifier. Resolved from tier + provider when ``None``.
        tier: Model tier for ID resolution.
        max_tokens: Maximum response tokens. Falls back to ``DEFAULT_MAX_TOKENS``.
        streaming: Enable streaming (Bedrock only).
        temperature: Sampling temperature.
        **kwargs: Provider-specific extras (e.g. ``read_timeout`` for Bedrock).

    Returns:
        A Strands ``Model`` instance.
    """
    provider = get_active_provider()

    if model_id is None:
        model_id = get_model_id_for_tier(tier)

    if max_tokens is None:
        max_tokens = get_default_max_tokens()

    factory = _PROVIDER_FACTORIES[provider]

    logger.info(
        "Creating %s model: model_id=%s, max_tokens=%s",
        provider.value,
        model_id,
        max_tokens,
    )

    return factory(
        model_id=model_id,
        max_tokens=max_tokens,
        streaming=streaming,
        temperature=temperature,
        **kwargs,
    )
