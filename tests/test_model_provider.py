"""Tests for multi-provider LLM model factory."""

from unittest.mock import MagicMock

import pytest

from archsitter.agents.model_provider import (
    _PROVIDER_FACTORIES,
    LLMProvider,
    create_model,
    get_active_provider,
    get_default_max_tokens,
    get_model_id_for_tier,
)
from archsitter.config import ModelTier

# ---------------------------------------------------------------------------
# get_active_provider
# ---------------------------------------------------------------------------


class TestGetActiveProvider:
    def test_default_is_bedrock(self, monkeypatch):
        monkeypatch.delenv("LLM_PROVIDER", raising=False)
        assert get_active_provider() is LLMProvider.BEDROCK

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("bedrock", LLMProvider.BEDROCK),
            ("anthropic", LLMProvider.ANTHROPIC),
            ("openai", LLMProvider.OPENAI),
            ("ollama", LLMProvider.OLLAMA),
        ],
    )
    def test_each_provider(self, monkeypatch, value, expected):
        monkeypatch.setenv("LLM_PROVIDER", value)
        assert get_active_provider() is expected

    def test_case_and_whitespace_insensitive(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", " OpenAI ")
        assert get_active_provider() is LLMProvider.OPENAI

    def test_invalid_raises(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "mainframe")
        with pytest.raises(ValueError, match="Unknown LLM_PROVIDER 'mainframe'"):
            get_active_provider()


# ---------------------------------------------------------------------------
# get_model_id_for_tier
# ---------------------------------------------------------------------------


class TestGetModelIdForTier:
    def test_provider_specific_env_var(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "anthropic")
        monkeypatch.setenv("ANTHROPIC_HEAVY_MODEL_ID", "my-custom-model")
        assert get_model_id_for_tier("heavy") == "my-custom-model"

    def test_accepts_enum(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        monkeypatch.delenv("OPENAI_HEAVY_MODEL_ID", raising=False)
        assert get_model_id_for_tier(ModelTier.HEAVY) == "gpt-4o"

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        monkeypatch.delenv("OPENAI_LIGHT_MODEL_ID", raising=False)
        assert get_model_id_for_tier("light") == "gpt-4o-mini"

    def test_reasoning_falls_back_to_heavy(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "anthropic")
        monkeypatch.delenv("ANTHROPIC_REASONING_MODEL_ID", raising=False)
        monkeypatch.setenv("ANTHROPIC_HEAVY_MODEL_ID", "heavy-model")
        assert get_model_id_for_tier("reasoning") == "heavy-model"

    def test_reasoning_default_without_env(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        monkeypatch.delenv("OPENAI_REASONING_MODEL_ID", raising=False)
        monkeypatch.delenv("OPENAI_HEAVY_MODEL_ID", raising=False)
        assert get_model_id_for_tier("reasoning") == "o3-mini"

    def test_invalid_tier_raises(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "anthropic")
        with pytest.raises(ValueError, match="Invalid tier 'mega'"):
            get_model_id_for_tier("mega")

    def test_ollama_defaults(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "ollama")
        monkeypatch.delenv("OLLAMA_HEAVY_MODEL_ID", raising=False)
        assert get_model_id_for_tier("heavy") == "llama3.1:70b"


class TestGetDefaultMaxTokens:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_MAX_TOKENS", raising=False)
        assert get_default_max_tokens() == 5000

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_MAX_TOKENS", "8000")
        assert get_default_max_tokens() == 8000


# ---------------------------------------------------------------------------
# create_model
# ---------------------------------------------------------------------------


class TestCreateModel:
    def _patch_factory(self, monkeypatch, provider):
        """Replace the factory in the dispatch dict and return the mock."""
        mock = MagicMock(return_value=MagicMock())
        monkeypatch.setitem(_PROVIDER_FACTORIES, provider, mock)
        return mock

    def test_bedrock_dispatch(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "bedrock")
        mock = self._patch_factory(monkeypatch, LLMProvider.BEDROCK)
        create_model(model_id="some-model", max_tokens=1000)
        mock.assert_called_once()
        assert mock.call_args[1]["model_id"] == "some-model"
        assert mock.call_args[1]["max_tokens"] == 1000

    @pytest.mark.parametrize(
        "provider",
        [LLMProvider.ANTHROPIC, LLMProvider.OPENAI, LLMProvider.OLLAMA],
    )
    def test_other_providers_dispatch(self, monkeypatch, provider):
        monkeypatch.setenv("LLM_PROVIDER", provider.value)
        mock = self._patch_factory(monkeypatch, provider)
        create_model(model_id="m", max_tokens=2000)
        mock.assert_called_once()
        assert mock.call_args[1]["model_id"] == "m"

    def test_default_tier_resolution(self, monkeypatch):
        """When model_id is None, it resolves from tier + provider."""
        monkeypatch.setenv("LLM_PROVIDER", "bedrock")
        monkeypatch.setenv("BEDROCK_LIGHT_MODEL_ID", "resolved-model")
        mock = self._patch_factory(monkeypatch, LLMProvider.BEDROCK)
        create_model(tier=ModelTier.LIGHT)
        assert mock.call_args[1]["model_id"] == "resolved-model"

    def test_max_tokens_from_env(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "bedrock")
        monkeypatch.setenv("DEFAULT_MAX_TOKENS", "8000")
        mock = self._patch_factory(monkeypatch, LLMProvider.BEDROCK)
        create_model(model_id="test-model")
        assert mock.call_args[1]["max_tokens"] == 8000

    def test_extra_kwargs_forwarded(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "bedrock")
        mock = self._patch_factory(monkeypatch, LLMProvider.BEDROCK)
        create_model(model_id="m", temperature=0.2, read_timeout=600.0, connect_timeout=60.0)
        kwargs = mock.call_args[1]
        assert kwargs["temperature"] == 0.2
        assert kwargs["read_timeout"] == 600.0
        assert kwargs["connect_timeout"] == 60.0
        assert kwargs["streaming"] is False

    def test_bedrock_requires_region(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "bedrock")
        monkeypatch.delenv("AWS_REGION", raising=False)
        with pytest.raises(ValueError, match="AWS_REGION"):
            create_model(model_id="m", max_tokens=100)
