"""Tests for agent profiles and timeout settings."""

from archsitter.config import (
    TIMEOUT_EXTENDED,
    TIMEOUT_STANDARD,
    TOKENS_BRIEF,
    TOKENS_EXTENDED,
    TOKENS_STANDARD,
    ModelTier,
    TimeoutConfig,
    get_agent_profile,
)


class TestModelTier:
    def test_values(self):
        assert ModelTier.values() == ["heavy", "light", "reasoning"]


class TestTimeoutConfig:
    def test_to_dict(self):
        config = TimeoutConfig(read_timeout=120.0, connect_timeout=10.0, streaming=True)

        assert config.to_dict() == {
            "read_timeout": 120.0,
            "connect_timeout": 10.0,
            "streaming": True,
        }

    def test_presets(self):
        assert TIMEOUT_STANDARD.read_timeout == 300.0
        assert TIMEOUT_EXTENDED.read_timeout == 600.0
        assert TIMEOUT_EXTENDED.connect_timeout == 60.0


class TestGetAgentProfile:
    def test_reasoning_agent(self):
        profile = get_agent_profile("architecture-review-board")

        assert profile.model_tier is ModelTier.REASONING
        assert profile.temperature == 0.2

    def test_light_agent(self):
        profile = get_agent_profile("adr-indexer")

        assert profile.model_tier is ModelTier.LIGHT
        assert profile.max_tokens == TOKENS_BRIEF

    def test_extended_agent(self):
        profile = get_agent_profile("technical-writer")

        assert profile.model_tier is ModelTier.HEAVY
        assert profile.max_tokens == TOKENS_EXTENDED
        assert profile.timeout_config is TIMEOUT_EXTENDED

    def test_unknown_agent_gets_heavy_default(self):
        profile = get_agent_profile("api-designer")

        assert profile.name == "api-designer"
        assert profile.model_tier is ModelTier.HEAVY
        assert profile.max_tokens == TOKENS_STANDARD
        assert profile.timeout_config is TIMEOUT_STANDARD
        assert profile.temperature == 0.4
