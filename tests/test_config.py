"""Tests for environment settings."""

import pytest

from taxvoice.config import DEFAULT_HTTP_TIMEOUT, DEFAULT_USER_AGENT, Settings

ENV_VARS = [
    "TAXVOICE_SEED",
    "TAXVOICE_MAX_SUGGESTIONS",
    "TAXVOICE_LOG_LEVEL",
    "TAXVOICE_HTTP_TIMEOUT",
    "TAXVOICE_USER_AGENT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.seed is None
        assert settings.max_suggestions is None
        assert settings.log_level == "INFO"
        assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
        assert settings.user_agent == DEFAULT_USER_AGENT

    def test_from_env(self, clean_env):
        clean_env.setenv("TAXVOICE_SEED", "42")
        clean_env.setenv("TAXVOICE_MAX_SUGGESTIONS", "8")
        clean_env.setenv("TAXVOICE_LOG_LEVEL", "debug")
        clean_env.setenv("TAXVOICE_HTTP_TIMEOUT", "3")
        clean_env.setenv("TAXVOICE_USER_AGENT", "checker/1.0")
        settings = Settings.from_env()
        assert settings.seed == 42
        assert settings.max_suggestions == 8
        assert settings.log_level == "DEBUG"
        assert settings.http_timeout == 3
        assert settings.user_agent == "checker/1.0"

    def test_zero_max_means_unlimited(self, clean_env):
        clean_env.setenv("TAXVOICE_MAX_SUGGESTIONS", "0")
        assert Settings.from_env().max_suggestions is None

    def test_negative_max_rejected(self, clean_env):
        clean_env.setenv("TAXVOICE_MAX_SUGGESTIONS", "-1")
        with pytest.raises(ValueError, match="TAXVOICE_MAX_SUGGESTIONS"):
            Settings.from_env()

    def test_blank_is_default(self, clean_env):
        clean_env.setenv("TAXVOICE_SEED", "  ")
        assert Settings.from_env().seed is None

    def test_bad_integer_names_variable(self, clean_env):
        clean_env.setenv("TAXVOICE_SEED", "abc")
        with pytest.raises(ValueError, match="TAXVOICE_SEED"):
            Settings.from_env()
