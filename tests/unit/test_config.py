"""Tests for launch configuration resolution."""

from __future__ import annotations

import pytest

from obsidian_uri.core.config import LaunchConfig, parse_bool
from obsidian_uri.core.errors import ConfigError, ObsidianUriError


class TestParseBool:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "On", " true "])
    def test_truthy(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "OFF"])
    def test_falsy(self, value):
        assert parse_bool(value) is False

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid boolean"):
            parse_bool("maybe")


class TestLaunchConfig:
    def test_defaults(self):
        config = LaunchConfig()
        assert config.wait is False
        assert config.echo is True

    def test_from_env_without_vars(self):
        assert LaunchConfig.from_env() == LaunchConfig()

    def test_env_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("OBSIDIAN_URI_WAIT", "yes")
        monkeypatch.setenv("OBSIDIAN_URI_ECHO", "0")
        config = LaunchConfig.from_env()
        assert config.wait is True
        assert config.echo is False

    def test_dict_overrides_env(self, monkeypatch):
        """Explicit values win over environment variables."""
        monkeypatch.setenv("OBSIDIAN_URI_WAIT", "1")
        config = LaunchConfig.from_dict({"wait": False})
        assert config.wait is False

    def test_empty_env_value_ignored(self, monkeypatch):
        monkeypatch.setenv("OBSIDIAN_URI_WAIT", "")
        assert LaunchConfig.from_env().wait is False

    def test_invalid_env_value_raises(self, monkeypatch):
        """A malformed variable raises ConfigError naming the variable."""
        monkeypatch.setenv("OBSIDIAN_URI_ECHO", "sometimes")
        with pytest.raises(ConfigError, match="OBSIDIAN_URI_ECHO") as exc_info:
            LaunchConfig.from_env()
        assert isinstance(exc_info.value, ObsidianUriError)
