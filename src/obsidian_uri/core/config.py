"""Launch configuration — explicit values > env > defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

from obsidian_uri.core.errors import ConfigError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a boolean environment value.

    Accepts 1/true/yes/on and 0/false/no/off, case-insensitively.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    msg = f"Invalid boolean value: {value!r}"
    raise ConfigError(msg)


def _env_bool(name: str) -> bool | None:
    value = os.environ.get(name)
    if not value:
        return None
    try:
        return parse_bool(value)
    except ConfigError as e:
        msg = f"{name}: {e}"
        raise ConfigError(msg) from e


@dataclass
class LaunchConfig:
    """Configuration for handing URIs to the OS.

    Config precedence: explicit dict values > env vars > class defaults.

    Environment variables:
    - OBSIDIAN_URI_WAIT: wait for the handler application to exit
      (macOS and Cygwin; elsewhere the opener is always waited on)
    - OBSIDIAN_URI_ECHO: print the URI before opening it (CLI only)
    """

    wait: bool = False
    echo: bool = True

    @classmethod
    def from_env(cls) -> LaunchConfig:
        """Create LaunchConfig from class defaults plus env var overrides."""
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, data: dict) -> LaunchConfig:
        """Create LaunchConfig from a dict, applying env var overrides.

        Raises:
            ConfigError: If an OBSIDIAN_URI_* variable is not a boolean.
        """
        config = cls()

        env_wait = _env_bool("OBSIDIAN_URI_WAIT")
        if env_wait is not None:
            config.wait = env_wait
        env_echo = _env_bool("OBSIDIAN_URI_ECHO")
        if env_echo is not None:
            config.echo = env_echo

        if "wait" in data:
            config.wait = bool(data["wait"])
        if "echo" in data:
            config.echo = bool(data["echo"])

        return config
