"""Fluent builder for obsidian:// URIs.

Usage:
    uri = (
        ObsidianUri.action("open")
        .add_parameter("vault", "notes")
        .add_parameter("file", "Daily/2024-03-15")
        .build()
    )
    # obsidian://open?vault=notes&file=Daily%2F2024-03-15
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable
from urllib.parse import quote

from obsidian_uri.core.errors import ParameterFormatError
from obsidian_uri.launch import launch_uri

if TYPE_CHECKING:
    from obsidian_uri.core.config import LaunchConfig

logger = logging.getLogger(__name__)

SCHEME = "obsidian"


def encode_value(value: str) -> str:
    """Percent-encode a parameter value.

    Only the unreserved characters A-Z a-z 0-9 - _ . ~ are left as-is;
    '/' is encoded too.
    """
    return quote(value, safe="")


@dataclass(frozen=True)
class Parameter:
    """A single query parameter. ``value`` is stored already encoded."""

    key: str
    value: str

    @classmethod
    def new(cls, key: str, raw_value: str) -> Parameter:
        return cls(key=key, value=encode_value(raw_value))

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


def parse_parameter(text: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` on the first '='. The value may be empty."""
    key, sep, value = text.partition("=")
    if not sep:
        msg = f"Expected KEY=VALUE, got: {text!r}"
        raise ParameterFormatError(msg)
    if not key:
        msg = f"Parameter key is empty: {text!r}"
        raise ParameterFormatError(msg)
    return key, value


@dataclass(frozen=True)
class ObsidianUri:
    """An obsidian:// URI under construction.

    Builders are immutable: ``add_parameter`` returns a new builder with the
    parameter appended, so intermediate builders can be reused safely.
    Parameter order is kept, and a key may appear more than once.
    """

    action_name: str
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)

    @classmethod
    def action(cls, action: str) -> ObsidianUri:
        """Start a builder for the given action (``open``, ``new``, ``search``...)."""
        return cls(action_name=action)

    def add_parameter(self, key: str, value: str) -> ObsidianUri:
        return ObsidianUri(
            action_name=self.action_name,
            parameters=(*self.parameters, Parameter.new(key, value)),
        )

    def build(self) -> str:
        """Render the URI. The action and keys are emitted verbatim."""
        query = "&".join(str(p) for p in self.parameters)
        return f"{SCHEME}://{self.action_name}?{query}"

    def open(
        self,
        launcher: Callable[[str, LaunchConfig | None], None] | None = None,
        config: LaunchConfig | None = None,
    ) -> str:
        """Build the URI and hand it to the OS.

        Args:
            launcher: Callable taking ``(uri, config)``; defaults to
                :func:`obsidian_uri.launch.launch_uri`.
            config: Launch options passed through to the launcher.

        Returns:
            The URI that was dispatched.

        Raises:
            DispatchError: If the URI could not be opened.
            ConfigError: If no config is given and an OBSIDIAN_URI_* variable
                is malformed.
        """
        if launcher is None:
            launcher = launch_uri

        uri = self.build()
        logger.info("Opening %s", uri)
        launcher(uri, config)
        return uri

    def __str__(self) -> str:
        return self.build()
