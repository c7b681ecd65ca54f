"""obsidian-uri error types."""

from __future__ import annotations


class ObsidianUriError(Exception):
    """Base exception for obsidian-uri."""

    pass


class DispatchError(ObsidianUriError):
    """The operating system failed to open a URI with its registered handler."""

    def __init__(self, uri: str, reason: str, returncode: int | None = None):
        self.uri = uri
        self.reason = reason
        self.returncode = returncode
        super().__init__(f"Could not open {uri}: {reason}")


class ParameterFormatError(ObsidianUriError, ValueError):
    """A KEY=VALUE parameter string could not be split."""

    pass


class ConfigError(ObsidianUriError, ValueError):
    """An OBSIDIAN_URI_* setting has an invalid value."""

    pass
