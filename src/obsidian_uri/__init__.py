"""obsidian-uri - Build and open obsidian:// deep links.

Usage:
    from obsidian_uri import ObsidianUri

    uri = ObsidianUri.action("search").add_parameter("query", "test test")
    uri.build()   # "obsidian://search?query=test%20test"
    uri.open()    # hands the URI to the OS, raises DispatchError on failure
"""

from obsidian_uri.core.config import LaunchConfig
from obsidian_uri.core.errors import (
    ConfigError,
    DispatchError,
    ObsidianUriError,
    ParameterFormatError,
)
from obsidian_uri.launch import launch_uri
from obsidian_uri.uri import ObsidianUri, Parameter, encode_value, parse_parameter

__all__ = [
    "ConfigError",
    "DispatchError",
    "LaunchConfig",
    "ObsidianUri",
    "ObsidianUriError",
    "Parameter",
    "ParameterFormatError",
    "encode_value",
    "launch_uri",
    "parse_parameter",
]

__version__ = "0.1.0"
