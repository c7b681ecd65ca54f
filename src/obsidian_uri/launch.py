"""Hand URIs to the operating system's registered handler."""

from __future__ import annotations

import logging
import shutil
import sys

import click

from obsidian_uri.core.config import LaunchConfig
from obsidian_uri.core.errors import DispatchError

logger = logging.getLogger(__name__)

# click.launch returns this when the platform opener cannot be started
# (Windows, Cygwin).
OPENER_NOT_FOUND = 127


def uses_xdg_open(platform: str | None = None) -> bool:
    """True where click.launch hands URIs to ``xdg-open``.

    ``xdg-open`` exits once the handler has been started, but click only
    collects its exit status when asked to wait on it.
    """
    platform = sys.platform if platform is None else platform
    return not (
        platform == "darwin"
        or platform.startswith("win")
        or platform.startswith("cygwin")
    )


def _failure_reason(returncode: int) -> str:
    if returncode == OPENER_NOT_FOUND:
        return "no opener found"
    # click reports a missing xdg-open as status 1
    if returncode == 1 and uses_xdg_open() and shutil.which("xdg-open") is None:
        return "no opener found (xdg-open is not installed)"
    return f"opener exited with status {returncode}"


def launch_uri(uri: str, config: LaunchConfig | None = None) -> None:
    """Open ``uri`` with the default handler for its scheme.

    Uses the platform opener through :func:`click.launch` (``open`` on macOS,
    ``os.startfile`` on Windows, ``xdg-open`` elsewhere) and checks its exit
    status, so a scheme with no registered handler is reported.

    ``config.wait`` additionally blocks until the handler application exits
    where the opener supports that (macOS ``open -W``, Cygwin ``cygstart -w``).

    Raises:
        DispatchError: If no opener was found or it exited non-zero.
    """
    if config is None:
        config = LaunchConfig.from_env()

    wait = config.wait or uses_xdg_open()
    logger.debug("Launching %s (wait=%s)", uri, wait)
    returncode = click.launch(uri, wait=wait)

    if returncode != 0:
        reason = _failure_reason(returncode)
        logger.warning("Failed to open %s: %s", uri, reason)
        raise DispatchError(uri, reason, returncode=returncode)
