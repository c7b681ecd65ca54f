"""Shared test fixtures for obsidian-uri."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep OBSIDIAN_URI_* settings from the host out of every test."""
    monkeypatch.delenv("OBSIDIAN_URI_WAIT", raising=False)
    monkeypatch.delenv("OBSIDIAN_URI_ECHO", raising=False)


class FakeLaunch:
    """Stand-in for click.launch that records calls and returns a fixed status.

    Like click, failures are reported only through the status: 127 when the
    opener is missing (Windows, Cygwin), 1 for a missing xdg-open, otherwise
    the opener's own exit status.
    """

    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.calls: list[tuple[str, bool]] = []

    def __call__(self, url: str, wait: bool = False, locate: bool = False) -> int:
        self.calls.append((url, wait))
        return self.returncode

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]


@pytest.fixture
def fake_launch(monkeypatch):
    """Patch click.launch so nothing is ever opened for real."""
    fake = FakeLaunch()
    monkeypatch.setattr("click.launch", fake)
    return fake


@pytest.fixture
def xdg_platform(monkeypatch):
    """Behave as on a platform where URIs go through xdg-open."""
    monkeypatch.setattr("obsidian_uri.launch.uses_xdg_open", lambda platform=None: True)


@pytest.fixture
def macos_platform(monkeypatch):
    """Behave as on macOS, where ``open`` reports its status without waiting."""
    monkeypatch.setattr("obsidian_uri.launch.uses_xdg_open", lambda platform=None: False)
