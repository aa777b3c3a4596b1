"""Pytest fixtures for navigator handoff tests."""

import sys, os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import pytest

from navigator_handoff.manager.base import Location


@pytest.fixture(autouse=True)
def patch_env(monkeypatch):
    """Provide neutral env vars for all tests."""
    monkeypatch.setenv("NAVIGATOR_OPTIMIZE", "false")
    monkeypatch.setenv("NAVIGATOR_NAVIGATE", "false")
    monkeypatch.setenv("NAVIGATOR_CALLBACK_SCHEME", "")
    monkeypatch.setenv("NAVIGATOR_CALLBACK_PROMPT", "")
    monkeypatch.setenv("NAVIGATOR_LOG_LEVEL", "INFO")

    # Keep in-memory settings in sync for modules that have already been imported.
    from navigator_handoff import config as navigator_config

    monkeypatch.setattr(navigator_config, "settings", navigator_config.Settings())
    monkeypatch.setattr("navigator_handoff.main.settings", navigator_config.settings, raising=False)


@pytest.fixture
def home():
    return Location.wgs84(34.0, -118.0)


@pytest.fixture
def main_street():
    return Location.address("1 Main St")
