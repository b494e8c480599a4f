"""
Repository-level pytest configuration.

Browser selection for the UI scenarios can come from the settings file,
from SETTINGS_* environment variables, or from the command line options
below (which simply set those variables for this run and its xdist workers).

Important:
  The credentials in config/settings.yaml are the public SauceDemo demo
  accounts. Real projects should load secrets from a secret manager in CI/CD.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    group = parser.getgroup("saucedemo", "SauceDemo UI suite")
    group.addoption(
        "--ui-browser",
        action="store",
        default=None,
        choices=["chromium", "firefox", "webkit"],
        help="Browser engine for UI scenarios (overrides settings.browser)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )


def pytest_configure(config):
    browser = config.getoption("--ui-browser")
    if browser:
        os.environ["SETTINGS_BROWSER"] = browser
    if config.getoption("--headed"):
        os.environ["SETTINGS_HEADLESS"] = "false"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
