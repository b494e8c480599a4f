"""
Unit test fixtures: isolated settings files, fake pages and loggers.

Nothing here starts a browser or touches the network.
"""

import os
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from saucedemo_suite.ui_testing.framework.config_loader import ConfigLoader
from saucedemo_suite.ui_testing.framework.suite_logger import TestLogger
from saucedemo_suite.unit.fakes import BASE_URL, FakePage


# Env variables that would override values under test
_OVERRIDE_PREFIXES = ("SETTINGS_", "PATHS_", "LOGGING_", "TEST_DATA_", "CREDENTIALS_")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith(_OVERRIDE_PREFIXES):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("SAUCEDEMO_CONFIG", raising=False)
    monkeypatch.delenv("PYTEST_XDIST_WORKER", raising=False)


@pytest.fixture
def settings_data(tmp_path: Path) -> Dict[str, Any]:
    return {
        "settings": {
            "base_url": BASE_URL,
            "browser": "Chromium",
            "headless": True,
            "slow_mo": 0,
            "timeout": 30000,
            "implicit_wait": 10000,
            "screenshot_on_failure": True,
            "video_recording": False,
            "trace_on_failure": False,
        },
        "paths": {
            "screenshots": str(tmp_path / "screenshots"),
            "videos": str(tmp_path / "videos"),
            "traces": str(tmp_path / "traces"),
            "reports": str(tmp_path / "TestResults"),
        },
        "credentials": {
            "StandardUser": {"username": "standard_user", "password": "secret_sauce"},
            "LockedOutUser": {"username": "locked_out_user", "password": "secret_sauce"},
        },
    }


@pytest.fixture
def write_settings(tmp_path: Path):
    """Write a settings mapping to a YAML file and return its path."""

    def _write(data: Dict[str, Any], name: str = "settings.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config(settings_data, write_settings) -> ConfigLoader:
    return ConfigLoader(write_settings(settings_data))


@pytest.fixture
def test_logger() -> TestLogger:
    return TestLogger("unit")


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage(url=BASE_URL)
