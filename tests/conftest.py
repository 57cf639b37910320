"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "link", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid linkscheme configuration dict for testing."""
    return {
        "schemes": {
            "gh": {"base_location": "https://github.com", "new_window": False},
            "jira": {"base_location": "https://jira.example.com/browse", "new_window": True},
        },
        "export": {"default_backend": "markdown", "links_to_notes": False},
        "log": {"level": "INFO"},
    }


@pytest.fixture(autouse=True)
def linkscheme_home(tmp_path, monkeypatch) -> Path:
    """Isolated LINKSCHEME_HOME for every test (no config file written)."""
    home = tmp_path / ".linkscheme"
    home.mkdir()
    monkeypatch.setenv("LINKSCHEME_HOME", str(home))
    return home


@pytest.fixture
def config_dict() -> dict:
    return minimal_config_dict()


@pytest.fixture
def linkscheme_config(linkscheme_home, config_dict) -> Path:
    """Write config_dict to the isolated home and return the config path."""
    path = linkscheme_home / "config.json"
    path.write_text(json.dumps(config_dict), encoding="utf-8")
    return path


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run


@pytest.fixture
def opened(monkeypatch) -> list:
    """Record navigator calls made by cmd_open instead of launching a browser."""
    calls: list = []

    def fake_open(uri, extra_arg=None):
        calls.append((uri, extra_arg))
        return True

    monkeypatch.setattr("linkscheme.api.link.cmd_open.open_in_browser", fake_open)
    return calls
