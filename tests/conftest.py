"""Shared fixtures: fake osascript runs and a macOS host."""

import json
from types import SimpleNamespace

import pytest

from arc_tabs import cli, config, query

SAMPLE_TABS = [
    {
        "windowIndex": 1,
        "windowName": "",
        "spaceIndex": 1,
        "spaceTitle": "Work",
        "tabIndex": 1,
        "tabTitle": "Docs",
        "location": "",
        "url": "https://example.com",
    },
    {
        "windowIndex": 1,
        "windowName": "Main",
        "spaceIndex": 2,
        "spaceTitle": "",
        "tabIndex": 3,
        "tabTitle": "",
        "location": "pinned",
        "url": "https://github.com/arc/issues?q=1",
    },
]


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "live_arc: queries a real running Arc via osascript (macOS only, opt-in).",
    )


@pytest.fixture
def sample_tabs():
    return [dict(tab) for tab in SAMPLE_TABS]


@pytest.fixture
def on_macos(monkeypatch):
    monkeypatch.setattr(cli, "_current_platform", lambda: "darwin")


@pytest.fixture
def fake_osascript(monkeypatch):
    """Replace subprocess.run in the query module; returns a controller."""
    state = {"calls": [], "returncode": 0, "stdout": "[]", "stderr": ""}

    def fake_run(cmd, capture_output, encoding, errors, stdin):
        state["calls"].append(cmd)
        state["encoding"] = (encoding, errors)
        return SimpleNamespace(
            returncode=state["returncode"],
            stdout=state["stdout"],
            stderr=state["stderr"],
        )

    monkeypatch.setattr(query.subprocess, "run", fake_run)

    def set_tabs(tabs):
        state["stdout"] = json.dumps(tabs) + "\n"

    state["set_tabs"] = set_tabs
    return state


@pytest.fixture(autouse=True)
def quiet_log(monkeypatch):
    monkeypatch.setattr(config, "VERBOSE", False)
