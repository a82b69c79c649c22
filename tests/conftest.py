from __future__ import annotations

import json
import time
from collections.abc import Callable
from typing import Any

import pytest

from mcp_servers.safari.automation import Automation
from mcp_servers.safari.config import SafariConfig
from mcp_servers.safari.session import SafariSession
from mcp_servers.safari.tools.page import wait as wait_mod


class FakeClock:
    """Virtual time: sleeping advances the clock instantly."""

    def __init__(self) -> None:
        self.now = 1000.0
        self.sleeps: list[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += max(0.0, seconds)


class MarkedAutomation(Automation):
    """Hands page scripts to the fake runner unescaped, prefixed with `JS:`."""

    def execute_script(self, script: str) -> str:
        return "JS:" + script


class FakeSafari:
    """Stands in for osascript. Page scripts are answered by substring rules."""

    def __init__(self) -> None:
        self.applescript_calls: list[str] = []
        self.jxa_calls: list[str] = []
        self.scripts: list[str] = []
        self.rules: list[tuple[str, Any]] = []
        self.applescript_rules: list[tuple[str, Any]] = []
        self.tabs: list[dict[str, Any]] = [{"active": True, "index": 1, "title": "Start", "url": "about:blank"}]
        self.window_id = "4242"

    def on_js(self, marker: str, response: str | Callable[[str], str]) -> None:
        """Answer scripts containing `marker`. Later rules win."""
        self.rules.append((marker, response))

    def on_applescript(self, marker: str, response: str | Callable[[str], str]) -> None:
        self.applescript_rules.append((marker, response))

    @staticmethod
    def _answer(rules: list[tuple[str, Any]], script: str) -> str:
        for marker, response in reversed(rules):
            if marker in script:
                return response(script) if callable(response) else response
        return ""

    def applescript(self, script: str) -> str:
        if script.startswith("JS:"):
            js = script[3:]
            self.scripts.append(js)
            return self._answer(self.rules, js)
        self.applescript_calls.append(script)
        return self._answer(self.applescript_rules, script)

    def jxa(self, script: str) -> str:
        self.jxa_calls.append(script)
        if "win.tabs()" in script:
            return json.dumps(self.tabs)
        if "windows[0].id()" in script:
            return self.window_id
        return ""


@pytest.fixture(autouse=True)
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(time, "sleep", fake.sleep)
    monkeypatch.setattr(wait_mod, "time", fake)
    return fake


@pytest.fixture
def config() -> SafariConfig:
    return SafariConfig(page_load_timeout=1.0)


@pytest.fixture
def fake() -> FakeSafari:
    return FakeSafari()


@pytest.fixture
def session(config: SafariConfig, fake: FakeSafari) -> SafariSession:
    return SafariSession(config, MarkedAutomation(), applescript=fake.applescript, jxa=fake.jxa)


@pytest.fixture
def active_session(session: SafariSession, fake: FakeSafari) -> SafariSession:
    session.open()
    fake.applescript_calls.clear()
    return session
