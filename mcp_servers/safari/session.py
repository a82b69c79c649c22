"""
Safari session state machine.

One SafariSession object owns the only mutable state of the server: whether
a session is active and the window geometry it was opened with. Handlers get
the session injected; nothing else flips the flag.

    INACTIVE --open--> ACTIVE --close--> INACTIVE

Every operation except `open` requires ACTIVE; `open` requires INACTIVE.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from functools import partial

from .automation import Automation, RenderedScript, ScriptLanguage
from .config import SafariConfig
from .osascript import run_applescript, run_jxa
from .tools.base import SessionStateError
from .tools.js_helpers import wrap_script

logger = logging.getLogger("mcp.safari.session")

ScriptRunner = Callable[[str], str]

# What osascript prints for `undefined` / `null` results of `do JavaScript`.
_MISSING_VALUE = "missing value"


class SessionState(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


class SafariSession:
    """Owned session state plus the script execution bridge."""

    def __init__(
        self,
        config: SafariConfig | None = None,
        automation: Automation | None = None,
        *,
        applescript: ScriptRunner | None = None,
        jxa: ScriptRunner | None = None,
    ) -> None:
        self.config = config or SafariConfig.from_env()
        self.automation = automation or Automation()
        self._applescript = applescript or partial(run_applescript, timeout=self.config.osascript_timeout)
        self._jxa = jxa or partial(run_jxa, timeout=self.config.osascript_timeout)
        self._state = SessionState.INACTIVE

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SessionState.ACTIVE

    def require_active(self) -> None:
        if self._state is not SessionState.ACTIVE:
            raise SessionStateError(
                tool="session",
                action="require_active",
                reason="No active session",
                suggestion="Use the open tool first",
            )

    def require_inactive(self) -> None:
        if self._state is not SessionState.INACTIVE:
            raise SessionStateError(
                tool="session",
                action="open",
                reason="A session is already active",
                suggestion="Use the close tool first",
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def open(self) -> None:
        """Bring Safari forward in a fresh window sized from the config."""
        self.require_inactive()
        cfg = self.config
        self._execute(self.automation.activate())
        self._execute(self.automation.create_document())
        self._execute(
            self.automation.set_bounds(cfg.window_bounds, cfg.window_bounds, cfg.window_width, cfg.window_height)
        )
        self._state = SessionState.ACTIVE
        logger.info("session_open bounds=%s", cfg.window_rect())

    def close(self) -> None:
        self.require_active()
        try:
            self._execute(self.automation.close_window())
        finally:
            self._state = SessionState.INACTIVE
            logger.info("session_close")

    # ─────────────────────────────────────────────────────────────────────────
    # Automation channel
    # ─────────────────────────────────────────────────────────────────────────

    def _execute(self, script: RenderedScript) -> str:
        if script.language is ScriptLanguage.JXA:
            return self._jxa(script)
        return self._applescript(script)

    def run(self, script: RenderedScript) -> str:
        """Run a rendered template with the interpreter it was written for."""
        self.require_active()
        return self._execute(script)

    def eval_js(self, script: str) -> str:
        """Execute JavaScript in the current tab and return its result as text.

        Free-form scripts with a top-level `return` are wrapped once; the
        finished program is escaped for the AppleScript literal afterwards.
        """
        self.require_active()
        payload = wrap_script(script)
        out = self._applescript(self.automation.execute_script(payload))
        return "" if out == _MISSING_VALUE else out

    def get_title(self) -> str:
        return self.run(self.automation.get_title())

    def get_url(self) -> str:
        out = self.run(self.automation.get_url())
        return "" if out == _MISSING_VALUE else out


__all__ = ["SafariSession", "ScriptRunner", "SessionState"]
