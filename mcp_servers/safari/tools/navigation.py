"""
Navigation tools for Safari automation.

Provides:
- navigate_to: Load a URL in the current tab
- go_history: Move through session history (negative steps go back)
- reload_page: Reload, optionally bypassing the cache

Every navigation installs console capture twice: once as soon as the new
document exists (to catch load-time errors) and once after load completes
(in case the first injection landed on the outgoing page or timed out).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .base import SmartToolError
from .js_helpers import serialize
from .page.diagnostics import install_console_capture
from .page.wait import mark_outgoing_document, wait_for_fresh_document, wait_for_page_load, wait_for_selector

if TYPE_CHECKING:
    from ..session import SafariSession

logger = logging.getLogger("mcp.safari.navigation")

HISTORY_GO_JS = """
function (steps) {
  window.history.go(steps);
  return true;
}
"""

RELOAD_JS = """
function (hard) {
  if (hard) {
    window.location.reload(true);
  } else {
    window.location.reload();
  }
  return true;
}
"""


def load_with_capture(
    session: SafariSession,
    trigger: Callable[[], object],
    selector: str | None = None,
) -> bool | None:
    """Run a navigation trigger with two-phase console capture.

    Returns the selector wait outcome, or None when no selector was given.
    """
    session.require_active()
    cfg = session.config

    token = mark_outgoing_document(session)
    trigger()

    early = min(cfg.early_capture_window, cfg.page_load_timeout)
    if wait_for_fresh_document(session, token, early):
        install_console_capture(session)
    else:
        logger.debug("early_capture_missed window=%.1fs", early)

    loaded = wait_for_page_load(session)
    if not loaded:
        logger.info("page_load_timeout timeout=%.1fs", cfg.page_load_timeout)
    install_console_capture(session)

    if selector:
        return wait_for_selector(session, selector)
    return None


def navigate_to(session: SafariSession, url: str, selector: str | None = None) -> bool | None:
    """Navigate the current tab to `url`.

    Examples:
        navigate_to(session, "https://example.com")
        navigate_to(session, "https://example.com/app", selector="#root .ready")
    """
    if not url or not isinstance(url, str):
        raise SmartToolError(
            tool="navigate",
            action="validate",
            reason="Missing url",
            suggestion="Provide url='https://...' or a direction",
        )
    return load_with_capture(session, lambda: session.run(session.automation.navigate_to(url)), selector)


def go_history(session: SafariSession, steps: int, selector: str | None = None) -> bool | None:
    """Traverse history by `steps` entries (negative is back)."""
    if isinstance(steps, bool) or not isinstance(steps, int) or steps == 0:
        raise SmartToolError(
            tool="navigate",
            action="validate",
            reason=f"Invalid history steps: {steps!r}",
            suggestion="Use a positive steps value with direction='back' or 'forward'",
        )
    return load_with_capture(session, lambda: session.eval_js(serialize(HISTORY_GO_JS, steps)), selector)


def reload_page(session: SafariSession, hard: bool = False, selector: str | None = None) -> bool | None:
    """Reload the current page. `hard` asks the engine to bypass its cache."""
    return load_with_capture(session, lambda: session.eval_js(serialize(RELOAD_JS, bool(hard))), selector)


__all__ = ["go_history", "load_with_capture", "navigate_to", "reload_page"]
