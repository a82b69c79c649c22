"""
Polling-based page synchronization.

Safari offers no event channel back to this process, so every "has it
happened yet" question is answered by sampling the page through
`do JavaScript`. All loops go through `poll_until`; timing out is a normal
outcome reported as `False`, never an exception.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..js_helpers import serialize

if TYPE_CHECKING:
    from ...session import SafariSession

READY_STATE_JS = "document.readyState"

SELECTOR_PRESENT_JS = """
function (selector) {
  try {
    return !!document.querySelector(selector);
  } catch (e) {
    return false;
  }
}
"""

MARK_DOCUMENT_JS = """
function (token) {
  window.__safariNavPending = token;
  return true;
}
"""

# Empty while the document marked with `token` is still current. Pages
# restored from the back/forward cache keep an older token.
FRESH_READY_STATE_JS = """
function (token) {
  return window.__safariNavPending === token ? '' : document.readyState;
}
"""

_LIVE_STATES = {"loading", "interactive", "complete"}


@dataclass(frozen=True)
class PollOutcome:
    ok: bool
    value: Any
    elapsed: float


def poll_until(
    sample: Callable[[], Any],
    accept: Callable[[Any], bool],
    *,
    timeout: float,
    interval: float,
) -> PollOutcome:
    """Call `sample` until `accept` holds or `timeout` seconds pass.

    `sample` always runs at least once. The last sampled value is returned
    either way so callers can report stale state.
    """
    start = time.time()
    deadline = start + max(0.0, timeout)
    while True:
        value = sample()
        if accept(value):
            return PollOutcome(True, value, round(time.time() - start, 2))
        remaining = deadline - time.time()
        if remaining <= 0:
            return PollOutcome(False, value, round(time.time() - start, 2))
        time.sleep(min(interval, remaining))


def wait_for_page_load(session: SafariSession, timeout: float | None = None) -> bool:
    """Wait until document.readyState is 'complete'. Best-effort."""
    cfg = session.config
    outcome = poll_until(
        lambda: session.eval_js(READY_STATE_JS),
        lambda state: state == "complete",
        timeout=cfg.page_load_timeout if timeout is None else timeout,
        interval=cfg.poll_interval,
    )
    return outcome.ok


def wait_for_selector(session: SafariSession, selector: str, timeout: float | None = None) -> bool:
    """Wait until `selector` matches an element; False on timeout."""
    cfg = session.config
    script = serialize(SELECTOR_PRESENT_JS, selector)
    outcome = poll_until(
        lambda: session.eval_js(script),
        lambda found: found == "true",
        timeout=cfg.page_load_timeout if timeout is None else timeout,
        interval=cfg.poll_interval,
    )
    return outcome.ok


def mark_outgoing_document(session: SafariSession) -> str:
    """Tag the current document with a fresh token and return it."""
    token = uuid.uuid4().hex
    session.eval_js(serialize(MARK_DOCUMENT_JS, token))
    return token


def wait_for_fresh_document(session: SafariSession, token: str, timeout: float) -> bool:
    """Wait until a document not carrying `token` is current and reports any ready state."""
    script = serialize(FRESH_READY_STATE_JS, token)
    outcome = poll_until(
        lambda: session.eval_js(script),
        lambda state: state in _LIVE_STATES,
        timeout=timeout,
        interval=session.config.poll_interval,
    )
    return outcome.ok


__all__ = [
    "PollOutcome",
    "mark_outgoing_document",
    "poll_until",
    "wait_for_fresh_document",
    "wait_for_page_load",
    "wait_for_selector",
]
