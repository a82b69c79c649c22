"""
Console error / warning capture.

The installer runs inside the page and is idempotent: `window.__safariErrors`
doubles as the installation marker, so a second injection on the same page
returns early without wrapping the console twice. The arrays live as long as
the page does and vanish on navigation.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..js_helpers import serialize

if TYPE_CHECKING:
    from ...session import SafariSession

logger = logging.getLogger("mcp.safari.diagnostics")

CAPTURE_INSTALL_JS = """
function () {
  if (window.__safariErrors) {
    return false;
  }
  window.__safariErrors = [];
  window.__safariWarnings = [];
  function format(args) {
    return Array.prototype.slice.call(args).map(function (a) {
      if (a !== null && typeof a === 'object') {
        try {
          return JSON.stringify(a);
        } catch (e) {
          return String(a);
        }
      }
      return String(a);
    }).join(' ');
  }
  var origError = console.error;
  var origWarn = console.warn;
  console.error = function () {
    window.__safariErrors.push(format(arguments));
    return origError.apply(console, arguments);
  };
  console.warn = function () {
    window.__safariWarnings.push(format(arguments));
    return origWarn.apply(console, arguments);
  };
  window.onerror = function (message, source, lineno, colno) {
    var loc = source ? ' (' + String(source).split('/').pop() + ':' + lineno + ':' + colno + ')' : '';
    window.__safariErrors.push(String(message) + loc);
  };
  window.addEventListener('unhandledrejection', function (e) {
    var reason = e.reason;
    var msg = reason instanceof Error ? reason.message : String(reason);
    window.__safariErrors.push('Unhandled rejection: ' + msg);
  });
  return true;
}
"""

CAPTURE_READ_JS = """
function () {
  return JSON.stringify({
    errors: window.__safariErrors || [],
    warnings: window.__safariWarnings || []
  });
}
"""


@dataclass
class ConsoleMessages:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"errors": list(self.errors), "warnings": list(self.warnings)}


def install_console_capture(session: SafariSession) -> bool:
    """Inject the capture hooks. Returns True when this call installed them."""
    return session.eval_js(serialize(CAPTURE_INSTALL_JS)) == "true"


def parse_console_messages(raw: str) -> ConsoleMessages:
    """Parse the page's JSON payload; anything unexpected yields empty lists."""
    try:
        data = json.loads(raw) if raw else {}
    except ValueError:
        logger.debug("console_capture_unparsable len=%d", len(raw or ""))
        return ConsoleMessages()
    if not isinstance(data, dict):
        return ConsoleMessages()
    errors = data.get("errors")
    warnings = data.get("warnings")
    return ConsoleMessages(
        errors=[str(e) for e in errors] if isinstance(errors, list) else [],
        warnings=[str(w) for w in warnings] if isinstance(warnings, list) else [],
    )


def get_console_messages(session: SafariSession) -> ConsoleMessages:
    return parse_console_messages(session.eval_js(serialize(CAPTURE_READ_JS)))


__all__ = [
    "CAPTURE_INSTALL_JS",
    "CAPTURE_READ_JS",
    "ConsoleMessages",
    "get_console_messages",
    "install_console_capture",
    "parse_console_messages",
]
