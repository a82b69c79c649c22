"""
Smart element clicking by natural language.

The whole resolution runs inside the page in a single script execution:

1. Coordinates: the topmost element at (x, y).
2. Selector without text: the first match, no ranking.
3. Text: accessible labels first, then prioritized interactive selectors,
   then (unscoped only) every element. Within a tier every visible candidate
   is compared and the shortest matching text wins, so a "Sign In" button
   beats the <body> that also contains "sign in".

A miss is a normal result string, never an exception.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..base import SmartToolError
from ..js_helpers import ACTIVATE, DESCRIBE, GET_TEXT, IS_VISIBLE, serialize
from ..page.wait import wait_for_selector

if TYPE_CHECKING:
    from ...session import SafariSession

ARIA_SELECTORS = 'button, [role="button"], a, [role="link"], [role="menuitem"], [role="tab"]'

PRIORITY_SELECTORS: tuple[str, ...] = (
    "a",
    "button",
    '[role="button"]',
    '[role="link"]',
    '[role="menuitem"]',
    '[role="tab"]',
    'input[type="submit"]',
    'input[type="button"]',
    "[onclick]",
    "label",
    "summary",
)

CLICK_COORDINATES_JS = (
    """
function (x, y) {"""
    + ACTIVATE
    + """
  var el = document.elementFromPoint(x, y);
  if (!el) {
    return 'No element found at coordinates: ' + x + ', ' + y;
  }
  activate(el);
  var tag = el.tagName.toLowerCase();
  var text = el.textContent || el.getAttribute('alt') || el.getAttribute('aria-label') || tag;
  return 'Clicked: ' + tag + ' at (' + x + ', ' + y + ') "' + String(text).trim().substring(0, 80) + '"';
}
"""
)

CLICK_SELECTOR_JS = (
    """
function (selector) {"""
    + DESCRIBE
    + ACTIVATE
    + """
  var el = null;
  try {
    el = document.querySelector(selector);
  } catch (e) {
    return 'Invalid selector: ' + selector;
  }
  if (!el) {
    return 'No element found for selector: ' + selector;
  }
  activate(el);
  return 'Clicked: ' + describe(el);
}
"""
)

CLICK_TEXT_JS = (
    """
function (searchText, scope, ariaSelectors, prioritySelectors) {"""
    + IS_VISIBLE
    + GET_TEXT
    + ACTIVATE
    + """
  var best = null;
  var bestLen = Infinity;
  function consider(el, text) {
    if (text && text.indexOf(searchText) !== -1 && text.length < bestLen && isVisible(el)) {
      best = el;
      bestLen = text.length;
    }
  }
  function ariaLabel(el) {
    return (el.getAttribute('aria-label') || '').trim().toLowerCase();
  }
  var scoped = null;
  if (scope) {
    try {
      scoped = document.querySelectorAll(scope);
    } catch (e) {
      return 'Invalid selector: ' + scope;
    }
    if (scoped.length === 0) {
      return 'No element found for selector: ' + scope;
    }
  }
  var labelled = scoped || document.querySelectorAll(ariaSelectors);
  for (var a = 0; a < labelled.length; a++) {
    consider(labelled[a], ariaLabel(labelled[a]));
  }
  if (!best) {
    if (scoped) {
      for (var s = 0; s < scoped.length; s++) {
        consider(scoped[s], getText(scoped[s]));
      }
    } else {
      for (var i = 0; i < prioritySelectors.length; i++) {
        var elements = document.querySelectorAll(prioritySelectors[i]);
        for (var j = 0; j < elements.length; j++) {
          consider(elements[j], getText(elements[j]));
        }
      }
    }
  }
  if (!best && !scoped) {
    var all = document.querySelectorAll('*');
    for (var k = 0; k < all.length; k++) {
      consider(all[k], getText(all[k]));
    }
  }
  if (!best) {
    return 'No element found with text: ' + searchText;
  }
  activate(best);
  return 'Clicked: ' + best.tagName.toLowerCase() + ' "' + getText(best).substring(0, 80) + '"';
}
"""
)


@dataclass
class ClickResult:
    description: str
    selector_found: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"result": self.description}
        if self.selector_found is not None:
            out["selectorFound"] = self.selector_found
        return out


def build_click_script(
    text: str | None = None,
    selector: str | None = None,
    x: float | None = None,
    y: float | None = None,
) -> str:
    """Pick the resolution mode and build the in-page script for it."""
    if x is not None and y is not None:
        return serialize(CLICK_COORDINATES_JS, x, y)
    search = (text or "").strip().lower()
    if selector and not search:
        return serialize(CLICK_SELECTOR_JS, selector)
    if search:
        return serialize(CLICK_TEXT_JS, search, selector or "", ARIA_SELECTORS, list(PRIORITY_SELECTORS))
    raise SmartToolError(
        tool="click",
        action="validate",
        reason="No search criteria provided",
        suggestion="Provide text, selector, key, or both x and y",
    )


def click_element(
    session: SafariSession,
    *,
    text: str | None = None,
    selector: str | None = None,
    x: float | None = None,
    y: float | None = None,
    wait: str | None = None,
) -> ClickResult:
    """Click the best match and optionally wait for a selector to appear.

    Examples:
        click_element(session, text="Sign In")
        click_element(session, text="Delete", selector="#toolbar button")
        click_element(session, x=120, y=48, wait=".menu")
    """
    script = build_click_script(text, selector, x, y)
    session.require_active()
    description = session.eval_js(script)
    time.sleep(session.config.click_settle)
    selector_found = wait_for_selector(session, wait) if wait else None
    return ClickResult(description=description, selector_found=selector_found)


__all__ = [
    "ARIA_SELECTORS",
    "CLICK_COORDINATES_JS",
    "CLICK_SELECTOR_JS",
    "CLICK_TEXT_JS",
    "ClickResult",
    "PRIORITY_SELECTORS",
    "build_click_script",
    "click_element",
]
