"""
JavaScript composition helpers for Safari automation.

Browser-side logic lives in plain JavaScript function sources (one per
operation). `serialize` turns such a source plus Python arguments into a
self-invoking expression; `wrap_script` prepares free-form scripts for
execution. The result is later embedded in an AppleScript literal by
`Automation.execute_script`, which performs the second escaping pass.
"""

from __future__ import annotations

import json
from typing import Any

# ═══════════════════════════════════════════════════════════════════════════════
# Shared in-page helpers
# ═══════════════════════════════════════════════════════════════════════════════

IS_VISIBLE = """
  function isVisible(el) {
    if (!el || !el.getBoundingClientRect) return false;
    var rect = el.getBoundingClientRect();
    if (rect.width === 0 && rect.height === 0) return false;
    var style = window.getComputedStyle(el);
    return style.display !== 'none' && style.visibility !== 'hidden' && style.opacity !== '0';
  }
"""

GET_TEXT = """
  function getText(el) {
    var text = el.textContent || el.value || el.getAttribute('aria-label') || el.getAttribute('alt') || '';
    if (!String(text).trim() && el.querySelector) {
      var img = el.querySelector('img[alt]');
      if (img) {
        text = img.getAttribute('alt') || '';
      }
    }
    return String(text).trim().toLowerCase();
  }
"""

DESCRIBE = """
  function describe(el) {
    var tag = el.tagName.toLowerCase();
    var text = el.textContent || el.value || el.getAttribute('alt') || el.getAttribute('aria-label') || tag;
    return tag + ' "' + String(text).trim().substring(0, 80) + '"';
  }
"""

# Pointer/mouse down-up before click() so handlers bound to press events fire too.
ACTIVATE = """
  function activate(el) {
    el.scrollIntoView({ block: 'center' });
    var rect = el.getBoundingClientRect();
    var opts = {
      bubbles: true,
      cancelable: true,
      view: window,
      clientX: rect.left + rect.width / 2,
      clientY: rect.top + rect.height / 2,
      button: 0
    };
    if (typeof PointerEvent === 'function') {
      el.dispatchEvent(new PointerEvent('pointerdown', opts));
    }
    el.dispatchEvent(new MouseEvent('mousedown', opts));
    if (typeof PointerEvent === 'function') {
      el.dispatchEvent(new PointerEvent('pointerup', opts));
    }
    el.dispatchEvent(new MouseEvent('mouseup', opts));
    if (typeof el.click === 'function') {
      el.click();
    } else {
      el.dispatchEvent(new MouseEvent('click', opts));
    }
  }
"""

_SELF_INVOKING_PREFIXES = (
    "(function",
    "(async function",
    "(() =>",
    "(()=>",
    "(async () =>",
    "(async()=>",
    "!function",
    ";(function",
)


class ScriptSerializationError(ValueError):
    """An argument cannot cross the script boundary as JSON."""


def to_js_literal(value: Any) -> str:
    """Serialize one value as a JavaScript literal (JSON only, no NaN/Infinity)."""
    try:
        return json.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ScriptSerializationError(f"Cannot serialize {type(value).__name__} for the page: {exc}") from exc


def serialize(function_source: str, *args: Any) -> str:
    """Build `(<function>)(<args>)` from a JavaScript function source and values."""
    params = ", ".join(to_js_literal(arg) for arg in args)
    return "(" + function_source.strip() + ")(" + params + ")"


def looks_self_invoking(script: str) -> bool:
    """Prefix check only; the script is never parsed."""
    return script.strip().startswith(_SELF_INVOKING_PREFIXES)


def wrap_script(script: str) -> str:
    """Wrap free-form scripts that use a top-level `return` in a function call."""
    if looks_self_invoking(script):
        return script
    if "return " in script:
        return "(function(){" + script + "})()"
    return script


__all__ = [
    "ACTIVATE",
    "DESCRIBE",
    "GET_TEXT",
    "IS_VISIBLE",
    "ScriptSerializationError",
    "looks_self_invoking",
    "serialize",
    "to_js_literal",
    "wrap_script",
]
