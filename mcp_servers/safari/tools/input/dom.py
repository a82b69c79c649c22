"""
DOM-based input actions for Safari automation.

Values are written through the prototype's native `value` setter and then
announced with bubbling input/change events. Frameworks such as React swap
the instance accessor to track writes, so assigning `el.value` directly
would leave their state untouched.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from ..base import SmartToolError
from ..js_helpers import serialize

if TYPE_CHECKING:
    from ...session import SafariSession

TYPE_TEXT_JS = """
function (text, selector, append, submit) {
  var el;
  if (selector) {
    try {
      el = document.querySelector(selector);
    } catch (e) {
      return 'Invalid selector: ' + selector;
    }
    if (!el) {
      return 'No element found for selector: ' + selector;
    }
  } else {
    el = document.activeElement;
    if (!el || el === document.body || (el.tagName !== 'INPUT' && el.tagName !== 'TEXTAREA' && !el.isContentEditable)) {
      var inputs = document.querySelectorAll(
        'input:not([type="hidden"]):not([type="submit"]):not([type="button"])'
        + ':not([type="checkbox"]):not([type="radio"]), textarea'
      );
      el = null;
      for (var i = 0; i < inputs.length; i++) {
        if (inputs[i].offsetParent !== null) {
          el = inputs[i];
          break;
        }
      }
    }
  }
  if (!el) {
    return 'No input element found';
  }
  el.focus();
  el.scrollIntoView({ block: 'center' });
  if (el.isContentEditable && el.tagName !== 'INPUT' && el.tagName !== 'TEXTAREA') {
    el.textContent = append ? (el.textContent || '') + text : text;
    el.dispatchEvent(new Event('input', { bubbles: true }));
  } else {
    var newVal = append ? (el.value || '') + text : text;
    var proto = el.tagName === 'TEXTAREA'
      ? window.HTMLTextAreaElement.prototype
      : window.HTMLInputElement.prototype;
    var descriptor = Object.getOwnPropertyDescriptor(proto, 'value');
    if (descriptor && descriptor.set) {
      descriptor.set.call(el, newVal);
    } else {
      el.value = newVal;
    }
    el.dispatchEvent(new Event('input', { bubbles: true }));
    el.dispatchEvent(new Event('change', { bubbles: true }));
  }
  var desc = el.tagName.toLowerCase() + (el.name ? '[name=' + el.name + ']' : '') + (el.id ? '#' + el.id : '');
  if (submit) {
    var enterOpts = { key: 'Enter', code: 'Enter', keyCode: 13, which: 13, bubbles: true, cancelable: true };
    el.dispatchEvent(new KeyboardEvent('keydown', enterOpts));
    el.dispatchEvent(new KeyboardEvent('keypress', enterOpts));
    el.dispatchEvent(new KeyboardEvent('keyup', enterOpts));
    if (el.form) {
      el.form.submit();
    }
    return 'Typed and submitted in: ' + desc;
  }
  return 'Typed in: ' + desc;
}
"""

KEYPRESS_JS = """
function (key, selector) {
  var el;
  if (selector) {
    try {
      el = document.querySelector(selector);
    } catch (e) {
      return 'Invalid selector: ' + selector;
    }
    if (!el) {
      return 'No element found for selector: ' + selector;
    }
  } else {
    el = document.activeElement || document.body;
  }
  var opts = { key: key, code: key, bubbles: true, cancelable: true };
  el.dispatchEvent(new KeyboardEvent('keydown', opts));
  el.dispatchEvent(new KeyboardEvent('keyup', opts));
  var desc = el.tagName.toLowerCase();
  if (el.id) {
    desc += '#' + el.id;
  }
  return 'Pressed: ' + key + ' on ' + desc;
}
"""


def type_text(
    session: SafariSession,
    text: str,
    selector: str | None = None,
    *,
    append: bool = False,
    submit: bool = False,
) -> str:
    """Type into the selector target, the focused field, or the first visible input."""
    if not isinstance(text, str):
        raise SmartToolError(
            tool="type",
            action="validate",
            reason="text must be a string",
            suggestion="Provide text='...'",
        )
    result = session.eval_js(serialize(TYPE_TEXT_JS, text, selector or "", bool(append), bool(submit)))
    if submit:
        time.sleep(session.config.click_settle)
    return result


def press_key(session: SafariSession, key: str, selector: str | None = None) -> str:
    """Dispatch keydown/keyup for `key` (e.g. 'Escape', 'ArrowRight', 'Enter')."""
    if not key:
        raise SmartToolError(
            tool="click",
            action="validate",
            reason="Empty key",
            suggestion="Provide a key name such as 'Enter' or 'Escape'",
        )
    return session.eval_js(serialize(KEYPRESS_JS, key, selector or ""))


__all__ = ["KEYPRESS_JS", "TYPE_TEXT_JS", "press_key", "type_text"]
