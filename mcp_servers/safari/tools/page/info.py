"""
Page metadata and text content.

Page dimensions are re-read on every call; the page may have changed since
the previous tool call.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..js_helpers import serialize

if TYPE_CHECKING:
    from ...session import SafariSession

PAGE_INFO_JS = """
function () {
  var body = document.body;
  var root = document.documentElement;
  return JSON.stringify({
    innerHeight: window.innerHeight,
    scrollHeight: Math.max(body ? body.scrollHeight : 0, root ? root.scrollHeight : 0),
    scrollOffset: window.scrollY || window.pageYOffset || 0
  });
}
"""

READ_TEXT_JS = """
function (selector) {
  if (!selector) {
    return document.body ? document.body.innerText : '';
  }
  var el = null;
  try {
    el = document.querySelector(selector);
  } catch (e) {
    el = null;
  }
  return el ? (el.innerText || el.textContent || '') : '';
}
"""


def count_pages(scroll_height: int, inner_height: int) -> int:
    """Number of viewport pages: ceil(scrollHeight / innerHeight), at least 1."""
    if inner_height <= 0:
        return 1
    return max(1, math.ceil(scroll_height / inner_height))


@dataclass(frozen=True)
class PageInfo:
    inner_height: int = 0
    scroll_height: int = 0
    scroll_offset: int = 0

    @property
    def pages(self) -> int:
        return count_pages(self.scroll_height, self.inner_height)

    def to_dict(self) -> dict[str, Any]:
        return {
            "innerHeight": self.inner_height,
            "scrollHeight": self.scroll_height,
            "scrollOffset": self.scroll_offset,
            "pages": self.pages,
        }


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)) and math.isfinite(value):
        return int(value)
    return 0


def parse_page_info(raw: str) -> PageInfo:
    try:
        data = json.loads(raw) if raw else {}
    except ValueError:
        return PageInfo()
    if not isinstance(data, dict):
        return PageInfo()
    return PageInfo(
        inner_height=_as_int(data.get("innerHeight")),
        scroll_height=_as_int(data.get("scrollHeight")),
        scroll_offset=_as_int(data.get("scrollOffset")),
    )


def get_page_info(session: SafariSession) -> PageInfo:
    return parse_page_info(session.eval_js(serialize(PAGE_INFO_JS)))


def read_page_text(session: SafariSession, selector: str | None = None) -> str:
    """Visible text of the page, or of the first element matching `selector`."""
    return session.eval_js(serialize(READ_TEXT_JS, selector or ""))


__all__ = ["PageInfo", "count_pages", "get_page_info", "parse_page_info", "read_page_text"]
