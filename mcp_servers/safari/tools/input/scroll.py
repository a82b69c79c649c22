"""
Viewport-page scrolling.

A viewport page is one window height of document. Page numbers are 1-based
and clamped to the document; pixel scrolls take a signed delta.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from ..base import SmartToolError
from ..js_helpers import serialize
from ..page.info import PageInfo, get_page_info

if TYPE_CHECKING:
    from ...session import SafariSession

SCROLL_TO_JS = """
function (top) {
  window.scrollTo(0, top);
  return window.scrollY || window.pageYOffset || 0;
}
"""

SCROLL_BY_JS = """
function (delta) {
  window.scrollBy(0, delta);
  return window.scrollY || window.pageYOffset || 0;
}
"""

DIRECTIONS = ("up", "down")


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(int(page), max(1, pages)))


def page_offset(page: int, info: PageInfo) -> int:
    """Scroll offset of the top of `page` after clamping it to the document."""
    return (clamp_page(page, info.pages) - 1) * info.inner_height


def signed_delta(direction: str, pixels: int) -> int:
    if direction not in DIRECTIONS:
        raise SmartToolError(
            tool="scroll",
            action="validate",
            reason=f"Invalid direction: {direction}",
            suggestion="Use direction='up' or direction='down'",
        )
    magnitude = abs(int(pixels))
    return -magnitude if direction == "up" else magnitude


def scroll_to_page(session: SafariSession, page: int) -> PageInfo:
    """Scroll so the top of viewport page `page` is at the top of the window."""
    info = get_page_info(session)
    session.eval_js(serialize(SCROLL_TO_JS, page_offset(page, info)))
    return get_page_info(session)


def scroll_by(session: SafariSession, direction: str, pixels: int | None = None) -> PageInfo:
    """Scroll up or down; without `pixels` one full viewport height."""
    if pixels is None:
        signed_delta(direction, 0)
        pixels = get_page_info(session).inner_height
    session.eval_js(serialize(SCROLL_BY_JS, signed_delta(direction, pixels)))
    return get_page_info(session)


def settle_at_page(session: SafariSession, page: int) -> PageInfo:
    """Scroll to a page and give the renderer time to paint (screenshots)."""
    info = get_page_info(session)
    session.eval_js(serialize(SCROLL_TO_JS, page_offset(page, info)))
    time.sleep(session.config.scroll_settle)
    return info


__all__ = [
    "DIRECTIONS",
    "clamp_page",
    "page_offset",
    "scroll_by",
    "scroll_to_page",
    "settle_at_page",
    "signed_delta",
]
