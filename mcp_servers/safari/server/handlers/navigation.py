"""
Navigation tool handlers - URL loads, history, reload and search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ... import tools
from ..options import NavigateOptions, RefreshOptions, SearchOptions
from ..types import ToolResult

if TYPE_CHECKING:
    from ...config import SafariConfig
    from ...session import SafariSession


def page_summary(session: SafariSession, selector: str | None, selector_found: bool | None) -> dict[str, Any]:
    """Title, URL, dimensions and tab count after a navigation."""
    info = tools.get_page_info(session)
    response: dict[str, Any] = {
        "title": session.get_title(),
        "url": session.get_url(),
        "pages": info.pages,
        "innerHeight": info.inner_height,
        "scrollHeight": info.scroll_height,
        "tabs": len(tools.list_tabs(session)),
    }
    if selector:
        response["selectorFound"] = bool(selector_found)
    return response


def handle_navigate(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = NavigateOptions.from_args(args)
    if opts.url:
        found = tools.navigate_to(session, opts.url, opts.selector)
    else:
        found = tools.go_history(session, opts.history_steps, opts.selector)
    return ToolResult.json(page_summary(session, opts.selector, found))


def handle_refresh(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = RefreshOptions.from_args(args)
    found = tools.reload_page(session, hard=opts.hard, selector=opts.selector)
    return ToolResult.json(page_summary(session, opts.selector, found))


def handle_search(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = SearchOptions.from_args(args)
    found = tools.search_web(session, opts.text, opts.selector)
    return ToolResult.json(page_summary(session, opts.selector, found))


NAVIGATION_HANDLERS: dict[str, tuple] = {
    "navigate": (handle_navigate, True),
    "refresh": (handle_refresh, True),
    "search": (handle_search, True),
}
