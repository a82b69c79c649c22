"""
Interaction tool handlers - click, type, scroll and script execution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ... import tools
from ..options import ClickOptions, ExecuteOptions, ScrollOptions, TypeOptions
from ..types import ToolResult

if TYPE_CHECKING:
    from ...config import SafariConfig
    from ...session import SafariSession


def _snapshot(session: SafariSession) -> tuple[str, str, int, list[tools.Tab]]:
    return (
        session.get_title(),
        session.get_url(),
        tools.get_page_info(session).pages,
        tools.list_tabs(session),
    )


def click_changes(before: tuple[str, str, int, int], after: tuple[str, str, int, int]) -> list[str]:
    """Human-readable differences of (title, url, pages, tab count)."""
    changes: list[str] = []
    if before[0] != after[0]:
        changes.append("title changed")
    if before[1] != after[1]:
        changes.append("url changed")
    if before[2] != after[2]:
        changes.append(f"pages changed from {before[2]} to {after[2]}")
    if before[3] != after[3]:
        changes.append(f"tabs changed from {before[3]} to {after[3]}")
    return changes


def handle_click(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = ClickOptions.from_args(args)
    title0, url0, pages0, tabs0 = _snapshot(session)

    if opts.key:
        pressed = tools.press_key(session, opts.key, opts.selector)
        found = tools.wait_for_selector(session, opts.wait) if opts.wait else None
        click = tools.ClickResult(pressed, found)
    else:
        click = tools.click_element(
            session,
            text=opts.text,
            selector=opts.selector,
            x=opts.x if opts.has_point else None,
            y=opts.y if opts.has_point else None,
            wait=opts.wait,
        )

    title, url, pages, tabs = _snapshot(session)
    response: dict[str, Any] = click.to_dict()
    response.update({"title": title, "url": url, "pages": pages, "tabs": len(tabs)})
    changes = click_changes((title0, url0, pages0, len(tabs0)), (title, url, pages, len(tabs)))
    if len(tabs0) != len(tabs):
        response["tabList"] = [t.to_dict() for t in tabs]
    if changes:
        response["changes"] = changes
    return ToolResult.json(response)


def handle_type(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = TypeOptions.from_args(args)
    return ToolResult.text(
        tools.type_text(session, opts.text, opts.selector, append=opts.append, submit=opts.submit)
    )


def handle_scroll(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = ScrollOptions.from_args(args)
    if opts.page is not None:
        info = tools.scroll_to_page(session, opts.page)
    else:
        info = tools.scroll_by(session, opts.direction or "down", opts.pixels)
    return ToolResult.json(info.to_dict())


def handle_execute(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = ExecuteOptions.from_args(args)
    return ToolResult.text(tools.execute_script(session, opts.script))


INTERACTION_HANDLERS: dict[str, tuple] = {
    "click": (handle_click, True),
    "type": (handle_type, True),
    "scroll": (handle_scroll, True),
    "execute": (handle_execute, True),
}
