"""
Tab tool handler - list, open, switch and close tabs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ... import tools
from ..options import WindowOptions
from ..types import ToolResult

if TYPE_CHECKING:
    from ...config import SafariConfig
    from ...session import SafariSession


def handle_window(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = WindowOptions.from_args(args)
    if opts.action == "switch":
        tabs = tools.switch_tab(session, opts.index)
    elif opts.action == "close":
        tabs = tools.close_tab(session, opts.index)
    elif opts.action == "open":
        tabs = tools.open_tab(session, opts.url)
    else:
        tabs = tools.list_tabs(session)
    return ToolResult.json({"tabs": [t.to_dict() for t in tabs]})


TAB_HANDLERS: dict[str, tuple] = {
    "window": (handle_window, True),
}
