"""
Page tool handlers - read text and take screenshots.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ... import tools
from ..options import ReadOptions, ScreenshotOptions
from ..types import ToolResult

if TYPE_CHECKING:
    from ...config import SafariConfig
    from ...session import SafariSession


def handle_read(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = ReadOptions.from_args(args)
    response: dict[str, Any] = {
        "title": session.get_title(),
        "url": session.get_url(),
        "text": tools.read_page_text(session, opts.selector),
        "pages": tools.get_page_info(session).pages,
    }
    console = tools.get_console_messages(session).to_dict()
    response.update({key: messages for key, messages in console.items() if messages})
    return ToolResult.json(response)


def handle_screenshot(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    opts = ScreenshotOptions.from_args(args)
    shot = tools.screenshot(session, opts.page)
    image = shot.pop("image")
    return ToolResult.with_image(shot, image)


PAGE_HANDLERS: dict[str, tuple] = {
    "read": (handle_read, True),
    "screenshot": (handle_screenshot, True),
}
