"""
Session lifecycle handlers - open and close the Safari window.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..contract import tools_list
from ..types import ToolResult

if TYPE_CHECKING:
    from ...config import SafariConfig
    from ...session import SafariSession


def handle_open(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    session.open()
    return ToolResult.json({"tabs": 1, "tools": tools_list(session.is_active)})


def handle_close(config: SafariConfig, session: SafariSession, args: dict[str, Any]) -> ToolResult:
    session.close()
    return ToolResult.json({"tabs": 0})


SESSION_HANDLERS: dict[str, tuple] = {
    "open": (handle_open, False),
    "close": (handle_close, True),
}
