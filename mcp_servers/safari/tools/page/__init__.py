"""
Page state and synchronization tools.

Provides:
- get_page_info: Viewport and scroll dimensions
- read_page_text: Visible text content
- install_console_capture / get_console_messages: Console errors and warnings
- wait_for_page_load / wait_for_selector: Polling waits
"""

from .diagnostics import ConsoleMessages, get_console_messages, install_console_capture
from .info import PageInfo, get_page_info, read_page_text
from .wait import poll_until, wait_for_page_load, wait_for_selector

__all__ = [
    "ConsoleMessages",
    "PageInfo",
    "get_console_messages",
    "get_page_info",
    "install_console_capture",
    "poll_until",
    "read_page_text",
    "wait_for_page_load",
    "wait_for_selector",
]
