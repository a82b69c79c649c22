"""
Safari automation tools organized by domain.

Each module provides focused functionality:
- base: Structured errors and argument checks
- js_helpers: JavaScript snippets and the script serializer
- navigation: URL loads, history and reload with console capture
- dom: Window screenshots
- page: Page metadata, text, console capture, polling waits
- smart: Natural-language clicking
- input: Typing, key presses, scrolling
- tabs: Tab management by ordinal
- search: Default search provider lookup
- network: Arbitrary JavaScript evaluation
"""

from .base import SessionStateError, SmartToolError, require_positive_index
from .dom import screenshot
from .input import press_key, scroll_by, scroll_to_page, type_text
from .js_helpers import ScriptSerializationError, serialize, wrap_script
from .navigation import go_history, navigate_to, reload_page
from .network import execute_script
from .page import (
    ConsoleMessages,
    PageInfo,
    get_console_messages,
    get_page_info,
    install_console_capture,
    read_page_text,
    wait_for_page_load,
    wait_for_selector,
)
from .search import SearchProviderError, search_web
from .smart import ClickResult, click_element
from .tabs import Tab, close_tab, list_tabs, open_tab, switch_tab

__all__ = [
    # Base
    "SessionStateError",
    "SmartToolError",
    "require_positive_index",
    # Serializer
    "ScriptSerializationError",
    "serialize",
    "wrap_script",
    # Navigation
    "go_history",
    "navigate_to",
    "reload_page",
    "search_web",
    "SearchProviderError",
    # Page
    "ConsoleMessages",
    "PageInfo",
    "get_console_messages",
    "get_page_info",
    "install_console_capture",
    "read_page_text",
    "wait_for_page_load",
    "wait_for_selector",
    "screenshot",
    # Interaction
    "ClickResult",
    "click_element",
    "press_key",
    "scroll_by",
    "scroll_to_page",
    "type_text",
    "execute_script",
    # Tabs
    "Tab",
    "close_tab",
    "list_tabs",
    "open_tab",
    "switch_tab",
]
