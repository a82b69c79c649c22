"""Tool schema definitions.

`default` values are injected into the argument bag by the registry before
a handler runs, so handlers never re-derive them.
"""

from __future__ import annotations

from typing import Any

_SELECTOR_WAIT = {
    "type": "string",
    "description": "CSS selector to wait for after the page loads",
}


def _tool(name: str, description: str, properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }
    if required:
        schema["required"] = required
    return {"name": name, "description": description, "inputSchema": schema}


OPEN_TOOL = _tool(
    "open",
    """Open a new Safari window and start the automation session.
Must be called before any other tool. Returns the available tools.""",
    {},
)

CLOSE_TOOL = _tool(
    "close",
    "Close the Safari window opened by `open` and end the session.",
    {},
)

NAVIGATE_TOOL = _tool(
    "navigate",
    """Navigate to a URL, or move back/forward through history.
USAGE:
- navigate(url="https://example.com")
- navigate(url="https://app.example.com", selector="#root")
- navigate(direction="back", steps=2)

RESPONSE: {title, url, pages, innerHeight, scrollHeight, tabs, selectorFound?}""",
    {
        "url": {"type": "string", "description": "URL to load in the current tab"},
        "direction": {
            "type": "string",
            "enum": ["back", "forward"],
            "description": "History direction (used when url is omitted)",
        },
        "steps": {
            "type": "integer",
            "minimum": 1,
            "default": 1,
            "description": "Number of history entries to move",
        },
        "selector": _SELECTOR_WAIT,
    },
)

REFRESH_TOOL = _tool(
    "refresh",
    "Reload the current page. hard=true bypasses the cache.",
    {
        "hard": {"type": "boolean", "default": False, "description": "Bypass the cache"},
        "selector": _SELECTOR_WAIT,
    },
)

SEARCH_TOOL = _tool(
    "search",
    "Search the web with Safari's default search provider.",
    {
        "text": {"type": "string", "description": "Search query"},
        "selector": _SELECTOR_WAIT,
    },
    ["text"],
)

CLICK_TOOL = _tool(
    "click",
    """Click an element by visible text, CSS selector or coordinates, or press a key.
USAGE:
- click(text="Sign In")
- click(text="Delete", selector="#toolbar button")   # text within selector matches
- click(selector="#submit")
- click(x=120, y=48)
- click(key="Escape")
- click(text="Menu", wait=".dropdown")

Text matching is case-insensitive; the shortest visible matching element wins.
RESPONSE: {result, title, url, pages, tabs, selectorFound?, changes?, tabList?}""",
    {
        "text": {"type": "string", "description": "Visible text or aria-label to match"},
        "selector": {"type": "string", "description": "CSS selector (alone, or scoping the text search)"},
        "key": {"type": "string", "description": "Key to press instead of clicking (e.g. Enter, Escape)"},
        "x": {"type": "number", "description": "Viewport x coordinate"},
        "y": {"type": "number", "description": "Viewport y coordinate"},
        "wait": {"type": "string", "description": "CSS selector to wait for after the click"},
    },
)

TYPE_TOOL = _tool(
    "type",
    """Type text into an input. Without selector, the focused field or the first visible input.
USAGE:
- type(text="hello")
- type(text="query", selector="input[name=q]", submit=true)""",
    {
        "text": {"type": "string", "description": "Text to type"},
        "selector": {"type": "string", "description": "CSS selector of the target field"},
        "append": {"type": "boolean", "default": False, "description": "Append to the current value"},
        "submit": {"type": "boolean", "default": False, "description": "Press Enter and submit the form"},
    },
    ["text"],
)

READ_TOOL = _tool(
    "read",
    "Read the page title, URL and visible text, plus captured console errors/warnings.",
    {"selector": {"type": "string", "description": "Limit text to the first matching element"}},
)

SCREENSHOT_TOOL = _tool(
    "screenshot",
    "Capture the visible Safari window as PNG. page=N scrolls to viewport page N first; "
    "without page the current scroll position is captured as is.",
    {"page": {"type": "integer", "minimum": 1, "description": "1-based viewport page to capture"}},
)

SCROLL_TOOL = _tool(
    "scroll",
    """Scroll to a viewport page, or by pixels.
USAGE:
- scroll(page=3)
- scroll(direction="down")               # one viewport
- scroll(direction="up", pixels=200)""",
    {
        "page": {"type": "integer", "minimum": 1, "description": "1-based viewport page"},
        "direction": {"type": "string", "enum": ["up", "down"], "description": "Scroll direction"},
        "pixels": {"type": "integer", "minimum": 0, "description": "Distance (default: one viewport)"},
    },
)

WINDOW_TOOL = _tool(
    "window",
    """Manage tabs of the session window: list, open, switch, close.
Tabs are addressed by 1-based index from window(action="list").
USAGE:
- window(action="list")
- window(action="open", url="https://example.com")
- window(action="switch", index=2)
- window(action="close", index=3)""",
    {
        "action": {
            "type": "string",
            "enum": ["list", "open", "switch", "close"],
            "default": "list",
            "description": "Tab action",
        },
        "index": {"type": "integer", "minimum": 1, "description": "Tab index for switch/close"},
        "url": {"type": "string", "description": "URL for a new tab"},
    },
)

EXECUTE_TOOL = _tool(
    "execute",
    "Execute JavaScript in the current tab and return the result as text. Use `return` for values.",
    {"script": {"type": "string", "description": "JavaScript source"}},
    ["script"],
)

TOOL_DEFINITIONS: list[dict[str, Any]] = [
    CLICK_TOOL,
    CLOSE_TOOL,
    EXECUTE_TOOL,
    NAVIGATE_TOOL,
    OPEN_TOOL,
    READ_TOOL,
    REFRESH_TOOL,
    SCREENSHOT_TOOL,
    SCROLL_TOOL,
    SEARCH_TOOL,
    TYPE_TOOL,
    WINDOW_TOOL,
]

TOOLS_BY_NAME: dict[str, dict[str, Any]] = {t["name"]: t for t in TOOL_DEFINITIONS}


def schema_defaults(name: str) -> dict[str, Any]:
    """JSON-schema `default` values declared for a tool's properties."""
    tool = TOOLS_BY_NAME.get(name) or {}
    props = (tool.get("inputSchema") or {}).get("properties") or {}
    return {key: spec["default"] for key, spec in props.items() if isinstance(spec, dict) and "default" in spec}


__all__ = ["TOOL_DEFINITIONS", "TOOLS_BY_NAME", "schema_defaults"]
