"""
Tab management for the front Safari window.

Tabs are addressed by 1-based ordinal and re-listed on every call. Ordinals
shift when tabs are opened or closed outside this process; there is no stable
tab id to address them by.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .base import SmartToolError, require_positive_index

if TYPE_CHECKING:
    from ..session import SafariSession

logger = logging.getLogger("mcp.safari.tabs")


@dataclass(frozen=True)
class Tab:
    index: int
    title: str
    url: str
    active: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "title": self.title, "url": self.url, "active": self.active}


def parse_tabs(raw: str) -> list[Tab]:
    """Parse the JXA listing; malformed output yields an empty list."""
    try:
        data = json.loads(raw) if raw else []
    except ValueError:
        logger.debug("tab_list_unparsable len=%d", len(raw or ""))
        return []
    if not isinstance(data, list):
        return []
    tabs: list[Tab] = []
    for position, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            continue
        index = item.get("index")
        tabs.append(
            Tab(
                index=index if isinstance(index, int) and not isinstance(index, bool) else position,
                title=str(item.get("title") or ""),
                url=str(item.get("url") or ""),
                active=bool(item.get("active")),
            )
        )
    return tabs


def list_tabs(session: SafariSession) -> list[Tab]:
    return parse_tabs(session.run(session.automation.list_tabs()))


def _checked_index(session: SafariSession, index: Any, action: str) -> int:
    index = require_positive_index("window", index)
    count = len(list_tabs(session))
    if index > count:
        raise SmartToolError(
            tool="window",
            action=action,
            reason=f"Tab index {index} out of range (1-{count})",
            suggestion="Use window(action='list') to see current tab indices",
            details={"index": index, "tabs": count},
        )
    return index


def switch_tab(session: SafariSession, index: int) -> list[Tab]:
    index = _checked_index(session, index, "switch")
    session.run(session.automation.switch_tab(index))
    return list_tabs(session)


def close_tab(session: SafariSession, index: int) -> list[Tab]:
    index = _checked_index(session, index, "close")
    session.run(session.automation.close_tab(index))
    return list_tabs(session)


def open_tab(session: SafariSession, url: str | None = None) -> list[Tab]:
    """Open a new tab (optionally at `url`) and make it current."""
    session.run(session.automation.create_tab(url or None))
    return list_tabs(session)


__all__ = ["Tab", "close_tab", "list_tabs", "open_tab", "parse_tabs", "switch_tab"]
