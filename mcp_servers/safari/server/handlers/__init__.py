"""
Tool handlers organized by domain.

Each handler module provides functions that handle specific tool calls.
All handlers follow the signature: (config, session, arguments) -> ToolResult
"""

from .interaction import INTERACTION_HANDLERS
from .navigation import NAVIGATION_HANDLERS
from .page import PAGE_HANDLERS
from .session import SESSION_HANDLERS
from .tabs import TAB_HANDLERS

# Aggregate all handlers
ALL_HANDLERS: dict[str, tuple] = {
    **SESSION_HANDLERS,
    **NAVIGATION_HANDLERS,
    **INTERACTION_HANDLERS,
    **PAGE_HANDLERS,
    **TAB_HANDLERS,
}

__all__ = [
    "ALL_HANDLERS",
    "INTERACTION_HANDLERS",
    "NAVIGATION_HANDLERS",
    "PAGE_HANDLERS",
    "SESSION_HANDLERS",
    "TAB_HANDLERS",
]
