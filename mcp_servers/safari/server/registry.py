"""
Tool registry with dispatch table for MCP server.

Each entry is (handler, requires_session). Schema defaults are merged into
the argument bag before the handler sees it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .definitions import schema_defaults
from .types import HandlerFunc, ToolResult

if TYPE_CHECKING:
    from ..config import SafariConfig
    from ..session import SafariSession

logger = logging.getLogger("mcp.safari.registry")


def with_defaults(name: str, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Fill omitted (or null) arguments from the tool schema's defaults."""
    merged = schema_defaults(name)
    for key, value in (arguments or {}).items():
        if value is not None:
            merged[key] = value
    return merged


class ToolRegistry:
    """Registry for tool handlers with session precondition checks."""

    def __init__(self) -> None:
        # name -> (handler, requires_session)
        self._handlers: dict[str, tuple[HandlerFunc, bool]] = {}

    def register_many(self, handlers: dict[str, tuple[HandlerFunc, bool]]) -> None:
        """Register multiple handlers at once."""
        self._handlers.update(handlers)

    def has(self, name: str) -> bool:
        """Check if handler exists."""
        return name in self._handlers

    def dispatch(
        self,
        name: str,
        config: SafariConfig,
        session: SafariSession,
        arguments: dict[str, Any],
    ) -> ToolResult:
        """
        Dispatch tool call to appropriate handler.

        Raises:
            KeyError: If tool not found
            SessionStateError: If the tool needs an active session and none is open
        """
        handler_info = self._handlers.get(name)
        if handler_info is None:
            raise KeyError(f"Unknown tool: {name}")

        handler, requires_session = handler_info
        if requires_session:
            session.require_active()

        return handler(config, session, with_defaults(name, arguments))


def create_default_registry() -> ToolRegistry:
    """Create a registry with every Safari tool registered."""
    from .handlers import ALL_HANDLERS

    registry = ToolRegistry()
    registry.register_many(ALL_HANDLERS)
    return registry


__all__ = ["HandlerFunc", "ToolRegistry", "create_default_registry", "with_defaults"]
