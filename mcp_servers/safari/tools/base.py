"""
Base utilities for Safari automation tools.

Provides:
- SmartToolError: Structured errors for AI agents
- SessionStateError: Session precondition violations
- require_positive_index: Tab ordinal validation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SmartToolError(Exception):
    """Structured error with context for AI agents."""

    tool: str
    action: str
    reason: str
    suggestion: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.tool}] {self.action} failed: {self.reason}. Suggestion: {self.suggestion}"


@dataclass
class SessionStateError(SmartToolError):
    """Raised when an operation runs in the wrong session state. Never retried."""

    def __str__(self) -> str:
        return f"{self.reason}. {self.suggestion}"


def require_positive_index(tool: str, index: Any) -> int:
    """Validate a 1-based tab ordinal before it reaches AppleScript."""
    if isinstance(index, bool) or not isinstance(index, int) or index < 1:
        raise SmartToolError(
            tool=tool,
            action="validate",
            reason=f"Invalid tab index: {index!r}",
            suggestion="Use a 1-based index from window(action='list')",
        )
    return index
