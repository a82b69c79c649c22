"""
Type definitions for MCP server responses and handlers.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import SafariConfig
    from ..session import SafariSession


@dataclass(slots=True)
class ToolContent:
    """Single content item in tool response."""

    type: str  # "text" or "image"
    text: str | None = None
    data: str | None = None  # base64 for images
    mime_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to MCP content format."""
        if self.type == "image":
            return {"type": "image", "data": self.data, "mimeType": self.mime_type}
        return {"type": "text", "text": self.text}


@dataclass(slots=True)
class ToolResult:
    """Result of a tool execution."""

    content: list[ToolContent] = field(default_factory=list)
    is_error: bool = False
    # Raw payload kept for tests and logging; not part of the wire format.
    data: Any | None = None

    @classmethod
    def text(cls, text: str) -> ToolResult:
        """Create result with single text content."""
        return cls(content=[ToolContent(type="text", text=text or "")], data=text)

    @classmethod
    def json(cls, data: Any) -> ToolResult:
        """Create result with JSON-encoded text content."""
        return cls(content=[ToolContent(type="text", text=json.dumps(data, ensure_ascii=False))], data=data)

    @classmethod
    def error(
        cls,
        message: str,
        *,
        tool: str | None = None,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> ToolResult:
        """Create error result. The text leads with the message itself."""
        payload: dict[str, Any] = {"error": message}
        if tool:
            payload["tool"] = tool
        if suggestion:
            payload["suggestion"] = suggestion
        if details:
            payload["details"] = details
        text = f"Error: {message}"
        if suggestion:
            text += f"\nSuggestion: {suggestion}"
        return cls(content=[ToolContent(type="text", text=text)], is_error=True, data=payload)

    @classmethod
    def with_image(cls, data: Any, data_b64: str, mime_type: str = "image/png") -> ToolResult:
        """Create result with image content followed by JSON text. Omits the image if empty."""
        text = ToolContent(type="text", text=json.dumps(data, ensure_ascii=False))
        if not data_b64:
            return cls(content=[text], data=data)
        return cls(content=[ToolContent(type="image", data=data_b64, mime_type=mime_type), text], data=data)

    def to_content_list(self) -> list[dict[str, Any]]:
        """Convert to MCP content list format."""
        return [c.to_dict() for c in self.content]


HandlerFunc = Callable[["SafariConfig", "SafariSession", dict[str, Any]], ToolResult]
