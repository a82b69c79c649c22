"""Protocol and tool contract definitions.

This is the single source of truth for:
- supported MCP protocol versions
- server identity
- capabilities advertised by initialize
- the tool list for each session state
"""

from __future__ import annotations

from typing import Any

from .definitions import TOOL_DEFINITIONS, TOOLS_BY_NAME

SERVER_INFO: dict[str, str] = {"name": "safari", "version": "0.1.0"}

SUPPORTED_PROTOCOL_VERSIONS = ["2025-06-18", "2025-03-26", "2024-11-05"]
LATEST_PROTOCOL_VERSION = SUPPORTED_PROTOCOL_VERSIONS[0]
DEFAULT_PROTOCOL_VERSION = LATEST_PROTOCOL_VERSION

CAPABILITIES: dict[str, Any] = {
    "tools": {"listChanged": True},
}

INSTRUCTIONS = "Call `open` first. All other tools become available once a Safari session is active."


def select_protocol(requested: Any) -> str:
    if isinstance(requested, str) and requested in SUPPORTED_PROTOCOL_VERSIONS:
        return requested
    return DEFAULT_PROTOCOL_VERSION


def initialize_result(protocol: str) -> dict[str, Any]:
    return {
        "protocolVersion": protocol,
        "serverInfo": SERVER_INFO,
        "capabilities": CAPABILITIES,
        "instructions": INSTRUCTIONS,
    }


def tools_list(active: bool) -> list[dict[str, Any]]:
    """Only `open` is offered until a session is active."""
    if not active:
        return [TOOLS_BY_NAME["open"]]
    return list(TOOL_DEFINITIONS)


__all__ = [
    "CAPABILITIES",
    "DEFAULT_PROTOCOL_VERSION",
    "LATEST_PROTOCOL_VERSION",
    "SERVER_INFO",
    "SUPPORTED_PROTOCOL_VERSIONS",
    "initialize_result",
    "select_protocol",
    "tools_list",
]
