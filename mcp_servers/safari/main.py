"""
MCP Server for Safari automation via osascript.

This module provides the main entry point and protocol handling.
Tool dispatch is handled via registry pattern in server/registry.py.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

from .config import SafariConfig
from .osascript import AutomationError
from .server.contract import (
    DEFAULT_PROTOCOL_VERSION,
    LATEST_PROTOCOL_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
    initialize_result,
    select_protocol,
    tools_list,
)
from .server.redaction import redact_jsonrpc_for_log, redact_tool_arguments
from .server.registry import ToolRegistry, create_default_registry
from .server.types import ToolResult
from .session import SafariSession
from .tools.base import SmartToolError
from .tools.search import SearchProviderError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger("mcp.safari")

__all__ = [
    "SUPPORTED_PROTOCOL_VERSIONS",
    "LATEST_PROTOCOL_VERSION",
    "DEFAULT_PROTOCOL_VERSION",
    "McpServer",
    "main",
]

# Tools whose success changes what tools/list returns.
_LIST_CHANGING_TOOLS = {"open", "close"}


def _write_message(payload: dict[str, Any]) -> None:
    """Write JSON-RPC message to stdout."""
    if os.environ.get("MCP_TRACE"):
        logger.info("send %s", redact_jsonrpc_for_log(payload))
    data = json.dumps(payload, ensure_ascii=False)
    sys.stdout.buffer.write((data + "\n").encode())
    sys.stdout.buffer.flush()


def _read_message() -> Any:
    """Read JSON-RPC message from stdin. Returns None at end of input."""
    while True:
        line = sys.stdin.buffer.readline()
        if not line:
            return None
        line = line.strip()
        if not line:
            continue
        try:
            msg = json.loads(line.decode())
        except ValueError:
            logger.info("recv_unparsable len=%d", len(line))
            _write_message({"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": "Parse error"}})
            continue
        if os.environ.get("MCP_TRACE"):
            logger.info("recv %s", redact_jsonrpc_for_log(msg))
        return msg


class McpServer:
    """MCP Server with registry-based tool dispatch."""

    def __init__(
        self,
        config: SafariConfig | None = None,
        session: SafariSession | None = None,
        registry: ToolRegistry | None = None,
    ) -> None:
        self.config = config or SafariConfig.from_env()
        self.session = session or SafariSession(self.config)
        self.registry = registry or create_default_registry()

    def handle_initialize(self, request_id: Any, params: dict[str, Any] | None = None) -> None:
        """Handle initialize request."""
        requested = (params or {}).get("protocolVersion") if isinstance(params, dict) else None
        protocol = select_protocol(requested)
        _write_message(
            {
                "jsonrpc": "2.0",
                "id": request_id,
                "result": initialize_result(protocol),
            }
        )

    def handle_list_tools(self, request_id: Any) -> None:
        """Handle tools/list request."""
        _write_message(
            {
                "jsonrpc": "2.0",
                "id": request_id,
                "result": {"tools": tools_list(self.session.is_active)},
            }
        )

    def _log_call(self, name: str, arguments: dict[str, Any]) -> None:
        """Log tool call with sanitized arguments."""
        safe_args = redact_tool_arguments(name, arguments)
        logger.info("tool=%s args=%s", name, safe_args)

    def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Run one tool and map every failure to an error result."""
        self._log_call(name, arguments)
        try:
            if not name:
                return ToolResult.error("Missing tool name")
            if not self.registry.has(name):
                return ToolResult.error(f"Unknown tool: {name}", tool=name)
            return self.registry.dispatch(name, self.config, self.session, arguments)
        except SmartToolError as e:
            logger.info("tool_error tool=%s action=%s reason=%s", e.tool, e.action, e.reason)
            return ToolResult.error(e.reason, tool=e.tool, suggestion=e.suggestion, details=e.details)
        except (AutomationError, SearchProviderError) as e:
            logger.info("automation_error tool=%s %s", name, str(e))
            return ToolResult.error(str(e), tool=name)
        except Exception as exc:
            logger.exception("tool_call_failed")
            return ToolResult.error(str(exc), tool=name)

    def handle_call_tool(self, request_id: Any, name: str, arguments: dict[str, Any]) -> None:
        """Handle tools/call request via registry dispatch."""
        was_active = self.session.is_active
        result = self.call_tool(name, arguments)
        _write_message(
            {
                "jsonrpc": "2.0",
                "id": request_id,
                "result": {"content": result.to_content_list(), "isError": result.is_error},
            }
        )
        if name in _LIST_CHANGING_TOOLS and self.session.is_active != was_active:
            _write_message({"jsonrpc": "2.0", "method": "notifications/tools/list_changed"})

    def dispatch(self, message: Any) -> None:
        """Dispatch incoming JSON-RPC message to appropriate handler."""
        if not isinstance(message, dict):
            _write_message({"jsonrpc": "2.0", "id": None, "error": {"code": -32600, "message": "Invalid Request"}})
            return
        if not message:
            return

        method = message.get("method")
        request_id = message.get("id")
        params = message.get("params") or {}

        if method == "initialize":
            self.handle_initialize(request_id, params)
        elif method == "notifications/initialized":
            return
        elif method == "tools/list":
            self.handle_list_tools(request_id)
        elif method == "tools/call":
            name = params.get("name")
            arguments = params.get("arguments") or {}
            self.handle_call_tool(request_id, name or "", arguments)
        elif method == "ping":
            _write_message({"jsonrpc": "2.0", "id": request_id, "result": {}})
        elif request_id is None:
            # Unknown notification: nothing to answer.
            return
        else:
            _write_message(
                {
                    "jsonrpc": "2.0",
                    "id": request_id,
                    "error": {"code": -32601, "message": f"Method {method} not found"},
                }
            )


def main() -> None:
    """Main entry point for MCP server."""
    server = McpServer()
    while True:
        message = _read_message()
        if message is None:
            break
        server.dispatch(message)


if __name__ == "__main__":
    main()
