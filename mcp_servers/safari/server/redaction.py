"""Redaction utilities for logging.

Tool arguments and traced JSON-RPC frames are logged in a reduced form:
typed text and scripts become length summaries, secret-looking URL query
values are replaced, and image payloads are dropped.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SENSITIVE_SUBSTRINGS = (
    "token",
    "secret",
    "password",
    "passwd",
    "pwd",
    "authorization",
    "cookie",
    "session",
    "jwt",
    "bearer",
    "api-key",
    "api_key",
    "apikey",
)

# Exact matches only, so "author" stays readable.
_SENSITIVE_EXACT = {"auth", "pass", "key", "code", "sig", "signature"}

# Tool -> argument keys whose values are never logged verbatim.
_TOOL_SECRET_ARGS: dict[str, set[str]] = {
    "type": {"text"},
    "execute": {"script"},
}

_LOG_MAX_TEXT = 512


def is_sensitive_key(key: str) -> bool:
    k = (key or "").strip().lower()
    if not k:
        return False
    if k in _SENSITIVE_EXACT:
        return True
    return any(s in k for s in _SENSITIVE_SUBSTRINGS)


def _redact_pairs(raw: str) -> tuple[str, bool]:
    pairs = parse_qsl(raw, keep_blank_values=True)
    changed = False
    out: list[tuple[str, str]] = []
    for k, v in pairs:
        if v and is_sensitive_key(k):
            out.append((k, "<redacted>"))
            changed = True
        else:
            out.append((k, v))
    return (urlencode(out, doseq=True) if changed else raw), changed


def redact_url(url: str) -> str:
    """Redact secret-looking query/fragment values and userinfo.

    Returns the original URL unchanged when nothing needs redaction.
    """
    if not isinstance(url, str) or not url:
        return url
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    netloc = parts.netloc
    changed = False
    if "@" in netloc:
        netloc = netloc.split("@", 1)[1]
        changed = True

    query, q_changed = _redact_pairs(parts.query) if parts.query else ("", False)
    fragment = parts.fragment
    f_changed = False
    if fragment and "=" in fragment:
        fragment, f_changed = _redact_pairs(fragment)

    if not (changed or q_changed or f_changed):
        return url
    return urlunsplit((parts.scheme, netloc, parts.path, query, fragment))


def _redacted_summary(value: Any) -> str:
    if isinstance(value, str):
        return f"<redacted str len={len(value)}>"
    if value is None:
        return "<redacted>"
    return f"<redacted {type(value).__name__}>"


def redact_tool_arguments(tool: str, args: dict[str, Any]) -> dict[str, Any]:
    """Redact tool arguments for safe logging."""
    secret_keys = _TOOL_SECRET_ARGS.get(tool, set())
    out: dict[str, Any] = {}
    for key, value in (args or {}).items():
        lk = str(key).lower()
        if lk in secret_keys:
            out[key] = _redacted_summary(value)
        elif lk == "url" and isinstance(value, str):
            out[key] = redact_url(value)
        elif is_sensitive_key(lk):
            out[key] = _redacted_summary(value)
        else:
            out[key] = value
    return out


def redact_jsonrpc_for_log(payload: dict[str, Any]) -> dict[str, Any]:
    """Shallow-copy a JSON-RPC frame with arguments redacted and content trimmed."""
    msg = dict(payload) if isinstance(payload, dict) else {}

    if msg.get("method") == "tools/call":
        params = msg.get("params")
        if isinstance(params, dict) and isinstance(params.get("arguments"), dict):
            params = dict(params)
            params["arguments"] = redact_tool_arguments(str(params.get("name") or ""), params["arguments"])
            msg["params"] = params

    result = msg.get("result")
    if isinstance(result, dict) and isinstance(result.get("content"), list):
        content = []
        for item in result["content"]:
            if not isinstance(item, dict):
                content.append(item)
                continue
            it = dict(item)
            if it.get("type") == "image" and isinstance(it.get("data"), str):
                it["data"] = f"<omitted image base64 len={len(it['data'])}>"
            text = it.get("text")
            if isinstance(text, str) and len(text) > _LOG_MAX_TEXT:
                it["text"] = text[:_LOG_MAX_TEXT] + f"... <truncated len={len(text)}>"
            content.append(it)
        result = dict(result)
        result["content"] = content
        msg["result"] = result

    return msg


__all__ = ["is_sensitive_key", "redact_jsonrpc_for_log", "redact_tool_arguments", "redact_url"]
