"""
Typed tool options.

Each tool's argument bag (with schema defaults already injected) is turned
into a frozen dataclass before any automation runs. Invalid combinations are
rejected here with SmartToolError(action="validate").
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ..tools.base import SmartToolError


def _invalid(tool: str, reason: str, suggestion: str) -> SmartToolError:
    return SmartToolError(tool=tool, action="validate", reason=reason, suggestion=suggestion)


def _opt_str(tool: str, args: dict[str, Any], key: str) -> str | None:
    value = args.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _invalid(tool, f"{key} must be a string", f"Pass {key} as a string")
    return value or None


def _req_str(tool: str, args: dict[str, Any], key: str) -> str:
    value = _opt_str(tool, args, key)
    if value is None or not value.strip():
        raise _invalid(tool, f"Missing required argument: {key}", f"Provide {key}='...'")
    return value


def _req_text(tool: str, args: dict[str, Any], key: str) -> str:
    """Like _req_str, but whitespace-only text is kept."""
    value = args.get(key)
    if not isinstance(value, str) or not value:
        raise _invalid(tool, f"Missing required argument: {key}", f"Provide {key}='...'")
    return value


def _opt_int(tool: str, args: dict[str, Any], key: str, *, minimum: int | None = None) -> int | None:
    value = args.get(key)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(tool, f"{key} must be an integer", f"Pass {key} as a whole number")
    if minimum is not None and value < minimum:
        raise _invalid(tool, f"{key} must be >= {minimum}", f"Pass {key}>={minimum}")
    return value


def _opt_number(tool: str, args: dict[str, Any], key: str) -> float | None:
    value = args.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise _invalid(tool, f"{key} must be a number", f"Pass {key} as a number")
    return value


def _flag(args: dict[str, Any], key: str) -> bool:
    return bool(args.get(key, False))


@dataclass(frozen=True)
class NavigateOptions:
    url: str | None = None
    direction: str | None = None
    steps: int = 1
    selector: str | None = None

    @property
    def history_steps(self) -> int:
        return -self.steps if self.direction == "back" else self.steps

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> NavigateOptions:
        url = _opt_str("navigate", args, "url")
        direction = _opt_str("navigate", args, "direction")
        steps = _opt_int("navigate", args, "steps", minimum=1) or 1
        selector = _opt_str("navigate", args, "selector")
        if url:
            return cls(url=url, selector=selector)
        if direction is None:
            raise _invalid("navigate", "Missing required arguments: url or direction", "Provide url or direction")
        if direction not in ("back", "forward"):
            raise _invalid("navigate", f"Invalid direction: {direction}", "Use direction='back' or 'forward'")
        return cls(direction=direction, steps=steps, selector=selector)


@dataclass(frozen=True)
class RefreshOptions:
    hard: bool = False
    selector: str | None = None

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> RefreshOptions:
        return cls(hard=_flag(args, "hard"), selector=_opt_str("refresh", args, "selector"))


@dataclass(frozen=True)
class SearchOptions:
    text: str
    selector: str | None = None

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> SearchOptions:
        return cls(text=_req_str("search", args, "text"), selector=_opt_str("search", args, "selector"))


@dataclass(frozen=True)
class ClickOptions:
    text: str | None = None
    selector: str | None = None
    key: str | None = None
    x: float | None = None
    y: float | None = None
    wait: str | None = None

    @property
    def has_point(self) -> bool:
        return self.x is not None and self.y is not None

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> ClickOptions:
        opts = cls(
            text=_opt_str("click", args, "text"),
            selector=_opt_str("click", args, "selector"),
            key=_opt_str("click", args, "key"),
            x=_opt_number("click", args, "x"),
            y=_opt_number("click", args, "y"),
            wait=_opt_str("click", args, "wait"),
        )
        if not (opts.text or opts.selector or opts.key or opts.has_point):
            raise _invalid(
                "click",
                "Missing required arguments: text, selector, key, or x/y coordinates",
                "Provide text, selector, key, or both x and y",
            )
        return opts


@dataclass(frozen=True)
class TypeOptions:
    text: str
    selector: str | None = None
    append: bool = False
    submit: bool = False

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> TypeOptions:
        return cls(
            text=_req_text("type", args, "text"),
            selector=_opt_str("type", args, "selector"),
            append=_flag(args, "append"),
            submit=_flag(args, "submit"),
        )


@dataclass(frozen=True)
class ReadOptions:
    selector: str | None = None

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> ReadOptions:
        return cls(selector=_opt_str("read", args, "selector"))


@dataclass(frozen=True)
class ScreenshotOptions:
    page: int | None = None

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> ScreenshotOptions:
        return cls(page=_opt_int("screenshot", args, "page", minimum=1))


@dataclass(frozen=True)
class ScrollOptions:
    page: int | None = None
    direction: str | None = None
    pixels: int | None = None

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> ScrollOptions:
        page = _opt_int("scroll", args, "page", minimum=1)
        direction = _opt_str("scroll", args, "direction")
        pixels = _opt_int("scroll", args, "pixels", minimum=0)
        if page is not None and (direction is not None or pixels is not None):
            raise _invalid(
                "scroll",
                "Invalid arguments: provide either page or direction with pixels, not both",
                "Use scroll(page=N) or scroll(direction='down', pixels=...)",
            )
        if page is None and direction is None:
            raise _invalid("scroll", "Missing required arguments: page, or direction", "Provide page or direction")
        if direction is not None and direction not in ("up", "down"):
            raise _invalid("scroll", f"Invalid direction: {direction}", "Use direction='up' or 'down'")
        return cls(page=page, direction=direction, pixels=pixels)


WINDOW_ACTIONS = ("list", "open", "switch", "close")


@dataclass(frozen=True)
class WindowOptions:
    action: str = "list"
    index: int | None = None
    url: str | None = None

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> WindowOptions:
        action = _opt_str("window", args, "action") or "list"
        if action not in WINDOW_ACTIONS:
            raise _invalid("window", f"Unknown action: {action}", "Use list, open, switch or close")
        index = _opt_int("window", args, "index", minimum=1)
        if action in ("switch", "close") and index is None:
            raise _invalid("window", "Missing required argument: index", f"Provide index for action='{action}'")
        return cls(action=action, index=index, url=_opt_str("window", args, "url"))


@dataclass(frozen=True)
class ExecuteOptions:
    script: str

    @classmethod
    def from_args(cls, args: dict[str, Any]) -> ExecuteOptions:
        return cls(script=_req_str("execute", args, "script"))


__all__ = [
    "ClickOptions",
    "ExecuteOptions",
    "NavigateOptions",
    "ReadOptions",
    "RefreshOptions",
    "ScreenshotOptions",
    "ScrollOptions",
    "SearchOptions",
    "TypeOptions",
    "WINDOW_ACTIONS",
    "WindowOptions",
]
