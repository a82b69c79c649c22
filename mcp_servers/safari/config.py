from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return max(minimum, value)


def _env_float(name: str, default: float, *, minimum: float = 0.0) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    return max(minimum, value)


@dataclass
class SafariConfig:
    page_load_timeout: float = 10.0
    window_bounds: int = 0
    window_width: int = 1280
    window_height: int = 1024
    preferences_domain: str = "com.apple.Safari"
    osascript_timeout: float = 30.0
    poll_interval: float = 0.1
    click_settle: float = 0.5
    scroll_settle: float = 0.3
    early_capture_window: float = 2.0

    @classmethod
    def from_env(cls) -> SafariConfig:
        # SAFARI_PAGE_LOAD_TIMEOUT is expressed in milliseconds.
        timeout_ms = _env_int("SAFARI_PAGE_LOAD_TIMEOUT", 10_000)
        domain = (os.environ.get("SAFARI_PREFERENCES_DOMAIN") or "").strip() or "com.apple.Safari"
        return cls(
            page_load_timeout=timeout_ms / 1000.0,
            window_bounds=_env_int("SAFARI_WINDOW_BOUNDS", 0),
            window_width=_env_int("SAFARI_WINDOW_WIDTH", 1280, minimum=1),
            window_height=_env_int("SAFARI_WINDOW_HEIGHT", 1024, minimum=1),
            preferences_domain=domain,
            osascript_timeout=_env_float("SAFARI_OSASCRIPT_TIMEOUT", 30.0, minimum=1.0),
        )

    def window_rect(self) -> tuple[int, int, int, int]:
        """Return AppleScript window bounds as (left, top, right, bottom)."""
        x = y = self.window_bounds
        return x, y, x + self.window_width, y + self.window_height
