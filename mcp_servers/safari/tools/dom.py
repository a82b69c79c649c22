"""
Window screenshots.

`screencapture -l <windowId>` grabs the front Safari window (without its
shadow) into a temporary PNG that is always removed afterwards.
"""

from __future__ import annotations

import base64
import io
import logging
import os
import tempfile
from typing import TYPE_CHECKING, Any

from ..osascript import AutomationError, run_command
from .base import SmartToolError
from .input.scroll import settle_at_page
from .page.info import get_page_info

if TYPE_CHECKING:
    from ..session import SafariSession

logger = logging.getLogger("mcp.safari.screenshot")

SCREENCAPTURE = "screencapture"


def window_id(session: SafariSession) -> int:
    raw = session.run(session.automation.window_id())
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise AutomationError(f"Unexpected Safari window id: {raw!r}", command="osascript") from exc


def describe_png(data: bytes) -> tuple[int, int]:
    """Validate PNG bytes and return (width, height)."""
    from PIL import Image  # type: ignore[import-not-found]

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
            fmt = img.format
            width, height = img.size
    except Exception as exc:  # noqa: BLE001
        raise AutomationError(f"Screenshot is not a readable image: {exc}", command=SCREENCAPTURE) from exc
    if fmt != "PNG":
        raise AutomationError(f"Screenshot has unexpected format: {fmt}", command=SCREENCAPTURE)
    return width, height


def capture_window(session: SafariSession) -> bytes:
    """Capture the front Safari window as PNG bytes."""
    wid = window_id(session)
    fd, path = tempfile.mkstemp(prefix="safari-mcp-", suffix=".png")
    os.close(fd)
    try:
        run_command(
            [SCREENCAPTURE, "-l", str(wid), "-o", "-x", path],
            timeout=session.config.osascript_timeout,
        )
        with open(path, "rb") as fp:
            data = fp.read()
    finally:
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass
    if not data:
        raise AutomationError("screencapture produced an empty file", command=SCREENCAPTURE)
    return data


def screenshot(session: SafariSession, page: int | None = None) -> dict[str, Any]:
    """Screenshot the visible viewport, optionally after scrolling to `page`.

    Without `page` nothing is scrolled: the capture shows the current position.

    Returns:
        Dict with base64 PNG `image`, pixel `width`/`height` and page info
    """
    session.require_active()
    if page is not None:
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise SmartToolError(
                tool="screenshot",
                action="validate",
                reason=f"Invalid page: {page!r}",
                suggestion="Use a 1-based page number",
            )
        settle_at_page(session, page)

    data = capture_window(session)
    width, height = describe_png(data)
    info = get_page_info(session)
    logger.debug("screenshot bytes=%d size=%dx%d", len(data), width, height)
    return {
        "image": base64.b64encode(data).decode("ascii"),
        "width": width,
        "height": height,
        "innerHeight": info.inner_height,
        "scrollHeight": info.scroll_height,
        "pages": info.pages,
    }


__all__ = ["SCREENCAPTURE", "capture_window", "describe_png", "screenshot", "window_id"]
