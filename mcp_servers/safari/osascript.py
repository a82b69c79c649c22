"""
Out-of-process automation channel.

Every command reaches Safari (or the OS) through a short-lived subprocess:
`osascript` for AppleScript and JXA, `defaults` for preferences and
`screencapture` for window images. A non-zero exit is a hard failure.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

logger = logging.getLogger("mcp.safari.osascript")

OSASCRIPT = "osascript"


class AutomationError(Exception):
    """A subprocess of the automation channel failed."""

    def __init__(self, message: str, *, command: str = "", returncode: int | None = None) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode


def run_command(argv: Sequence[str], *, timeout: float = 30.0) -> str:
    """Run a command and return its stripped stdout.

    Raises AutomationError on a missing binary, a timeout, or a non-zero exit,
    preserving stderr (or the OS message) in the error text.
    """
    argv = list(argv)
    name = argv[0] if argv else ""
    logger.debug("exec %s (%d args)", name, len(argv) - 1)
    try:
        proc = subprocess.run(argv, capture_output=True, text=True, timeout=timeout, check=False)
    except FileNotFoundError as exc:
        raise AutomationError(f"{name} not found: {exc}", command=name) from exc
    except subprocess.TimeoutExpired as exc:
        raise AutomationError(f"{name} timed out after {timeout:g}s", command=name) from exc
    except OSError as exc:
        raise AutomationError(f"{name} failed: {exc}", command=name) from exc

    if proc.returncode != 0:
        detail = (proc.stderr or "").strip() or (proc.stdout or "").strip() or f"exit status {proc.returncode}"
        logger.info("exec_failed command=%s code=%s", name, proc.returncode)
        raise AutomationError(detail, command=name, returncode=proc.returncode)
    return (proc.stdout or "").strip()


def run_applescript(script: str, *, timeout: float = 30.0) -> str:
    """Execute AppleScript source and return its output."""
    return run_command([OSASCRIPT, "-e", script], timeout=timeout)


def run_jxa(script: str, *, timeout: float = 30.0) -> str:
    """Execute JavaScript for Automation source and return its output."""
    return run_command([OSASCRIPT, "-l", "JavaScript", "-e", script], timeout=timeout)


__all__ = ["AutomationError", "OSASCRIPT", "run_applescript", "run_command", "run_jxa"]
