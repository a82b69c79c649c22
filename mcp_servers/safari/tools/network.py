"""
Arbitrary JavaScript evaluation in the current tab.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import SmartToolError

if TYPE_CHECKING:
    from ..session import SafariSession


def execute_script(session: SafariSession, script: str) -> str:
    """Run `script` in the page and return its result as text.

    A script with a top-level `return` is wrapped in a function once; an
    already self-invoking script is sent unchanged.
    """
    if not isinstance(script, str) or not script.strip():
        raise SmartToolError(
            tool="execute",
            action="validate",
            reason="Missing script",
            suggestion="Provide script='return document.title'",
        )
    return session.eval_js(script)


__all__ = ["execute_script"]
