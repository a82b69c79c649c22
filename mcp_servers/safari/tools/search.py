"""
Search through the user's default Safari search provider.

Safari stores the provider as a reverse-domain identifier
(`com.google`, `com.duckduckgo`) under `SearchProviderIdentifier`. The
identifier is reversed into a host and queried at `/search?q=`.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING
from urllib.parse import quote_plus

from ..config import SafariConfig
from ..osascript import AutomationError, run_command
from .base import SmartToolError
from .navigation import navigate_to

if TYPE_CHECKING:
    from ..session import SafariSession

logger = logging.getLogger("mcp.safari.search")

PROVIDER_KEY = "SearchProviderIdentifier"

_LABEL_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$")


class SearchProviderError(Exception):
    """The default search provider could not be determined."""


def read_search_provider(config: SafariConfig) -> str:
    try:
        return run_command(
            ["defaults", "read", config.preferences_domain, PROVIDER_KEY],
            timeout=config.osascript_timeout,
        )
    except AutomationError as exc:
        raise SearchProviderError(f"Cannot read {PROVIDER_KEY} from {config.preferences_domain}: {exc}") from exc


def provider_domain(identifier: str) -> str:
    """Turn `com.google` into `google.com`."""
    labels = (identifier or "").strip().split(".")
    if len(labels) < 2 or not all(_LABEL_RE.match(label) for label in labels):
        raise SearchProviderError(f"Unrecognized search provider identifier: {identifier!r}")
    return ".".join(reversed(labels)).lower()


def build_search_url(domain: str, text: str) -> str:
    return f"https://{domain}/search?q={quote_plus(text)}"


def resolve_search_url(config: SafariConfig, text: str) -> str:
    return build_search_url(provider_domain(read_search_provider(config)), text)


def search_web(session: SafariSession, text: str, selector: str | None = None) -> bool | None:
    """Search for `text` with the default provider and wait for the results page."""
    if not text or not text.strip():
        raise SmartToolError(
            tool="search",
            action="validate",
            reason="Missing search text",
            suggestion="Provide text='...'",
        )
    session.require_active()
    url = resolve_search_url(session.config, text)
    logger.info("search provider_url=%s", url.split("?", 1)[0])
    return navigate_to(session, url, selector)


__all__ = [
    "PROVIDER_KEY",
    "SearchProviderError",
    "build_search_url",
    "provider_domain",
    "read_search_provider",
    "resolve_search_url",
    "search_web",
]
