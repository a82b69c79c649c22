from __future__ import annotations

import pytest

from mcp_servers.safari.config import SafariConfig
from mcp_servers.safari.osascript import AutomationError
from mcp_servers.safari.tools import search as search_mod
from mcp_servers.safari.tools.search import (
    SearchProviderError,
    build_search_url,
    provider_domain,
    read_search_provider,
    resolve_search_url,
)


def test_provider_domain_reverses_identifier() -> None:
    assert provider_domain("com.google") == "google.com"
    assert provider_domain("com.duckduckgo") == "duckduckgo.com"
    assert provider_domain(" com.Bing\n") == "bing.com"


@pytest.mark.parametrize("identifier", ["", "google", "com..google", "com.goo gle", "com.-bad"])
def test_provider_domain_rejects_garbage(identifier: str) -> None:
    with pytest.raises(SearchProviderError):
        provider_domain(identifier)


def test_build_search_url_encodes_query() -> None:
    assert build_search_url("google.com", "a b&c") == "https://google.com/search?q=a+b%26c"


def test_read_search_provider_uses_defaults(monkeypatch) -> None:  # noqa: ANN001
    calls = []

    def fake_run(argv, *, timeout):  # noqa: ANN001, ANN202
        calls.append(list(argv))
        return "com.duckduckgo"

    monkeypatch.setattr(search_mod, "run_command", fake_run)
    cfg = SafariConfig(preferences_domain="com.apple.SafariTest")
    assert resolve_search_url(cfg, "python") == "https://duckduckgo.com/search?q=python"
    assert calls == [["defaults", "read", "com.apple.SafariTest", "SearchProviderIdentifier"]]


def test_lookup_failure_raises_without_fallback(monkeypatch) -> None:  # noqa: ANN001
    def fake_run(argv, *, timeout):  # noqa: ANN001, ANN202
        raise AutomationError("The domain/default pair does not exist", command="defaults", returncode=1)

    monkeypatch.setattr(search_mod, "run_command", fake_run)
    with pytest.raises(SearchProviderError) as exc:
        read_search_provider(SafariConfig())
    assert "does not exist" in str(exc.value)


def test_search_navigates_to_provider(monkeypatch, active_session, fake) -> None:  # noqa: ANN001
    monkeypatch.setattr(search_mod, "run_command", lambda argv, *, timeout: "com.google")
    fake.on_js("document.readyState", "complete")
    fake.on_js("__safariNavPending === token ? ''", "complete")
    search_mod.search_web(active_session, "safari mcp")
    assert fake.applescript_calls[-1].endswith('to "https://google.com/search?q=safari+mcp"')


def test_search_requires_text(active_session) -> None:  # noqa: ANN001
    from mcp_servers.safari.tools.base import SmartToolError

    with pytest.raises(SmartToolError):
        search_mod.search_web(active_session, "  ")
