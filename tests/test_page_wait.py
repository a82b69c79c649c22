from __future__ import annotations

from mcp_servers.safari.tools.page.wait import (
    poll_until,
    wait_for_fresh_document,
    wait_for_page_load,
    wait_for_selector,
)


def test_poll_until_samples_at_least_once(clock) -> None:  # noqa: ANN001
    calls = []
    outcome = poll_until(lambda: calls.append(1) or "x", lambda v: v == "x", timeout=0, interval=0.1)
    assert outcome.ok is True
    assert calls == [1]
    assert clock.sleeps == []


def test_poll_until_times_out_with_last_value(clock) -> None:  # noqa: ANN001
    values = iter(range(100))
    outcome = poll_until(lambda: next(values), lambda v: False, timeout=0.5, interval=0.1)
    assert outcome.ok is False
    assert outcome.value >= 4
    assert 0.5 <= outcome.elapsed <= 0.6
    assert all(s <= 0.1 for s in clock.sleeps)


def test_page_load_waits_for_complete(active_session, fake) -> None:  # noqa: ANN001
    states = iter(["loading", "interactive", "complete"])
    fake.on_js("document.readyState", lambda _js: next(states))
    assert wait_for_page_load(active_session) is True


def test_page_load_timeout_returns_false(active_session, fake, clock) -> None:  # noqa: ANN001
    fake.on_js("document.readyState", "loading")
    start = clock.now
    assert wait_for_page_load(active_session) is False
    assert clock.now - start <= active_session.config.page_load_timeout + 0.11


def test_selector_wait_false_when_never_present(active_session, fake, clock) -> None:  # noqa: ANN001
    fake.on_js("querySelector(selector)", "false")
    start = clock.now
    assert wait_for_selector(active_session, ".never", timeout=0.3) is False
    assert 0.3 <= clock.now - start <= 0.41


def test_selector_wait_true_once_present(active_session, fake) -> None:  # noqa: ANN001
    answers = iter(["false", "false", "true"])
    fake.on_js("querySelector(selector)", lambda _js: next(answers))
    assert wait_for_selector(active_session, "#ready") is True
    assert '"#ready"' in fake.scripts[-1]


def test_fresh_document_ignores_marked_page(active_session, fake) -> None:  # noqa: ANN001
    answers = iter(["", "", "loading"])
    fake.on_js("__safariNavPending === token ? ''", lambda _js: next(answers))
    assert wait_for_fresh_document(active_session, "t1", 1.0) is True


def test_fresh_document_times_out(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("__safariNavPending === token ? ''", "")
    assert wait_for_fresh_document(active_session, "t1", 0.2) is False
