from __future__ import annotations

import pytest

from mcp_servers.safari.tools.base import SmartToolError
from mcp_servers.safari.tools.tabs import Tab, close_tab, list_tabs, open_tab, parse_tabs, switch_tab


def _three_tabs(fake) -> None:  # noqa: ANN001
    fake.tabs = [
        {"active": False, "index": 1, "title": "A", "url": "https://a.example"},
        {"active": True, "index": 2, "title": "B", "url": "https://b.example"},
        {"active": False, "index": 3, "title": "", "url": ""},
    ]


def test_parse_tabs() -> None:
    tabs = parse_tabs('[{"active": true, "index": 1, "title": "T", "url": "https://t.example"}]')
    assert tabs == [Tab(index=1, title="T", url="https://t.example", active=True)]
    assert tabs[0].to_dict() == {"index": 1, "title": "T", "url": "https://t.example", "active": True}


def test_parse_tabs_recovers_from_bad_output() -> None:
    assert parse_tabs("") == []
    assert parse_tabs("oops") == []
    assert parse_tabs('{"index": 1}') == []
    assert parse_tabs('[1, {"title": null}]') == [Tab(index=2, title="", url="", active=False)]


def test_list_tabs_queries_fresh_each_time(active_session, fake) -> None:  # noqa: ANN001
    _three_tabs(fake)
    assert [t.title for t in list_tabs(active_session)] == ["A", "B", ""]
    fake.tabs = fake.tabs[:1]
    assert len(list_tabs(active_session)) == 1
    assert len(fake.jxa_calls) == 2


def test_switch_tab(active_session, fake) -> None:  # noqa: ANN001
    _three_tabs(fake)
    switch_tab(active_session, 3)
    assert fake.applescript_calls == ['tell application "Safari" to tell window 1 to set current tab to tab 3']


@pytest.mark.parametrize("index", [0, -1, 4, "2", True])
def test_invalid_index_fails_before_automation(active_session, fake, index) -> None:  # noqa: ANN001
    _three_tabs(fake)
    with pytest.raises(SmartToolError):
        close_tab(active_session, index)
    assert fake.applescript_calls == []


def test_open_tab_with_url(active_session, fake) -> None:  # noqa: ANN001
    open_tab(active_session, "https://c.example")
    assert 'make new tab with properties {URL:"https://c.example"}' in fake.applescript_calls[-1]


def test_tabs_require_session(session) -> None:  # noqa: ANN001
    from mcp_servers.safari.tools.base import SessionStateError

    with pytest.raises(SessionStateError):
        list_tabs(session)
