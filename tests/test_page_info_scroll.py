from __future__ import annotations

import json

import pytest

from mcp_servers.safari.tools.base import SmartToolError
from mcp_servers.safari.tools.input.scroll import (
    clamp_page,
    page_offset,
    scroll_by,
    scroll_to_page,
    signed_delta,
)
from mcp_servers.safari.tools.page.info import PageInfo, count_pages, get_page_info, parse_page_info, read_page_text


def _info_json(inner: int, height: int, offset: int = 0) -> str:
    return json.dumps({"innerHeight": inner, "scrollHeight": height, "scrollOffset": offset})


@pytest.mark.parametrize(
    ("scroll_height", "inner_height", "pages"),
    [(2500, 1000, 3), (1000, 1000, 1), (1001, 1000, 2), (0, 1000, 1), (500, 0, 1)],
)
def test_count_pages(scroll_height: int, inner_height: int, pages: int) -> None:
    assert count_pages(scroll_height, inner_height) == pages


def test_page_offset_clamps_to_document() -> None:
    info = PageInfo(inner_height=1000, scroll_height=2500)
    assert info.pages == 3
    assert page_offset(5, info) == 2000
    assert page_offset(0, info) == 0
    assert page_offset(2, info) == 1000
    assert clamp_page(-3, 3) == 1


def test_signed_delta() -> None:
    assert signed_delta("down", 200) == 200
    assert signed_delta("up", 200) == -200
    with pytest.raises(SmartToolError):
        signed_delta("left", 10)


def test_parse_page_info_recovers_from_bad_data() -> None:
    assert parse_page_info("not json") == PageInfo()
    assert parse_page_info("[1, 2]") == PageInfo()
    assert parse_page_info('{"innerHeight": "x", "scrollHeight": 10}') == PageInfo(0, 10, 0)


def test_page_info_to_dict_uses_wire_names() -> None:
    assert PageInfo(800, 2000, 400).to_dict() == {
        "innerHeight": 800,
        "scrollHeight": 2000,
        "scrollOffset": 400,
        "pages": 3,
    }


def test_scroll_to_page_uses_clamped_offset(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("innerHeight: window.innerHeight", _info_json(1000, 2500))
    info = scroll_to_page(active_session, 5)
    assert info.pages == 3
    scroll_calls = [s for s in fake.scripts if "window.scrollTo(0, top)" in s]
    assert len(scroll_calls) == 1
    assert scroll_calls[0].endswith(")(2000)")


def test_scroll_by_defaults_to_one_viewport_up(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("innerHeight: window.innerHeight", _info_json(900, 5000, 1800))
    scroll_by(active_session, "up")
    scroll_calls = [s for s in fake.scripts if "window.scrollBy(0, delta)" in s]
    assert scroll_calls[-1].endswith(")(-900)")


def test_scroll_by_explicit_pixels(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("innerHeight: window.innerHeight", _info_json(900, 5000))
    scroll_by(active_session, "down", 250)
    assert fake.scripts[-2].endswith(")(250)")


def test_get_page_info_reads_live_values(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("innerHeight: window.innerHeight", _info_json(700, 1400, 700))
    assert get_page_info(active_session) == PageInfo(700, 1400, 700)


def test_read_page_text_passes_selector_as_data(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("innerText", "Hello")
    assert read_page_text(active_session, "main's") == "Hello"
    assert fake.scripts[-1].endswith(')("main\'s")')
