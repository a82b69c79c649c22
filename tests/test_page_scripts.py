"""In-page scripts executed against a real DOM (headless Chromium)."""

from __future__ import annotations

import pytest

sync_api = pytest.importorskip("playwright.sync_api")

from mcp_servers.safari.tools.input.dom import TYPE_TEXT_JS  # noqa: E402
from mcp_servers.safari.tools.js_helpers import serialize  # noqa: E402
from mcp_servers.safari.tools.page.diagnostics import (  # noqa: E402
    CAPTURE_INSTALL_JS,
    CAPTURE_READ_JS,
    parse_console_messages,
)
from mcp_servers.safari.tools.smart.click import build_click_script  # noqa: E402

RECORD_CLICKS = "<script>document.addEventListener('click', function (e) { window.clickedId = e.target.id; });</script>"


@pytest.fixture(scope="module")
def browser():  # noqa: ANN201
    with sync_api.sync_playwright() as pw:
        try:
            chromium = pw.chromium.launch()
        except sync_api.Error as exc:
            pytest.skip(f"Chromium is not available: {exc}")
        yield chromium
        chromium.close()


@pytest.fixture
def page(browser):  # noqa: ANN001, ANN201
    tab = browser.new_page()
    yield tab
    tab.close()


def test_button_beats_body_containing_same_text(page) -> None:  # noqa: ANN001
    page.set_content(
        "<p>Welcome back. Please <button id='go'>Sign In</button> to continue.</p>" + RECORD_CLICKS
    )
    assert page.evaluate(build_click_script(text="Sign In")) == 'Clicked: button "sign in"'
    assert page.evaluate("window.clickedId") == "go"


def test_shortest_element_wins_in_full_document_scan(page) -> None:  # noqa: ANN001
    page.set_content("<div id='outer'>Hello <span id='inner'>Sign In</span> now</div>" + RECORD_CLICKS)
    assert page.evaluate(build_click_script(text="sign in")) == 'Clicked: span "sign in"'
    assert page.evaluate("window.clickedId") == "inner"


def test_invisible_shorter_matches_are_skipped(page) -> None:  # noqa: ANN001
    page.set_content(
        "<button id='hidden' style='display:none'>Save</button>"
        "<button id='ghost' style='opacity:0'>Save</button>"
        "<button id='offstage' style='visibility:hidden'>Save</button>"
        "<button id='real'>Save draft</button>" + RECORD_CLICKS
    )
    assert page.evaluate(build_click_script(text="save")) == 'Clicked: button "save draft"'
    assert page.evaluate("window.clickedId") == "real"


def test_equal_length_tie_keeps_first_in_document_order(page) -> None:  # noqa: ANN001
    page.set_content("<button id='first'>Next</button><button id='second'>Next</button>" + RECORD_CLICKS)
    page.evaluate(build_click_script(text="next"))
    assert page.evaluate("window.clickedId") == "first"


def test_text_miss_is_a_result_string(page) -> None:  # noqa: ANN001
    page.set_content("<button>Cancel</button>")
    assert page.evaluate(build_click_script(text="delete")) == "No element found with text: delete"


def test_capture_installed_twice_records_once(page) -> None:  # noqa: ANN001
    page.set_content("<p>console</p>")
    assert page.evaluate(serialize(CAPTURE_INSTALL_JS)) is True
    assert page.evaluate(serialize(CAPTURE_INSTALL_JS)) is False
    page.evaluate("console.error('boom', {code: 7}); console.warn('careful')")
    messages = parse_console_messages(page.evaluate(serialize(CAPTURE_READ_JS)))
    assert messages.errors == ['boom {"code":7}']
    assert messages.warnings == ["careful"]


CONTROLLED_INPUT = """
<form><input id="q" name="query"></form>
<script>
  var input = document.getElementById('q');
  var native = Object.getOwnPropertyDescriptor(HTMLInputElement.prototype, 'value');
  window.tracked = [];
  window.events = [];
  Object.defineProperty(input, 'value', {
    configurable: true,
    get: function () { return native.get.call(this); },
    set: function (v) { window.tracked.push(v); native.set.call(this, v); }
  });
  input.addEventListener('input', function () { window.events.push('input:' + native.get.call(input)); });
  input.addEventListener('change', function () { window.events.push('change'); });
</script>
"""


def test_typing_uses_native_setter_and_fires_events(page) -> None:  # noqa: ANN001
    page.set_content(CONTROLLED_INPUT)
    result = page.evaluate(serialize(TYPE_TEXT_JS, "hello", "#q", False, False))
    assert result == "Typed in: input[name=query]#q"
    assert page.evaluate("window.tracked") == []
    assert page.evaluate("window.events") == ["input:hello", "change"]

    page.evaluate(serialize(TYPE_TEXT_JS, " ", "#q", True, False))
    assert page.evaluate("document.getElementById('q').value") == "hello "


def test_typing_falls_back_to_first_visible_input(page) -> None:  # noqa: ANN001
    page.set_content(
        "<input type='hidden' id='token'><input id='invisible' style='display:none'>"
        "<input type='checkbox' id='remember'><textarea id='notes'></textarea>"
    )
    assert page.evaluate(serialize(TYPE_TEXT_JS, "memo", "", False, False)) == "Typed in: textarea#notes"
    assert page.evaluate("document.getElementById('notes').value") == "memo"
