from __future__ import annotations

import pytest

from mcp_servers.safari.tools.base import SmartToolError
from mcp_servers.safari.tools.smart.click import (
    ARIA_SELECTORS,
    CLICK_COORDINATES_JS,
    CLICK_SELECTOR_JS,
    CLICK_TEXT_JS,
    PRIORITY_SELECTORS,
    ClickResult,
    build_click_script,
    click_element,
)


def test_coordinates_win_over_text() -> None:
    script = build_click_script(text="Sign In", x=10, y=20)
    assert script.startswith("(" + CLICK_COORDINATES_JS.strip())
    assert script.endswith(")(10, 20)")


def test_single_coordinate_falls_through_to_text() -> None:
    script = build_click_script(text="Sign In", x=10)
    assert CLICK_TEXT_JS.strip() in script


def test_selector_only_mode() -> None:
    script = build_click_script(selector="#go")
    assert script.startswith("(" + CLICK_SELECTOR_JS.strip())
    assert script.endswith(')("#go")')


def test_text_is_normalized_and_passed_with_tiers() -> None:
    script = build_click_script(text="  Sign In ", selector="form")
    assert '"sign in", "form"' in script
    assert '"' + ARIA_SELECTORS.replace('"', '\\"') + '"' in script
    assert all(sel.replace('"', '\\"') in script for sel in PRIORITY_SELECTORS)


def test_text_tiers_are_ordered() -> None:
    aria = CLICK_TEXT_JS.index("ariaLabel(labelled[a])")
    priority = CLICK_TEXT_JS.index("prioritySelectors[i]")
    universal = CLICK_TEXT_JS.index("querySelectorAll('*')")
    assert aria < priority < universal
    # Strict comparison keeps the first of equally short matches.
    assert "text.length < bestLen" in CLICK_TEXT_JS
    assert "isVisible(el)" in CLICK_TEXT_JS


def test_universal_tier_only_runs_unscoped() -> None:
    assert "if (!best && !scoped)" in CLICK_TEXT_JS


def test_no_criteria_is_a_validation_error() -> None:
    with pytest.raises(SmartToolError) as exc:
        build_click_script(text="   ")
    assert exc.value.action == "validate"


def test_click_result_dict() -> None:
    assert ClickResult("Clicked: a").to_dict() == {"result": "Clicked: a"}
    assert ClickResult("Clicked: a", True).to_dict() == {"result": "Clicked: a", "selectorFound": True}


def test_click_element_settles_and_waits(active_session, fake, clock) -> None:  # noqa: ANN001
    fake.on_js("function (searchText", 'Clicked: button "sign in"')
    fake.on_js("querySelector(selector)", "true")
    result = click_element(active_session, text="Sign In", wait=".dashboard")
    assert result.description == 'Clicked: button "sign in"'
    assert result.selector_found is True
    assert active_session.config.click_settle in clock.sleeps


def test_click_miss_is_a_result_not_an_error(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("function (searchText", "No element found with text: nope")
    result = click_element(active_session, text="nope")
    assert result.description.startswith("No element found")
    assert result.selector_found is None


def test_click_requires_session(session) -> None:  # noqa: ANN001
    from mcp_servers.safari.tools.base import SessionStateError

    with pytest.raises(SessionStateError):
        click_element(session, text="x")
