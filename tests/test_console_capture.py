from __future__ import annotations

from mcp_servers.safari.tools.page.diagnostics import (
    CAPTURE_INSTALL_JS,
    ConsoleMessages,
    get_console_messages,
    install_console_capture,
    parse_console_messages,
)


def test_installer_is_idempotent_by_marker() -> None:
    guard = CAPTURE_INSTALL_JS.index("if (window.__safariErrors)")
    init = CAPTURE_INSTALL_JS.index("window.__safariErrors = []")
    assert guard < init
    assert "origError.apply(console, arguments)" in CAPTURE_INSTALL_JS
    assert "origWarn.apply(console, arguments)" in CAPTURE_INSTALL_JS
    assert "'unhandledrejection'" in CAPTURE_INSTALL_JS
    assert "Unhandled rejection: " in CAPTURE_INSTALL_JS
    assert "window.onerror" in CAPTURE_INSTALL_JS


def test_install_reports_first_installation(active_session, fake) -> None:  # noqa: ANN001
    answers = iter(["true", "false"])
    fake.on_js("if (window.__safariErrors)", lambda _js: next(answers))
    assert install_console_capture(active_session) is True
    assert install_console_capture(active_session) is False


def test_parse_console_messages() -> None:
    parsed = parse_console_messages('{"errors": ["boom (app.js:1:2)"], "warnings": ["careful"]}')
    assert parsed == ConsoleMessages(errors=["boom (app.js:1:2)"], warnings=["careful"])


def test_parse_console_messages_recovers() -> None:
    assert parse_console_messages("") == ConsoleMessages()
    assert parse_console_messages("{broken") == ConsoleMessages()
    assert parse_console_messages('"text"') == ConsoleMessages()
    assert parse_console_messages('{"errors": "x", "warnings": [1]}') == ConsoleMessages(errors=[], warnings=["1"])


def test_get_console_messages_reads_page_arrays(active_session, fake) -> None:  # noqa: ANN001
    fake.on_js("window.__safariErrors || []", '{"errors": ["e1"], "warnings": []}')
    assert get_console_messages(active_session).to_dict() == {"errors": ["e1"], "warnings": []}
