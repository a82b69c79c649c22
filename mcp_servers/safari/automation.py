"""
AppleScript / JXA template library for Safari automation.

Each template declares its typed parameters. Rendering validates the values,
escapes string parameters for the AppleScript string literal they land in
(backslash first, then double quote) and substitutes all placeholders in a
single pass, so substituted text is never scanned for placeholders again.

Callers must hand over finished payloads: a JavaScript program passed to
`execute_script` is escaped here exactly once, after it has been fully built.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Z][A-Z0-9_]*)\}\}")


class ParamKind(Enum):
    INT = "int"
    STRING = "string"


class ScriptLanguage(Enum):
    APPLESCRIPT = "applescript"
    JXA = "jxa"


def escape_applescript_string(value: str) -> str:
    """Escape text for the inside of an AppleScript double-quoted literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


class RenderedScript(str):
    """Script text tagged with the interpreter that runs it."""

    language: ScriptLanguage

    def __new__(cls, text: str, language: ScriptLanguage = ScriptLanguage.APPLESCRIPT) -> RenderedScript:
        obj = super().__new__(cls, text)
        obj.language = language
        return obj


@dataclass(frozen=True)
class ScriptTemplate:
    name: str
    source: str
    params: Mapping[str, ParamKind] = field(default_factory=dict)
    language: ScriptLanguage = ScriptLanguage.APPLESCRIPT

    def __post_init__(self) -> None:
        found = set(_PLACEHOLDER_RE.findall(self.source))
        declared = set(self.params)
        if found != declared:
            raise ValueError(
                f"Template {self.name!r} placeholders {sorted(found)} do not match parameters {sorted(declared)}"
            )

    def _encode(self, key: str, value: Any) -> str:
        kind = self.params[key]
        if kind is ParamKind.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Template {self.name!r} parameter {key} expects int, got {type(value).__name__}")
            return str(value)
        if not isinstance(value, str):
            raise TypeError(f"Template {self.name!r} parameter {key} expects str, got {type(value).__name__}")
        return escape_applescript_string(value)

    def render(self, **values: Any) -> RenderedScript:
        missing = set(self.params) - set(values)
        extra = set(values) - set(self.params)
        if missing or extra:
            raise ValueError(
                f"Template {self.name!r} got bad parameters (missing={sorted(missing)}, unexpected={sorted(extra)})"
            )
        encoded = {key: self._encode(key, value) for key, value in values.items()}
        return RenderedScript(_PLACEHOLDER_RE.sub(lambda m: encoded[m.group(1)], self.source), self.language)


_JXA = ScriptLanguage.JXA

TEMPLATES: dict[str, ScriptTemplate] = {
    t.name: t
    for t in (
        ScriptTemplate("activate", 'tell application "Safari" to activate'),
        ScriptTemplate(
            "closeTab",
            'tell application "Safari" to close tab {{INDEX}} of window 1',
            {"INDEX": ParamKind.INT},
        ),
        ScriptTemplate("closeWindow", 'tell application "Safari" to close window 1'),
        ScriptTemplate("createDocument", 'tell application "Safari" to make new document'),
        ScriptTemplate(
            "createTab",
            'tell application "Safari" to tell window 1 to set current tab to (make new tab)',
        ),
        ScriptTemplate(
            "createTabWithUrl",
            'tell application "Safari" to tell window 1 to set current tab to '
            '(make new tab with properties {URL:"{{URL}}"})',
            {"URL": ParamKind.STRING},
        ),
        ScriptTemplate(
            "executeScript",
            'tell application "Safari" to do JavaScript "{{SCRIPT}}" in current tab of window 1',
            {"SCRIPT": ParamKind.STRING},
        ),
        ScriptTemplate("getTitle", 'tell application "Safari" to return name of current tab of window 1'),
        ScriptTemplate("getUrl", 'tell application "Safari" to return URL of current tab of window 1'),
        ScriptTemplate(
            "navigateTo",
            'tell application "Safari" to set URL of current tab of window 1 to "{{URL}}"',
            {"URL": ParamKind.STRING},
        ),
        ScriptTemplate(
            "setBounds",
            'tell application "Safari" to set bounds of window 1 to {{{X}}, {{Y}}, {{RIGHT}}, {{BOTTOM}}}',
            {"X": ParamKind.INT, "Y": ParamKind.INT, "RIGHT": ParamKind.INT, "BOTTOM": ParamKind.INT},
        ),
        ScriptTemplate(
            "switchTab",
            'tell application "Safari" to tell window 1 to set current tab to tab {{INDEX}}',
            {"INDEX": ParamKind.INT},
        ),
        ScriptTemplate(
            "listTabs",
            """
const app = Application("Safari");
const windows = app.windows();
if (windows.length === 0) throw new Error("No Safari window");
const win = windows[0];
const current = win.currentTab().index();
JSON.stringify(win.tabs().map((tab, i) => ({
  active: tab.index() === current,
  index: i + 1,
  title: tab.name() || "",
  url: tab.url() || ""
})));
""".strip(),
            language=_JXA,
        ),
        ScriptTemplate(
            "windowId",
            """
const app = Application("Safari");
const windows = app.windows();
if (windows.length === 0) throw new Error("No Safari window");
windows[0].id();
""".strip(),
            language=_JXA,
        ),
    )
}


class Automation:
    """Typed builders for every Safari automation command."""

    def __init__(self, templates: Mapping[str, ScriptTemplate] | None = None) -> None:
        self.templates = dict(templates or TEMPLATES)

    def _render(self, name: str, **values: Any) -> RenderedScript:
        return self.templates[name].render(**values)

    def activate(self) -> RenderedScript:
        return self._render("activate")

    def close_tab(self, index: int) -> RenderedScript:
        return self._render("closeTab", INDEX=index)

    def close_window(self) -> RenderedScript:
        return self._render("closeWindow")

    def create_document(self) -> RenderedScript:
        return self._render("createDocument")

    def create_tab(self, url: str | None = None) -> RenderedScript:
        if url:
            return self._render("createTabWithUrl", URL=url)
        return self._render("createTab")

    def execute_script(self, script: str) -> RenderedScript:
        """Wrap a finished JavaScript program in a `do JavaScript` command."""
        return self._render("executeScript", SCRIPT=script)

    def get_title(self) -> RenderedScript:
        return self._render("getTitle")

    def get_url(self) -> RenderedScript:
        return self._render("getUrl")

    def list_tabs(self) -> RenderedScript:
        """JXA returning a JSON array of {active, index, title, url}."""
        return self._render("listTabs")

    def navigate_to(self, url: str) -> RenderedScript:
        return self._render("navigateTo", URL=url)

    def set_bounds(self, x: int, y: int, width: int, height: int) -> RenderedScript:
        return self._render("setBounds", X=x, Y=y, RIGHT=x + width, BOTTOM=y + height)

    def switch_tab(self, index: int) -> RenderedScript:
        return self._render("switchTab", INDEX=index)

    def window_id(self) -> RenderedScript:
        """JXA returning the id of the front Safari window."""
        return self._render("windowId")


__all__ = [
    "Automation",
    "ParamKind",
    "RenderedScript",
    "ScriptLanguage",
    "ScriptTemplate",
    "TEMPLATES",
    "escape_applescript_string",
]
