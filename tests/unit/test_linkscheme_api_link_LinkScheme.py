"""Unit tests for LinkScheme, make_export_fn and make_open_fn."""

from dataclasses import FrozenInstanceError
from typing import get_args

import pytest

from linkscheme.api.link.LinkScheme import LinkScheme
from linkscheme.api.link.make_export_fn import ExportFn, make_export_fn
from linkscheme.api.link.make_open_fn import OpenFn, make_open_fn
from linkscheme.api.link.open_in_browser import open_in_browser
from linkscheme.utils import logger as logger_module

pytestmark = pytest.mark.link


class RecordingNavigator:
    def __init__(self, result="navigated"):
        self.calls = []
        self.result = result

    def __call__(self, uri, extra_arg=None):
        self.calls.append((uri, extra_arg))
        return self.result


def test_make_export_fn_markdown():
    export = make_export_fn("https://example.com")
    assert export("a b", None, "markdown", {}) == "[https://example.com/a%20b](https://example.com/a%20b)"


def test_make_export_fn_ascii_links_to_notes():
    export = make_export_fn("https://example.com")
    assert export("a b", "Example", "ascii", {"linksToNotes": True}) == "[Example]"


def test_make_export_fn_instances_are_independent():
    gh = make_export_fn("https://github.com")
    gl = make_export_fn("https://gitlab.com")
    assert gh("x", None, "odt") == "https://github.com/x"
    assert gl("x", None, "odt") == "https://gitlab.com/x"


def test_make_open_fn_passes_uri_and_extra_arg():
    navigator = RecordingNavigator()
    open_link = make_open_fn("https://example.com", navigator)
    assert open_link("a b", "new-window") == "navigated"
    assert navigator.calls == [("https://example.com/a%20b", "new-window")]


def test_make_open_fn_extra_arg_defaults_to_none():
    navigator = RecordingNavigator()
    make_open_fn("https://example.com", navigator)("x")
    assert navigator.calls == [("https://example.com/x", None)]


def test_make_open_fn_default_navigator(monkeypatch):
    calls = []
    monkeypatch.setattr("webbrowser.open", lambda uri, new=0: calls.append((uri, new)) or True)
    assert make_open_fn("https://example.com")("x", True) is True
    assert calls == [("https://example.com/x", 1)]


@pytest.mark.parametrize("extra_arg", [None, False, 0, ""])
def test_default_navigator_same_window(monkeypatch, extra_arg):
    calls = []
    monkeypatch.setattr("webbrowser.open", lambda uri, new=0: calls.append((uri, new)) or True)
    assert open_in_browser("https://example.com/x", extra_arg) is True
    assert calls == [("https://example.com/x", 0)]


def test_default_navigator_leaves_logging_setup_alone(tmp_path, monkeypatch):
    home = tmp_path / "unused-home"
    monkeypatch.setenv("LINKSCHEME_HOME", str(home))
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    monkeypatch.setattr("webbrowser.open", lambda uri, new=0: True)
    open_in_browser("https://example.com/x")
    assert logger_module._CONFIGURED is False
    assert not home.exists()


def test_link_scheme_uri():
    assert LinkScheme("https://example.com").uri("a b") == "https://example.com/a%20b"


def test_link_scheme_export_default_backend_is_bare_uri():
    assert LinkScheme("https://example.com").export("x") == "https://example.com/x"


def test_link_scheme_export_latex():
    scheme = LinkScheme("https://example.com")
    assert scheme.export("x", "X", "latex") == "\\href{https://example.com/x}{X}"


def test_link_scheme_open_returns_navigator_result():
    navigator = RecordingNavigator(result=42)
    scheme = LinkScheme("https://example.com", navigator=navigator)
    assert scheme.open("x", extra_arg=True) == 42
    assert navigator.calls == [("https://example.com/x", True)]


def test_link_scheme_is_frozen():
    scheme = LinkScheme("https://example.com")
    with pytest.raises(FrozenInstanceError):
        scheme.base_location = "https://other.com"  # type: ignore[misc]


def test_function_types_spell_out_parameters():
    export_params, export_return = get_args(ExportFn)
    assert len(export_params) == 4
    assert export_params[0] is str
    assert export_return is str
    open_params, _ = get_args(OpenFn)
    assert len(open_params) == 2
    assert open_params[0] is str
