"""Unit tests for link cmd_open."""

import pytest

from linkscheme.api.link.cmd_open import cmd_open

pytestmark = pytest.mark.link


class TestCmdOpen:
    def test_open_uses_scheme_window_setting(self, linkscheme_config, run_cmd, opened):
        result = run_cmd(cmd_open, "jira:PROJ-1")
        assert result.success is True
        assert result.output["uri"] == "https://jira.example.com/browse/PROJ-1"
        assert result.output["opened"] is True
        assert opened == [("https://jira.example.com/browse/PROJ-1", True)]

    def test_open_new_window_override(self, linkscheme_config, run_cmd, opened):
        run_cmd(cmd_open, "gh:owner/repo", new_window=True)
        assert opened == [("https://github.com/owner/repo", True)]

    def test_open_default_same_window(self, linkscheme_config, run_cmd, opened):
        run_cmd(cmd_open, "gh:owner/repo")
        assert opened == [("https://github.com/owner/repo", False)]

    def test_open_no_matching_scheme(self, linkscheme_config, run_cmd, opened):
        result = run_cmd(cmd_open, "web:example")
        assert result.success is False
        assert result.output["opened"] is False
        assert opened == []

    def test_open_browser_failure(self, linkscheme_config, run_cmd, monkeypatch):
        monkeypatch.setattr("linkscheme.api.link.cmd_open.open_in_browser", lambda uri, extra_arg=None: False)
        result = run_cmd(cmd_open, "gh:x")
        assert result.success is False
        assert result.output["errors"] == ["No browser could be launched for https://github.com/x"]
