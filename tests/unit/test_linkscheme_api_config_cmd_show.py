"""Unit tests for config cmd_show and cmd_version."""

import pytest

from linkscheme.api.config.cmd_show import cmd_show
from linkscheme.api.config.cmd_version import cmd_version

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_cmd_show_lists_sections(self, linkscheme_config, run_cmd):
        result = run_cmd(cmd_show, "")
        assert result.success is True
        assert result.output["content"] == {"sections": ["schemes", "export", "log"]}
        assert result.output["config_path"] == str(linkscheme_config.resolve())

    def test_cmd_show_with_valid_section(self, linkscheme_config, run_cmd):
        result = run_cmd(cmd_show, "schemes")
        assert result.success is True
        assert result.output["section"] == "schemes"
        assert result.output["content"]["gh"]["base_location"] == "https://github.com"

    def test_cmd_show_with_invalid_section(self, linkscheme_config, run_cmd):
        result = run_cmd(cmd_show, "invalid_section")
        assert result.success is False
        assert result.output["errors"] == ["Unknown section: invalid_section"]

    def test_cmd_show_invalid_config_file(self, linkscheme_home, run_cmd):
        (linkscheme_home / "config.json").write_text("{invalid json")
        result = run_cmd(cmd_show, "schemes")
        assert result.success is False
        assert result.output["section"] == "schemes"
        assert result.output["errors"]


def test_cmd_version(run_cmd, monkeypatch):
    monkeypatch.setattr("linkscheme.api.config.cmd_version.get_package_version", lambda: "1.2.3")
    result = run_cmd(cmd_version)
    assert result.success is True
    assert result.output == {"errors": [], "warnings": [], "version": "1.2.3"}
    assert result.result == "linkscheme version: 1.2.3"
