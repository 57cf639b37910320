"""Unit tests for link cmd_uri and cmd_list."""

import pytest

from linkscheme.api.link.cmd_list import cmd_list
from linkscheme.api.link.cmd_uri import cmd_uri

pytestmark = pytest.mark.link


def test_cmd_uri(linkscheme_config, run_cmd):
    result = run_cmd(cmd_uri, "gh:a b")
    assert result.success is True
    assert result.result == "https://github.com/a%20b"
    assert result.output == {
        "errors": [],
        "warnings": [],
        "link": "gh:a b",
        "scheme": "gh",
        "path": "a b",
        "uri": "https://github.com/a%20b",
    }


def test_cmd_uri_no_match(linkscheme_config, run_cmd):
    result = run_cmd(cmd_uri, "nolink")
    assert result.success is False
    assert result.output["uri"] == ""


def test_cmd_list(linkscheme_config, run_cmd):
    result = run_cmd(cmd_list)
    assert result.success is True
    assert result.output["schemes"] == {
        "gh": "https://github.com",
        "jira": "https://jira.example.com/browse",
    }


def test_cmd_list_invalid_config(linkscheme_home, run_cmd):
    (linkscheme_home / "config.json").write_text("{invalid json")
    result = run_cmd(cmd_list)
    assert result.success is False
    assert "Invalid JSON" in result.output["errors"][0]
