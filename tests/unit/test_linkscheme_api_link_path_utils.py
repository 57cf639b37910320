"""Unit tests for the type prefix and path helpers."""

import pytest

from linkscheme.api.link.call_when_type_matches import call_when_type_matches
from linkscheme.api.link.call_with_path import call_with_path
from linkscheme.api.link.extract_path import extract_path
from linkscheme.api.link.has_type_prefix import has_type_prefix

pytestmark = pytest.mark.link


class TestHasTypePrefix:
    def test_matching_prefix(self):
        assert has_type_prefix("gh:foo/bar", "gh") is True

    def test_prefix_must_be_followed_by_colon(self):
        assert has_type_prefix("ghx:foo", "gh") is False

    def test_no_colon(self):
        assert has_type_prefix("gh", "gh") is False

    def test_empty_link(self):
        assert has_type_prefix("", "gh") is False


class TestExtractPath:
    def test_strips_type_prefix(self):
        assert extract_path("gh:foo/bar") == "foo/bar"

    def test_no_colon_unchanged(self):
        assert extract_path("foo/bar") == "foo/bar"

    def test_only_first_colon(self):
        assert extract_path("web:https://example.com") == "https://example.com"

    def test_empty(self):
        assert extract_path("") == ""

    def test_leading_colon(self):
        assert extract_path(":x") == "x"


class TestCallWithPath:
    def test_strips_one_trailing_slash(self):
        assert call_with_path(lambda p: p, "gh:foo/bar/") == "foo/bar"

    def test_strips_only_one_slash(self):
        assert call_with_path(lambda p: p, "gh:foo//") == "foo/"

    def test_without_trailing_slash(self):
        assert call_with_path(str.upper, "gh:foo") == "FOO"

    def test_slash_stripped_before_extraction(self):
        assert call_with_path(lambda p: p, "gh:/") == ""


class TestCallWhenTypeMatches:
    def test_match_calls_fn(self):
        assert call_when_type_matches(lambda p: f"<{p}>", "gh", "gh:foo/bar/") == "<foo/bar>"

    def test_mismatch_returns_none_without_calling(self):
        calls = []
        result = call_when_type_matches(calls.append, "gh", "jira:TICKET-1")
        assert result is None
        assert calls == []

    def test_similar_prefix_does_not_match(self):
        calls = []
        assert call_when_type_matches(calls.append, "gh", "ghx:foo") is None
        assert calls == []
