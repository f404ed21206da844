"""Tests for query string encoding."""

from stargate.helpers import to_query_string
from stargate.helpers import urlsafe


class TestUrlsafe:
    def test_spaces_escaped(self):
        assert urlsafe("a b") == "a%20b"
        assert urlsafe("  ") == "%20%20"

    def test_only_spaces_escaped(self):
        """Other reserved characters pass through untouched."""
        assert urlsafe("a&b=c/d") == "a&b=c/d"

    def test_numbers(self):
        assert urlsafe(42) == "42"
        assert urlsafe(1.5) == "1.5"

    def test_booleans_use_json_spelling(self):
        assert urlsafe(True) == "true"
        assert urlsafe(False) == "false"

    def test_none_renders_empty(self):
        assert urlsafe(None) == ""


class TestToQueryString:
    def test_basic(self):
        assert to_query_string({"a": 1, "b": "x y"}) == "a=1&b=x%20y"

    def test_insertion_order(self):
        assert to_query_string({"to": 200, "from": 100}) == "to=200&from=100"

    def test_empty(self):
        assert to_query_string({}) == ""

    def test_none_values_omitted(self):
        assert to_query_string({"from": 100, "to": None}) == "from=100"
        assert to_query_string({"from": None}) == ""

    def test_falsy_values_kept(self):
        assert to_query_string({"from": 0, "q": ""}) == "from=0&q="
