"""Tests for best-effort JSON coercion."""

import pytest

from mcp_bridge.arguments.coerce import Parsed, Unparsed, try_parse_json


class TestTryParseJson:
    def test_number(self) -> None:
        outcome = try_parse_json("42")
        assert isinstance(outcome, Parsed)
        assert outcome.value == 42

    def test_boolean_and_null(self) -> None:
        assert try_parse_json("true") == Parsed(value=True)
        assert try_parse_json("null") == Parsed(value=None)

    def test_object(self) -> None:
        assert try_parse_json('{"a": [1, 2]}') == Parsed(value={"a": [1, 2]})

    def test_plain_text(self) -> None:
        outcome = try_parse_json("not json")
        assert isinstance(outcome, Unparsed)
        assert outcome.text == "not json"
        assert outcome.reason

    def test_empty_string(self) -> None:
        assert isinstance(try_parse_json(""), Unparsed)

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_constants_stay_text(self, token: str) -> None:
        outcome = try_parse_json(token)
        assert isinstance(outcome, Unparsed)
        assert outcome.text == token

    def test_deep_nesting_is_unparsed(self) -> None:
        text = "[" * 200_000
        outcome = try_parse_json(text)
        assert isinstance(outcome, Unparsed)
        assert outcome.text == text
