"""Tests for try_parse: the text-to-tree probe."""

from __future__ import annotations

from json_snapshot.tree.parser import ParseFailure, try_parse


class TestTreeShapedDocuments:
    def test_object_parses(self) -> None:
        assert try_parse('{"foo": "bar", "numbers": [1, 2]}\n') == {
            "foo": "bar",
            "numbers": [1, 2],
        }

    def test_array_parses(self) -> None:
        assert try_parse("[1, 4, 5]") == [1, 4, 5]

    def test_empty_containers_parse(self) -> None:
        assert try_parse("{}") == {}
        assert try_parse("[]") == []

    def test_key_order_is_preserved(self) -> None:
        parsed = try_parse('{"b": 1, "a": 2}')
        assert list(parsed) == ["b", "a"]


class TestParseFailures:
    def test_plain_text_is_a_failure(self) -> None:
        result = try_parse("test data\n")
        assert isinstance(result, ParseFailure)
        assert "invalid JSON" in result.reason

    def test_null_document_is_not_tree_shaped(self) -> None:
        result = try_parse("null\n")
        assert isinstance(result, ParseFailure)
        assert "NoneType" in result.reason

    def test_bare_number_is_not_tree_shaped(self) -> None:
        assert isinstance(try_parse("42"), ParseFailure)

    def test_quoted_string_is_not_tree_shaped(self) -> None:
        assert isinstance(try_parse('"hello"'), ParseFailure)

    def test_truncated_object_is_a_failure(self) -> None:
        assert isinstance(try_parse('{"a": '), ParseFailure)

    def test_empty_text_is_a_failure(self) -> None:
        assert isinstance(try_parse(""), ParseFailure)
