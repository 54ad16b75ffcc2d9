"""Tests for Parameter and the declaration parsers."""

import pytest
from pydantic import ValidationError

from stubargs.domain.parameters import (
    Parameter,
    parse_declaration,
    parse_pair,
    parse_parameter_list,
)


class TestParameter:
    def test_empty_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Parameter(name="x", type_name="  ")

    def test_empty_name_allowed(self) -> None:
        assert Parameter(type_name="int").name == ""

    def test_type_whitespace_collapsed(self) -> None:
        assert Parameter(name="m", type_name="java.util.Map<K,  V>").type_name == "java.util.Map<K, V>"

    def test_frozen(self) -> None:
        p = Parameter(name="x", type_name="int")
        with pytest.raises(ValidationError):
            p.name = "y"  # type: ignore[misc]


class TestParseDeclaration:
    def test_type_and_name(self) -> None:
        assert parse_declaration("java.lang.String label") == Parameter(
            name="label", type_name="java.lang.String"
        )

    def test_surrounding_whitespace(self) -> None:
        assert parse_declaration("  int   x ") == Parameter(name="x", type_name="int")

    def test_single_token_is_type(self) -> None:
        assert parse_declaration("long") == Parameter(name="", type_name="long")

    def test_blank_raises(self) -> None:
        with pytest.raises(ValueError, match="empty parameter declaration"):
            parse_declaration("   ")


class TestParsePair:
    def test_name_and_type(self) -> None:
        assert parse_pair("count:long") == Parameter(name="count", type_name="long")

    def test_empty_name(self) -> None:
        assert parse_pair(":int") == Parameter(name="", type_name="int")

    def test_missing_colon(self) -> None:
        with pytest.raises(ValueError, match="NAME:TYPE"):
            parse_pair("count")

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="missing type"):
            parse_pair("count: ")


class TestParseParameterList:
    def test_comma_separated(self) -> None:
        params = parse_parameter_list("boolean flag, long count")
        assert [p.name for p in params] == ["flag", "count"]
        assert [p.type_name for p in params] == ["boolean", "long"]

    def test_blank_entries_ignored(self) -> None:
        assert parse_parameter_list(" , int x,") == [Parameter(name="x", type_name="int")]

    def test_empty_string(self) -> None:
        assert parse_parameter_list("") == []
