"""Tests for SignatureRegistry resolution and loading."""

from pathlib import Path

import pytest

from stubargs.domain.calls import CallSite
from stubargs.domain.parameters import Parameter
from stubargs.infrastructure.signatures import SignatureError, SignatureRegistry


def _site(name: str, qualifier: str | None = None) -> CallSite:
    return CallSite(name=name, qualifier=qualifier, open_paren=0)


class TestResolve:
    def test_single_overload(self, registry: SignatureRegistry) -> None:
        params = registry.resolve(_site("resize"))
        assert params is not None
        assert [p.name for p in params] == ["width", "title"]

    def test_ambiguous_overload_unresolved(self, registry: SignatureRegistry) -> None:
        assert registry.resolve(_site("log")) is None

    def test_unknown_unresolved(self, registry: SignatureRegistry) -> None:
        assert registry.resolve(_site("nope")) is None

    def test_falls_back_to_simple_name(self, registry: SignatureRegistry) -> None:
        assert registry.resolve(_site("resize", qualifier="w")) is not None

    def test_returns_copy(self, registry: SignatureRegistry) -> None:
        params = registry.resolve(_site("resize"))
        assert params is not None
        params.clear()
        assert registry.resolve(_site("resize"))

    def test_len_and_contains(self, registry: SignatureRegistry) -> None:
        assert len(registry) == 2
        assert "log" in registry
        assert len(registry.overloads("log")) == 2


class TestFromMapping:
    def test_flat_list_is_single_overload(self) -> None:
        reg = SignatureRegistry.from_mapping({"f": ["int a", "long b"]})
        assert reg.overloads("f") == [
            [Parameter(name="a", type_name="int"), Parameter(name="b", type_name="long")]
        ]

    def test_nested_lists_are_overloads(self) -> None:
        reg = SignatureRegistry.from_mapping({"f": [["int a"], ["long b", "char c"]]})
        assert len(reg.overloads("f")) == 2

    def test_empty_list_is_no_arg_method(self) -> None:
        reg = SignatureRegistry.from_mapping({"f": []})
        assert reg.resolve(_site("f")) == []

    def test_non_list_rejected(self) -> None:
        with pytest.raises(SignatureError, match="must be a list"):
            SignatureRegistry.from_mapping({"f": "int a"})

    def test_non_string_declaration_rejected(self) -> None:
        with pytest.raises(SignatureError, match="non-string"):
            SignatureRegistry.from_mapping({"f": ["int a", 3]})

    def test_blank_declaration_rejected(self) -> None:
        with pytest.raises(SignatureError, match="empty parameter declaration"):
            SignatureRegistry.from_mapping({"f": ["  "]})

    def test_merge(self, registry: SignatureRegistry) -> None:
        other = SignatureRegistry.from_mapping({"extra": ["int x"]})
        registry.merge(other)
        assert "extra" in registry


class TestFromToml:
    def test_reads_signatures_table(self, tmp_path: Path) -> None:
        path = tmp_path / "sigs.toml"
        path.write_text('[signatures]\n"Widget.resize" = ["int width"]\n', encoding="utf-8")
        reg = SignatureRegistry.from_toml(path)
        assert reg.resolve(_site("resize", qualifier="Widget")) == [
            Parameter(name="width", type_name="int")
        ]

    def test_missing_table_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "sigs.toml"
        path.write_text("[other]\nx = 1\n", encoding="utf-8")
        assert len(SignatureRegistry.from_toml(path)) == 0

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "sigs.toml"
        path.write_text("[signatures\n", encoding="utf-8")
        with pytest.raises(SignatureError, match="Invalid TOML"):
            SignatureRegistry.from_toml(path)

    def test_signatures_not_a_table(self, tmp_path: Path) -> None:
        path = tmp_path / "sigs.toml"
        path.write_text('signatures = "nope"\n', encoding="utf-8")
        with pytest.raises(SignatureError, match="must be a table"):
            SignatureRegistry.from_toml(path)
