"""Tests for node accessors and type predicates."""

from __future__ import annotations

import pytest
import yaml

from pod_manifest_linter.parsing.nodes import (
    get_map_field,
    integer_value,
    is_integer,
    is_mapping,
    is_sequence,
    is_string,
    node_line,
)


def compose(content: str) -> yaml.Node:
    return yaml.compose(content, Loader=yaml.SafeLoader)


class TestGetMapField:
    def test_returns_key_and_value(self) -> None:
        root = compose("a: 1\nb: two\n")
        key, value = get_map_field(root, "b")
        assert key.value == "b"
        assert value.value == "two"
        assert node_line(key) == 2

    def test_missing_field(self) -> None:
        assert get_map_field(compose("a: 1\n"), "b") == (None, None)

    def test_non_mapping_node(self) -> None:
        assert get_map_field(compose("- a\n- b\n"), "a") == (None, None)
        assert get_map_field(None, "a") == (None, None)

    def test_first_duplicate_wins(self) -> None:
        root = compose("a: first\na: second\n")
        key, value = get_map_field(root, "a")
        assert value.value == "first"
        assert node_line(key) == 1


class TestTypePredicates:
    def test_plain_and_quoted_scalars(self) -> None:
        root = compose('plain: 8080\nquoted: "8080"\nword: v1\nfloat: 0.5\nflag: true\n')
        fields = {k.value: v for k, v in root.value}
        assert is_integer(fields["plain"]) and not is_string(fields["plain"])
        assert is_string(fields["quoted"]) and not is_integer(fields["quoted"])
        assert is_string(fields["word"])
        assert not is_string(fields["float"]) and not is_integer(fields["float"])
        assert not is_string(fields["flag"]) and not is_integer(fields["flag"])

    def test_collections_are_not_scalars(self) -> None:
        root = compose("m: {a: 1}\ns: [1]\n")
        fields = {k.value: v for k, v in root.value}
        assert is_mapping(fields["m"]) and not is_string(fields["m"])
        assert is_sequence(fields["s"]) and not is_integer(fields["s"])

    def test_explicit_tags(self) -> None:
        root = compose("a: !!str 8080\nb: !!int '42'\n")
        fields = {k.value: v for k, v in root.value}
        assert is_string(fields["a"])
        assert is_integer(fields["b"])


class TestIntegerValue:
    def test_decimal_and_hex(self) -> None:
        root = compose("a: 8080\nb: 0x1F\nc: -3\n")
        values = [integer_value(v) for _, v in root.value]
        assert values == [8080, 31, -3]

    @pytest.mark.parametrize("value", ["abc", '""', '"-"', '"_"', '"+__"'])
    def test_unconstructible_int(self, value: str) -> None:
        node = compose(f"a: !!int {value}\n").value[0][1]
        assert is_integer(node)
        assert integer_value(node) is None
