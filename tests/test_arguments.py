"""Tests for argument flattening and rule-string rendering."""

from __future__ import annotations

from fluent_rules.arguments import (
    build_argument_string,
    build_rule_string,
    flatten,
    is_present,
    stringify,
)


def test_flatten_preserves_depth_first_order() -> None:
    """Nested lists and tuples should unwrap left to right."""
    assert flatten([1, [2, (3, [4])], 5]) == [1, 2, 3, 4, 5]


def test_flatten_is_idempotent() -> None:
    """Flattening an already flat list should return the same list."""
    flat = flatten([["a"], "b", ("c",)])
    assert flatten(flat) == flat


def test_flatten_keeps_strings_and_mappings_whole() -> None:
    """Strings and dicts are scalar values, not containers to unwrap."""
    constraints = {"width": 100}
    assert flatten(["abc", constraints]) == ["abc", constraints]


def test_argument_string_is_empty_without_arguments() -> None:
    """No arguments means no delimiter suffix at all."""
    assert build_argument_string([]) == ""
    assert build_argument_string([[], ()]) == ""
    assert build_rule_string("required") == "required"


def test_argument_string_joins_flattened_values() -> None:
    """Arguments render after a colon, comma-joined in flattened order."""
    assert build_rule_string("between", [1, [10]]) == "between:1,10"


def test_stringify_special_values() -> None:
    """Booleans and None render in the rule-engine's spelling."""
    assert stringify(True) == "true"
    assert stringify(False) == "false"
    assert stringify(None) == "NULL"
    assert stringify(1.5) == "1.5"


def test_is_present_treats_zero_as_supplied() -> None:
    """Only None and the empty string count as missing optional arguments."""
    assert is_present(0)
    assert is_present("0")
    assert not is_present(None)
    assert not is_present("")
