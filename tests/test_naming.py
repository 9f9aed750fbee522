"""Tests for call-name resolution."""

from __future__ import annotations

import pytest

from fluent_rules.naming import (
    CHAINING_METHOD_PREFIXES,
    method_name_to_rule,
    resolve_rule,
    snake_case,
    strip_keyword_suffix,
    strip_method_prefix,
)


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("string", "string"),
        ("alphaDash", "alpha_dash"),
        ("alpha_dash", "alpha_dash"),
        ("notIn", "not_in"),
        ("RequiredWithoutAll", "required_without_all"),
        ("extendedRuleByArgumentOne", "extended_rule_by_argument_one"),
        ("", ""),
    ],
)
def test_snake_case_conversion(method: str, expected: str) -> None:
    """Call-style casing should convert to canonical snake_case identifiers."""
    assert snake_case(method) == expected
    assert method_name_to_rule(method) == expected


def test_snake_case_is_idempotent_for_canonical_identifiers() -> None:
    """Converting an identifier twice should not change it."""
    for value in ("active_url", "required_if", "digitsBetween"):
        once = snake_case(value)
        assert snake_case(once) == once


@pytest.mark.parametrize(
    "method",
    ["isString", "hasString", "allowedString", "matchesString", "string"],
)
def test_prefixed_calls_resolve_to_the_same_rule(method: str) -> None:
    """Every recognized chaining prefix should be stripped before conversion."""
    assert resolve_rule(method) == "string"


def test_prefix_list_is_fixed() -> None:
    """The recognized prefixes are a short, case-sensitive, ordered list."""
    assert CHAINING_METHOD_PREFIXES == ("is", "allowed", "has", "matches")
    assert strip_method_prefix("IsString") == "IsString"


def test_prefix_strip_ignores_word_boundaries() -> None:
    """Known quirk: a prefix match trims its characters even inside a plain word."""
    assert strip_method_prefix("issue") == "ue"
    assert strip_method_prefix("isset") == "et"
    assert strip_method_prefix("hash") == ""
    assert resolve_rule("isActiveUrl") == "active_url"


def test_bare_prefix_strips_to_empty_name() -> None:
    """A call that is exactly a prefix leaves no rule name behind."""
    assert strip_method_prefix("is") == ""
    assert resolve_rule("has") == ""


def test_trailing_underscore_allows_keyword_names() -> None:
    """``in_`` and ``not_in_`` should resolve like ``in`` and ``not_in``."""
    assert strip_keyword_suffix("in_") == "in"
    assert strip_keyword_suffix("_") == "_"
    assert resolve_rule("in_") == "in"
    assert resolve_rule("notIn_") == "not_in"
