"""Tests for custom rule overrides."""

from __future__ import annotations

import pytest

from fluent_rules import Rule
from fluent_rules.overrides import CUSTOM_RULES
from fluent_rules.proxy import Unique


class ModelDummy:
    """Minimal table model exposing table and key names."""

    TABLE_NAME = "table_name"
    KEY_NAME = "key_name"

    def get_table(self) -> str:
        return self.TABLE_NAME

    def get_key_name(self) -> str:
        return self.KEY_NAME


@pytest.mark.parametrize(
    "rule", ["alpha", "alpha_dash", "alpha_num", "array", "integer", "numeric", "string"]
)
def test_min_and_max_overrides(rule: str) -> None:
    """Sized rules append ``min``/``max`` only for supplied bounds."""
    assert Rule().apply(rule, 1, 10).get() == [rule, "min:1", "max:10"]
    assert Rule().apply(rule, [1, 10]).get() == [rule, "min:1", "max:10"]
    assert Rule().apply(rule).get() == [rule]
    assert Rule().apply(rule, None, 10).get() == [rule, "max:10"]
    assert Rule().apply(rule, 5).get() == [rule, "min:5"]


def test_integer_override_renders_expected_string() -> None:
    """``integer(1, 10)`` expands to three entries; no arguments to one."""
    assert str(Rule.integer(1, 10)) == "integer|min:1|max:10"
    assert str(Rule.integer()) == "integer"


def test_zero_bound_counts_as_supplied() -> None:
    """Only missing bounds are skipped; zero is a real bound."""
    assert Rule.string(0, "").get() == ["string", "min:0"]


@pytest.mark.parametrize("rule", ["active_url", "email", "file", "image", "json", "url"])
def test_max_overrides(rule: str) -> None:
    """Single-bound rules append ``max`` when given."""
    assert Rule().apply(rule, 10).get() == [rule, "max:10"]
    assert Rule().apply(rule, [10]).get() == [rule, "max:10"]
    assert Rule().apply(rule).get() == [rule]


def test_camel_case_calls_reach_overrides() -> None:
    """Overrides are keyed by canonical identifier, not call spelling."""
    assert Rule.activeUrl(10).get() == ["active_url", "max:10"]
    assert Rule.alphaDash(1, 10).get() == ["alpha_dash", "min:1", "max:10"]


def test_character_override() -> None:
    """A character is a single alphabetic character."""
    assert Rule.character().get() == ["alpha", "min:1", "max:1"]


def test_optional_override() -> None:
    """``optional`` is spelled ``nullable`` in the rule format."""
    assert Rule.optional().get() == ["nullable"]


def test_raw_override_appends_verbatim() -> None:
    """Raw rule strings pass through untouched."""
    rules = "string|min:1|max:10"
    assert Rule.raw(rules).get() == [rules]
    assert str(Rule.required().raw(rules)) == "required|" + rules


@pytest.mark.parametrize("model", [ModelDummy, ModelDummy()], ids=["class", "instance"])
def test_foreign_key_override(model: object) -> None:
    """Foreign keys become an ``exists`` rule on the model's table and key."""
    rule = Rule.foreignKey(model)
    assert rule.to_strings() == [
        f"exists:{ModelDummy.TABLE_NAME},{ModelDummy.KEY_NAME}"
    ]


@pytest.mark.parametrize(
    "table",
    [ModelDummy, ModelDummy(), ModelDummy.TABLE_NAME],
    ids=["class", "instance", "name"],
)
def test_unique_override_resolves_table(table: object) -> None:
    """``unique`` accepts a model class, instance, or literal table name."""
    column = "column_name"
    assert str(Rule.unique(table, column)) == str(
        Unique(ModelDummy.TABLE_NAME, column)
    )


def test_unique_override_result_is_chainable() -> None:
    """The proxied ``unique`` rule accepts refinements like a direct call."""
    rule = Rule.unique(ModelDummy, "email").ignore(5, "uuid")
    assert str(rule) == 'unique:table_name,email,"5",uuid'


@pytest.mark.parametrize(
    "condition", [True, lambda: True], ids=["boolean", "callable"]
)
def test_when_override_applies_if_condition_true(condition: object) -> None:
    """A truthy condition runs the callback against the same builder."""
    assert Rule.when(condition, lambda rule: rule.string()).get() == ["string"]


@pytest.mark.parametrize(
    "condition", [False, lambda: False], ids=["boolean", "callable"]
)
def test_when_override_skips_if_condition_false(condition: object) -> None:
    """A falsy condition leaves the builder untouched."""
    assert Rule.when(condition, lambda rule: rule.string()).get() == []


def test_when_override_takes_list_conditions_as_given() -> None:
    """A list condition is judged by its truthiness, not spread into arguments."""
    assert Rule.when([], lambda rule: rule.string()).get() == []
    assert Rule.when(["a", "b"], lambda rule: rule.string()).get() == ["string"]


def test_overrides_ignore_surplus_arguments() -> None:
    """Arguments beyond the ones an override uses are dropped."""
    assert Rule.string(1, 10, 20).get() == ["string", "min:1", "max:10"]
    assert Rule.email(255, 1).get() == ["email", "max:255"]
    assert Rule.character("x").get() == ["alpha", "min:1", "max:1"]
    assert Rule.optional(True).get() == ["nullable"]
    assert Rule.when(True, lambda rule: rule.string(), "extra").get() == ["string"]


def test_override_table_is_read_only() -> None:
    """The override table cannot be changed at runtime."""
    with pytest.raises(TypeError):
        CUSTOM_RULES["string"] = CUSTOM_RULES["email"]  # type: ignore[index]
