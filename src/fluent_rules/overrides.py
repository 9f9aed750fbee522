"""Custom rendering routines that replace ``identifier:args`` for some rules.

Each override receives the builder followed by the call arguments as given
and returns the builder. Overrides whose arguments are bounds or raw rule
strings flatten them first; ``when``, ``foreign_key`` and ``unique`` take
theirs positionally. Surplus arguments are ignored. Secondary rules (``min``,
``max``) are applied through :meth:`Rule.apply`, so they go through the
same classification as any other call.
"""


from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from .arguments import flatten, is_present
from .tables import TableModel, parse_table_name, resolve_table_and_key

if TYPE_CHECKING:
    from .builder import Rule

CustomRule: TypeAlias = Callable[..., "Rule"]


def _set_max(rule: "Rule", max_: object) -> "Rule":
    return rule.apply("max", max_) if is_present(max_) else rule


def _set_min(rule: "Rule", min_: object) -> "Rule":
    return rule.apply("min", min_) if is_present(min_) else rule


def _with_max(identifier: str) -> CustomRule:
    """Build an override applying ``identifier`` then an optional ``max``."""

    def apply_rule(rule: "Rule", *arguments: Any) -> "Rule":
        max_, *_rest = [*flatten(arguments), None]
        return _set_max(rule.append(identifier), max_)

    return apply_rule


def _with_min_and_max(identifier: str) -> CustomRule:
    """Build an override applying ``identifier`` then optional ``min``/``max``."""

    def apply_rule(rule: "Rule", *arguments: Any) -> "Rule":
        min_, max_, *_rest = [*flatten(arguments), None, None]
        return _set_max(_set_min(rule.append(identifier), min_), max_)

    return apply_rule


def character_rule(rule: "Rule", *_rest: Any) -> "Rule":
    """A single alphabetic character."""
    return rule.apply("alpha", 1, 1)


def optional_rule(rule: "Rule", *_rest: Any) -> "Rule":
    return rule.apply("nullable")


def raw_rule(rule: "Rule", *rules: Any) -> "Rule":
    """Append pre-rendered rule strings verbatim."""
    for raw in flatten(rules):
        rule.append(raw)
    return rule


def foreign_key_rule(
    rule: "Rule", model: TableModel | type[TableModel], *_rest: Any
) -> "Rule":
    """Require the value to reference an existing primary key of ``model``."""
    table, key_name = resolve_table_and_key(model)
    return rule.apply("exists", table, key_name)


def unique_rule(
    rule: "Rule",
    table: str | TableModel | type[TableModel],
    column: str = "NULL",
    *_rest: Any,
) -> "Rule":
    """Proxy to the ``unique`` rule, accepting a model in place of a table."""
    return rule.apply_proxy_rule("unique", parse_table_name(table), column)


def when_rule(
    rule: "Rule", condition: Any, callback: Callable[["Rule"], Any], *_rest: Any
) -> "Rule":
    """Run ``callback(rule)`` only when ``condition`` (or its result) is truthy."""
    if callable(condition):
        condition = condition()
    if condition:
        callback(rule)
    return rule


CUSTOM_RULES: Mapping[str, CustomRule] = MappingProxyType(
    {
        "active_url": _with_max("active_url"),
        "alpha": _with_min_and_max("alpha"),
        "alpha_dash": _with_min_and_max("alpha_dash"),
        "alpha_num": _with_min_and_max("alpha_num"),
        "array": _with_min_and_max("array"),
        "character": character_rule,
        "email": _with_max("email"),
        "file": _with_max("file"),
        "foreign_key": foreign_key_rule,
        "image": _with_max("image"),
        "integer": _with_min_and_max("integer"),
        "json": _with_max("json"),
        "numeric": _with_min_and_max("numeric"),
        "optional": optional_rule,
        "raw": raw_rule,
        "string": _with_min_and_max("string"),
        "unique": unique_rule,
        "url": _with_max("url"),
        "when": when_rule,
    }
)
