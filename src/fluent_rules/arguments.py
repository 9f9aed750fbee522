"""Argument normalization and rule-string rendering helpers."""


from collections.abc import Iterable
from typing import TypeAlias

ArgumentList: TypeAlias = list[object]

ARGUMENT_DELIMITER = ":"
ARGUMENT_SEPARATOR = ","


def flatten(arguments: Iterable[object]) -> ArgumentList:
    """Flatten nested ``list``/``tuple`` arguments depth-first, left to right.

    Only lists and tuples are unwrapped. Strings, mappings and arbitrary
    objects are kept as single values, so flattening a flat list returns an
    equal list.
    """
    flat: ArgumentList = []
    for argument in arguments:
        if isinstance(argument, (list, tuple)):
            flat.extend(flatten(argument))
        else:
            flat.append(argument)
    return flat


def stringify(value: object) -> str:
    """Render one argument value for a rule string."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_argument_string(arguments: Iterable[object]) -> str:
    """Return ``:a,b,...`` for the flattened arguments, or ``""`` when empty."""
    flat = flatten(arguments)
    if not flat:
        return ""
    return ARGUMENT_DELIMITER + ARGUMENT_SEPARATOR.join(stringify(v) for v in flat)


def build_rule_string(rule: str, arguments: Iterable[object] = ()) -> str:
    """Render a string rule entry such as ``between:1,10``."""
    return rule + build_argument_string(arguments)


def is_present(value: object) -> bool:
    """Return whether an optional override argument was actually supplied."""
    return value is not None and value != ""
