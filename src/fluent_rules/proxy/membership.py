"""Value membership proxy rules: ``in`` and ``not_in``."""


from typing import ClassVar

from fluent_rules.arguments import flatten, stringify

from .base import ProxyRule


class In(ProxyRule):
    """Require the value to be one of a fixed list, rendered quoted."""

    rule: ClassVar[str] = "in"

    def __init__(self, *values: object) -> None:
        """Accept values spread as arguments or grouped in one list."""
        self.values = flatten(values)

    def __str__(self) -> str:
        quoted = ",".join(f'"{stringify(value)}"' for value in self.values)
        return f"{self.rule}:{quoted}"


class NotIn(In):
    """Require the value to be absent from a fixed list."""

    rule: ClassVar[str] = "not_in"
