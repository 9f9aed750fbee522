"""Image dimension constraints proxy rule."""


from collections.abc import Mapping
from typing import ClassVar

from fluent_rules.arguments import stringify

from .base import ProxyRule


class Dimensions(ProxyRule):
    """Constrain image dimensions, rendered as ``dimensions:key=value,...``."""

    rule: ClassVar[str] = "dimensions"
    refinements: ClassVar[frozenset[str]] = frozenset(
        {
            "width",
            "height",
            "min_width",
            "min_height",
            "max_width",
            "max_height",
            "ratio",
        }
    )

    def __init__(self, constraints: Mapping[str, object] | None = None) -> None:
        self.constraints: dict[str, object] = dict(constraints or {})

    def width(self, value: object) -> "Dimensions":
        self.constraints["width"] = value
        return self

    def height(self, value: object) -> "Dimensions":
        self.constraints["height"] = value
        return self

    def min_width(self, value: object) -> "Dimensions":
        self.constraints["min_width"] = value
        return self

    def min_height(self, value: object) -> "Dimensions":
        self.constraints["min_height"] = value
        return self

    def max_width(self, value: object) -> "Dimensions":
        self.constraints["max_width"] = value
        return self

    def max_height(self, value: object) -> "Dimensions":
        self.constraints["max_height"] = value
        return self

    def ratio(self, value: object) -> "Dimensions":
        """Set the width/height ratio, e.g. ``3/2`` or ``1.5``."""
        self.constraints["ratio"] = value
        return self

    def __str__(self) -> str:
        pairs = ",".join(
            f"{key}={stringify(value)}" for key, value in self.constraints.items()
        )
        return f"dimensions:{pairs}"
