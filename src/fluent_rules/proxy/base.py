"""Shared base types for proxy rule objects."""


from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeAlias

from fluent_rules.arguments import stringify
from fluent_rules.errors import UnresolvableCallError

Where: TypeAlias = tuple[str, str]


class ProxyRule(ABC):
    """Opaque rule object that renders itself and supports named refinements.

    ``refinements`` lists the method names a builder may forward to the
    object after it was produced. Nothing outside that set is reachable
    through :meth:`refine`.
    """

    rule: ClassVar[str] = "proxy"
    refinements: ClassVar[frozenset[str]] = frozenset()

    def supports(self, name: str) -> bool:
        """Return whether ``name`` is a refinement this rule exposes."""
        return name in self.refinements

    def refine(self, name: str, *arguments: Any) -> "ProxyRule":
        """Apply the named refinement in place and return self."""
        if not self.supports(name):
            raise UnresolvableCallError(name)
        getattr(self, name)(*arguments)
        return self

    @abstractmethod
    def __str__(self) -> str:
        """Render the rule in the pipe-delimited rule format."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class DatabaseRule(ProxyRule):
    """Table/column rule with optional ``column,value`` where constraints."""

    refinements: ClassVar[frozenset[str]] = frozenset(
        {"where", "where_not", "where_null", "where_not_null"}
    )

    def __init__(self, table: str, column: str = "NULL") -> None:
        self.table = table
        self.column = column
        self.wheres: list[Where] = []

    def where(self, column: str, value: object = None) -> "DatabaseRule":
        """Constrain the lookup to rows where ``column`` equals ``value``."""
        if value is None:
            return self.where_null(column)
        self.wheres.append((column, stringify(value)))
        return self

    def where_not(self, column: str, value: object) -> "DatabaseRule":
        """Constrain the lookup to rows where ``column`` differs from ``value``."""
        self.wheres.append((column, "!" + stringify(value)))
        return self

    def where_null(self, column: str) -> "DatabaseRule":
        self.wheres.append((column, "NULL"))
        return self

    def where_not_null(self, column: str) -> "DatabaseRule":
        self.wheres.append((column, "NOT_NULL"))
        return self

    def format_wheres(self) -> str:
        """Render where constraints as a flat ``column,value,...`` list."""
        return ",".join(f"{column},{value}" for column, value in self.wheres)
