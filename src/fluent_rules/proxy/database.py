"""Database-backed proxy rules: ``exists`` and ``unique``."""


from typing import ClassVar

from .base import DatabaseRule


class Exists(DatabaseRule):
    """Require the value to exist in ``table.column``."""

    rule: ClassVar[str] = "exists"

    def __str__(self) -> str:
        return f"exists:{self.table},{self.column},{self.format_wheres()}".rstrip(",")


class Unique(DatabaseRule):
    """Require the value to be unique in ``table.column``.

    ``ignore`` excludes one row (by ``id_column``) from the uniqueness check,
    typically the record being updated.
    """

    rule: ClassVar[str] = "unique"
    refinements: ClassVar[frozenset[str]] = DatabaseRule.refinements | {"ignore"}

    def __init__(self, table: str, column: str = "NULL") -> None:
        super().__init__(table, column)
        self.ignored: object = None
        self.id_column = "id"

    def ignore(self, value: object, id_column: str | None = None) -> "Unique":
        """Ignore the row whose ``id_column`` equals ``value``."""
        self.ignored = value
        self.id_column = id_column or "id"
        return self

    def __str__(self) -> str:
        ignored = f'"{self.ignored}"' if self.ignored is not None else "NULL"
        rendered = (
            f"unique:{self.table},{self.column},{ignored},"
            f"{self.id_column},{self.format_wheres()}"
        )
        return rendered.rstrip(",")
