"""Table and key name resolution for model-backed rules."""


from typing import Protocol


class TableModel(Protocol):
    """Anything that can name its backing table and primary key column."""

    def get_table(self) -> str: ...

    def get_key_name(self) -> str: ...


def _as_instance(model: TableModel | type[TableModel]) -> TableModel:
    """Instantiate a model class, or return an instance unchanged."""
    return model() if isinstance(model, type) else model


def parse_table_name(table: str | TableModel | type[TableModel]) -> str:
    """Return a literal table name, or the table a model class/instance uses."""
    if isinstance(table, str):
        return table
    return _as_instance(table).get_table()


def resolve_table_and_key(model: TableModel | type[TableModel]) -> tuple[str, str]:
    """Return the ``(table, key_name)`` pair for a model class or instance."""
    instance = _as_instance(model)
    return instance.get_table(), instance.get_key_name()
