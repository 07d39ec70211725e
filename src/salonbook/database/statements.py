"""Builders for generic INSERT / UPDATE / DELETE statements.

Placeholders are numbered ``:p1 .. :pN`` and bound by position. Column names
are checked against the declared table so that callers cannot introduce
arbitrary identifiers into the statement text.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from sqlalchemy.types import TypeEngine

from salonbook.database.models import column_types


@dataclass(frozen=True)
class Statement:
    """Statement text with positional parameters and their column types."""

    text: str
    params: tuple[Any, ...] = ()
    param_types: tuple[Optional[TypeEngine], ...] = ()
    table: Optional[str] = None


@dataclass
class _ParamList:
    values: list[Any] = field(default_factory=list)
    types: list[Optional[TypeEngine]] = field(default_factory=list)

    def add(self, value: Any, type_: Optional[TypeEngine] = None) -> str:
        self.values.append(value)
        self.types.append(type_)
        return f":p{len(self.values)}"


def _checked_columns(table: str, names) -> dict[str, TypeEngine]:
    types = column_types(table)
    unknown = [name for name in names if name not in types]
    if unknown:
        raise ValueError(f"Unknown column(s) for table '{table}': {', '.join(unknown)}")
    return types


def _where_clause(table: str, where: Mapping[str, Any], params: _ParamList) -> str:
    if not where:
        raise ValueError("A WHERE condition is required")
    types = _checked_columns(table, where.keys())
    conditions = []
    for column, value in where.items():
        if value is None:
            conditions.append(f"{column} IS NULL")
        else:
            conditions.append(f"{column} = {params.add(value, types[column])}")
    return " AND ".join(conditions)


def build_insert(table: str, values: Mapping[str, Any]) -> Statement:
    """Build ``INSERT ... RETURNING *`` in mapping order.

    Raises:
        ValueError: If the table or any column is unknown, or values is empty
    """
    if not values:
        raise ValueError(f"No values given for insert into '{table}'")
    types = _checked_columns(table, values.keys())
    params = _ParamList()
    columns = ", ".join(values.keys())
    placeholders = ", ".join(params.add(value, types[name]) for name, value in values.items())
    text = f"INSERT INTO {table} ({columns}) VALUES ({placeholders}) RETURNING *"
    return Statement(text, tuple(params.values), tuple(params.types), table)


def build_update(table: str, values: Mapping[str, Any], where: Mapping[str, Any]) -> Statement:
    """Build ``UPDATE ... SET ..., updated_at = CURRENT_TIMESTAMP WHERE ... RETURNING *``.

    SET parameters take the first positions and WHERE parameters follow them.

    Raises:
        ValueError: If the table or any column is unknown, or values is empty
    """
    if not values:
        raise ValueError(f"No values given for update of '{table}'")
    types = _checked_columns(table, values.keys())
    if "updated_at" not in types:
        raise ValueError(f"Table '{table}' has no updated_at column")

    params = _ParamList()
    assignments = [f"{name} = {params.add(value, types[name])}" for name, value in values.items()]
    if "updated_at" not in values:
        assignments.append("updated_at = CURRENT_TIMESTAMP")
    where_clause = _where_clause(table, where, params)
    text = f"UPDATE {table} SET {', '.join(assignments)} WHERE {where_clause} RETURNING *"
    return Statement(text, tuple(params.values), tuple(params.types), table)


def build_delete(table: str, where: Mapping[str, Any]) -> Statement:
    """Build ``DELETE ... WHERE ... RETURNING *``."""
    params = _ParamList()
    where_clause = _where_clause(table, where, params)
    text = f"DELETE FROM {table} WHERE {where_clause} RETURNING *"
    return Statement(text, tuple(params.values), tuple(params.types), table)
