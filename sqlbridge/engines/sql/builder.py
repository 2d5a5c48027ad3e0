"""
SQL text builders for the DatabaseManager.

Table names, field names, SET values and WHERE conditions are interpolated as
raw text: they are trusted caller input. Only values that go through
placeholders (``?``) are escaped, and that happens in binding.py.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

PLACEHOLDER = "?"


def array_to_query_string(items: Iterable[Any]) -> str:
    """
    Join items with ", " and wrap them in parentheses.

    ["a", "b"] -> "(a, b)"; an empty input gives "" (no parentheses).
    """
    parts = [str(item) for item in items]
    if not parts:
        return ""
    return "(" + ", ".join(parts) + ")"


def placeholders(count: int) -> list[str]:
    return [PLACEHOLDER] * count


def build_insert(table: str, fields: Sequence[str], value_count: int) -> str:
    """INSERT INTO table (f1, f2) VALUES (?, ?); the field list is left out when empty."""
    parts = ["INSERT INTO", table]
    field_list = array_to_query_string(fields)
    if field_list:
        parts.append(field_list)
    parts.append("VALUES")
    parts.append(array_to_query_string(placeholders(value_count)))
    return " ".join(parts)


def build_update(table: str, values: Mapping[str, Any], condition: str) -> str:
    """UPDATE table SET k1=v1, k2=v2 WHERE condition. Values are NOT escaped."""
    if not values:
        raise ValueError("update requires at least one field=value pair")
    set_clause = ", ".join(f"{field}={value}" for field, value in values.items())
    return f"UPDATE {table} SET {set_clause} WHERE {condition}"


def build_delete(table: str, condition: str) -> str:
    return f"DELETE FROM {table} WHERE {condition}"


def build_select(
    table: str,
    fields: Sequence[str] | None = None,
    condition: str | None = None,
) -> str:
    """SELECT f1, f2 FROM table [WHERE condition]; no fields selects *."""
    field_list = ", ".join(str(f) for f in fields) if fields else "*"
    sql = f"SELECT {field_list} FROM {table}"
    if condition is not None:
        sql += f" WHERE {condition}"
    return sql
