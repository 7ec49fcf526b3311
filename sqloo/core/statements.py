"""Statement builders for the CRUD surface.

Builders are pure: they turn a table name and plain mappings into a
`Statement` using the dialect placeholder strategy and never touch a driver.
Table and column names are emitted verbatim and must come from trusted code.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Any, List, Mapping, Sequence, Tuple

from .contracts import DialectPort
from .errors import ShapeMismatchError
from .template import Statement, _PlaceholderCounter
from .types import InsertData


def build_insert(dialect: DialectPort, table: str, data: InsertData) -> Statement:
    """Compile a single-row or multi-row `INSERT`.

    Args:
        dialect: Placeholder strategy.
        table: Target table name.
        data: One mapping, or a non-empty sequence of mappings sharing a key set.

    Returns:
        Statement with one placeholder group per row.

    Raises:
        ShapeMismatchError: Empty sequence, a row without columns, or rows with
            different key sets.
    """

    if isinstance(data, MappingABC):
        columns = list(data.keys())
        if not columns:
            return Statement(f"INSERT INTO {table} DEFAULT VALUES")
        rows = [[data[name] for name in columns]]
    else:
        columns, rows = _align_rows(data)

    counter = _PlaceholderCounter(dialect)
    groups: List[str] = []
    values: List[Any] = []
    for row in rows:
        groups.append("(" + ", ".join(counter.next() for _ in row) + ")")
        values.extend(row)

    sql = f"INSERT INTO {table} ({', '.join(columns)}) VALUES {', '.join(groups)}"
    return Statement(sql, tuple(values))


def build_update(
    dialect: DialectPort,
    table: str,
    where: Mapping[str, Any],
    data: Mapping[str, Any],
) -> Statement:
    """Compile `UPDATE ... SET ... WHERE ...`.

    `data` placeholders are numbered before `where` placeholders and bound
    values are `values(data)` followed by `values(where)`.
    """

    if not data:
        raise ShapeMismatchError("update data must not be empty.")
    if not where:
        raise ShapeMismatchError("where is required for update().")

    counter = _PlaceholderCounter(dialect)
    set_clause = ", ".join(f"{key} = {counter.next()}" for key in data)
    where_clause, where_values = _compile_equals(where, counter)

    sql = f"UPDATE {table} SET {set_clause} WHERE {where_clause}"
    return Statement(sql, tuple(data.values()) + where_values)


def build_select(dialect: DialectPort, table: str, where: Mapping[str, Any]) -> Statement:
    """Compile `SELECT * FROM table` filtered by column equality.

    An empty `where` selects every row.
    """

    if not where:
        return Statement(f"SELECT * FROM {table}")

    where_clause, values = _compile_equals(where, _PlaceholderCounter(dialect))
    return Statement(f"SELECT * FROM {table} WHERE {where_clause}", values)


def _compile_equals(
    where: Mapping[str, Any], counter: _PlaceholderCounter
) -> Tuple[str, Tuple[Any, ...]]:
    """Compile `k1 = p1 AND k2 = p2 ...` in key enumeration order."""

    clause = " AND ".join(f"{key} = {counter.next()}" for key in where)
    return clause, tuple(where.values())


def _align_rows(data: Sequence[Mapping[str, Any]]) -> Tuple[List[str], List[List[Any]]]:
    """Validate multi-row insert input and order each row by the first row's keys."""

    if isinstance(data, (str, bytes)):
        raise TypeError("insert data must be a mapping or a sequence of mappings.")

    rows = list(data)
    if not rows:
        raise ShapeMismatchError("Cannot insert an empty sequence of rows.")

    for row in rows:
        if not isinstance(row, MappingABC):
            raise TypeError("insert rows must be mappings.")

    columns = list(rows[0].keys())
    if not columns:
        raise ShapeMismatchError("insert rows must contain at least one column.")

    expected = set(columns)
    aligned: List[List[Any]] = []
    for position, row in enumerate(rows):
        if set(row.keys()) != expected:
            missing = sorted(expected - set(row.keys()))
            extra = sorted(set(row.keys()) - expected)
            raise ShapeMismatchError(
                f"Row {position} does not match the columns of row 0. "
                f"Missing: {missing}, unexpected: {extra}"
            )
        aligned.append([row[name] for name in columns])
    return columns, aligned
