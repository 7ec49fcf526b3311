"""DB-API cursor adapter for the embedded SQLite engine."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...core._async_utils import _maybe_await, _maybe_close
from ...core.template import Statement
from ...core.types import MaybeRow, Row, RowSet
from .dialects import Dialect, SQLiteDialect

logger = logging.getLogger(__name__)


class SQLiteAdapter:
    """Execute statements on one exclusive SQLite connection.

    Works with an `aiosqlite.Connection` as well as a plain `sqlite3.Connection`;
    every driver call goes through `_maybe_await`.
    """

    def __init__(self, conn: Any, dialect: Dialect | None = None):
        """Create SQLite adapter.

        Args:
            conn: `aiosqlite` (or `sqlite3`) connection object.
            dialect: Placeholder strategy, `SQLiteDialect` by default.
        """

        self.client: Any | None = conn
        self.dialect = dialect or SQLiteDialect()
        self._closed = False

    def _require_open_connection(self) -> Any:
        if self._closed or self.client is None:
            raise RuntimeError("connection is closed")
        return self.client

    async def _cursor(self, stmt: Statement) -> Any:
        conn = self._require_open_connection()
        logger.debug("sqlite execute: %s (%d params)", stmt.sql, len(stmt.values))
        cur = await _maybe_await(conn.cursor())
        try:
            await _maybe_await(cur.execute(stmt.sql, stmt.values))
        except BaseException:
            await _maybe_close(cur)
            raise
        return cur

    def _row_to_mapping(self, cursor: Any, row: Any) -> Row:
        """Normalize row object to a plain dict.

        Supports mapping rows directly, `sqlite3.Row`, and tuple rows via
        `cursor.description`.
        """

        if isinstance(row, Mapping):
            return dict(row)

        keys = getattr(row, "keys", None)
        if callable(keys):
            return {key: row[key] for key in keys()}

        if isinstance(row, (tuple, list)):
            desc = getattr(cursor, "description", None)
            if not desc:
                raise TypeError(
                    "Cursor has no description; cannot map tuple rows to dict."
                )
            cols = [d[0] for d in desc]
            return dict(zip(cols, row, strict=True))

        raise TypeError(f"Unsupported row type: {type(row)}")

    async def execute(self, stmt: Statement) -> Any:
        """Execute for effect and return the driver cursor."""

        return await self._cursor(stmt)

    async def write(self, stmt: Statement) -> int:
        """Execute a write and return the driver-reported changed-row count."""

        cur = await self._cursor(stmt)
        try:
            return cur.rowcount
        finally:
            await _maybe_close(cur)

    async def single(self, stmt: Statement) -> MaybeRow:
        """Execute query and return the first row, or `None`."""

        cur = await self._cursor(stmt)
        try:
            row = await _maybe_await(cur.fetchone())
            if row is None:
                return None
            return self._row_to_mapping(cur, row)
        finally:
            await _maybe_close(cur)

    async def many(self, stmt: Statement) -> RowSet:
        """Execute query and return all rows as dicts."""

        cur = await self._cursor(stmt)
        try:
            rows = await _maybe_await(cur.fetchall())
            return [self._row_to_mapping(cur, r) for r in rows]
        finally:
            await _maybe_close(cur)

    async def pluck(self, stmt: Statement) -> Any:
        """Execute query and return the first column of the first row, or `None`."""

        cur = await self._cursor(stmt)
        try:
            row = await _maybe_await(cur.fetchone())
        finally:
            await _maybe_close(cur)
        if row is None:
            return None
        if isinstance(row, Mapping):
            return next(iter(row.values()), None)
        return row[0]

    async def close(self) -> None:
        """Close the underlying connection. Safe to call twice."""

        if self._closed:
            return
        conn = self.client
        self._closed = True
        self.client = None
        if conn is not None:
            await _maybe_close(conn)
            logger.info("sqlite connection closed")
