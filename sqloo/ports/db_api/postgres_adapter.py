"""asyncpg pool adapter for the remote PostgreSQL engine."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ...core._async_utils import _maybe_close
from ...core.template import Statement
from ...core.types import MaybeRow, RowSet
from .dialects import Dialect, PostgresDialect

logger = logging.getLogger(__name__)


def _status_rowcount(status: Optional[str]) -> int:
    """Extract the row count from a command status tag.

    asyncpg returns tags such as `INSERT 0 2`, `UPDATE 1`, or `CREATE TABLE`;
    the count is the trailing integer when present.
    """

    if not status:
        return 0
    tail = status.rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


class PostgresAdapter:
    """Execute statements on a shared asyncpg pool.

    Each call may run on any pooled connection; nothing here pins a sequence of
    statements to one physical connection.
    """

    def __init__(self, pool: Any, dialect: Dialect | None = None):
        """Create PostgreSQL adapter.

        Args:
            pool: `asyncpg.Pool` (or anything exposing `fetch`, `fetchrow`,
                `fetchval`, and `execute` with asyncpg semantics).
            dialect: Placeholder strategy, `PostgresDialect` by default.
        """

        self.client: Any | None = pool
        self.dialect = dialect or PostgresDialect()
        self._closed = False

    def _require_open_pool(self, stmt: Statement) -> Any:
        if self._closed or self.client is None:
            raise RuntimeError("connection is closed")
        logger.debug("postgres execute: %s (%d params)", stmt.sql, len(stmt.values))
        return self.client

    async def execute(self, stmt: Statement) -> Any:
        """Execute for effect and return the asyncpg status string."""

        pool = self._require_open_pool(stmt)
        return await pool.execute(stmt.sql, *stmt.values)

    async def write(self, stmt: Statement) -> int:
        """Execute a write and return the row count from its status tag."""

        return _status_rowcount(await self.execute(stmt))

    async def single(self, stmt: Statement) -> MaybeRow:
        """Execute query and return the first row, or `None`."""

        pool = self._require_open_pool(stmt)
        record = await pool.fetchrow(stmt.sql, *stmt.values)
        if record is None:
            return None
        return dict(record)

    async def many(self, stmt: Statement) -> RowSet:
        """Execute query and return all rows as dicts."""

        pool = self._require_open_pool(stmt)
        records = await pool.fetch(stmt.sql, *stmt.values)
        return [dict(record) for record in records]

    async def pluck(self, stmt: Statement) -> Any:
        """Execute query and return the first column of the first row, or `None`."""

        pool = self._require_open_pool(stmt)
        return await pool.fetchval(stmt.sql, *stmt.values)

    async def close(self) -> None:
        """Close the pool. Safe to call twice."""

        if self._closed:
            return
        pool = self.client
        self._closed = True
        self.client = None
        if pool is not None:
            await _maybe_close(pool)
            logger.info("postgres pool closed")
