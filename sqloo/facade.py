"""Database facade: CRUD helpers and template queries over one adapter."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping, Sequence

from .config import DatabaseOptions, EmbeddedOptions, RemoteOptions, resolve_options
from .core._async_utils import _maybe_await, _maybe_close
from .core.contracts import AdapterPort
from .core.results import OperationResult
from .core.statements import build_insert, build_select, build_update
from .core.template import Statement, Template, parameterize
from .core.types import InsertData, MaybeRow, RowSet, UpdateData, WhereClause
from .ports.db_api.dialects import Dialect
from .ports.db_api.postgres_adapter import PostgresAdapter
from .ports.db_api.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


class TableHandle:
    """`insert`/`get`/`list` bound to one table name."""

    def __init__(self, db: SqlooDatabase, name: str):
        self.db = db
        self.name = name

    async def insert(self, data: InsertData) -> OperationResult:
        return await self.db.insert(self.name, data)

    async def get(self, where: WhereClause) -> MaybeRow:
        return await self.db.get(self.name, where)

    async def list(self, where: WhereClause) -> RowSet:
        return await self.db.list(self.name, where)


class SqlooDatabase:
    """Facade over one driver adapter.

    Template queries (`many`, `single`, `pluck`, `execute`) take literal SQL
    fragments followed by the interpolated values; each value becomes a bound
    parameter:

        await db.single(["SELECT * FROM contents WHERE id = ", ""], content_id)

    A plain string runs without parameters. Table and column names passed to
    the CRUD helpers are inserted verbatim and must never come from user input.
    """

    def __init__(self, adapter: AdapterPort):
        self.adapter = adapter

    @property
    def client(self) -> Any:
        """Raw driver handle (`aiosqlite.Connection` or `asyncpg.Pool`)."""

        return self.adapter.client

    @property
    def dialect(self) -> Dialect:
        return self.adapter.dialect

    async def insert(self, table: str, data: InsertData) -> OperationResult:
        """Insert one mapping or a sequence of mappings in a single statement."""

        stmt = build_insert(self.dialect, table, data)
        affected = await self.adapter.write(stmt)
        return OperationResult("insert", affected)

    async def update(
        self,
        table: str,
        where: WhereClause,
        data: UpdateData,
    ) -> OperationResult:
        """Set `data` columns on rows matching every `where` pair."""

        stmt = build_update(self.dialect, table, where, data)
        affected = await self.adapter.write(stmt)
        return OperationResult("update", affected)

    async def get(self, table: str, where: WhereClause) -> MaybeRow:
        """Return the first row matching `where`, or `None`."""

        return await self.adapter.single(build_select(self.dialect, table, where))

    async def list(self, table: str, where: WhereClause) -> RowSet:
        """Return every row matching `where`."""

        return await self.adapter.many(build_select(self.dialect, table, where))

    def table(self, name: str) -> TableHandle:
        return TableHandle(self, name)

    async def many(self, strings: Template | str | Sequence[str], *values: Any) -> RowSet:
        """Run a template query and return all rows."""

        return await self.adapter.many(self._compile(strings, values))

    async def single(
        self, strings: Template | str | Sequence[str], *values: Any
    ) -> MaybeRow:
        """Run a template query and return the first row, or `None`."""

        return await self.adapter.single(self._compile(strings, values))

    async def pluck(self, strings: Template | str | Sequence[str], *values: Any) -> Any:
        """Run a template query and return the first column of the first row."""

        return await self.adapter.pluck(self._compile(strings, values))

    async def execute(self, strings: Template | str | Sequence[str], *values: Any) -> Any:
        """Run a template statement for effect and return the raw driver result."""

        return await self.adapter.execute(self._compile(strings, values))

    oo = many
    oO = single
    ox = pluck
    xx = execute

    def _compile(
        self, strings: Template | str | Sequence[str], values: tuple[Any, ...]
    ) -> Statement:
        return parameterize(Template.of(strings, *values), self.dialect)

    async def close(self) -> None:
        """Close the underlying connection or pool."""

        await self.adapter.close()

    async def __aenter__(self) -> SqlooDatabase:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close()


async def get_database(
    options: DatabaseOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> SqlooDatabase:
    """Connect to the configured backend and return the facade.

    Args:
        options: `EmbeddedOptions`, `RemoteOptions`, or a plain mapping using
            the keys `type`, `file`, `host`, `port`, `database`,
            `user`/`username`, and `password`.
        **kwargs: The same keys given as keyword arguments.

    Returns:
        Facade bound to a fresh connection (SQLite) or pool (PostgreSQL).
    """

    resolved = resolve_options(options, **kwargs)
    if isinstance(resolved, RemoteOptions):
        adapter: AdapterPort = PostgresAdapter(await _connect_postgres(resolved))
    else:
        adapter = SQLiteAdapter(await _connect_sqlite(resolved))
    return SqlooDatabase(adapter)


async def _connect_sqlite(options: EmbeddedOptions) -> Any:
    import aiosqlite

    conn = await aiosqlite.connect(options.file, isolation_level=None)
    try:
        await _maybe_await(
            conn.create_function("uuid_generate_v4", 0, _uuid_generate_v4)
        )
        if options.journal_mode:
            cursor = await conn.execute(f"PRAGMA journal_mode = {options.journal_mode}")
            await _maybe_close(cursor)
    except BaseException:
        await conn.close()
        raise
    logger.info("sqlite connection opened: %s", options.file)
    return conn


async def _connect_postgres(options: RemoteOptions) -> Any:
    import asyncpg

    pool = await asyncpg.create_pool(
        host=options.host,
        port=options.port,
        database=options.database,
        user=options.user,
        password=options.password,
        min_size=options.min_size,
        max_size=options.max_size,
    )
    logger.info(
        "postgres pool opened: %s:%s/%s", options.host, options.port, options.database or ""
    )
    return pool


def _uuid_generate_v4() -> str:
    return str(uuid.uuid4())

