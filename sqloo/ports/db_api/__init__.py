"""Driver adapter and dialect exports."""

from .dialects import Dialect, PostgresDialect, SQLiteDialect
from .postgres_adapter import PostgresAdapter
from .sqlite_adapter import SQLiteAdapter

__all__ = [
    "Dialect",
    "PostgresAdapter",
    "PostgresDialect",
    "SQLiteAdapter",
    "SQLiteDialect",
]
