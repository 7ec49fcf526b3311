"""Public port exports for concrete driver adapters."""

from .db_api import Dialect, PostgresAdapter, PostgresDialect, SQLiteAdapter, SQLiteDialect

__all__ = [
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "SQLiteAdapter",
    "PostgresAdapter",
]
