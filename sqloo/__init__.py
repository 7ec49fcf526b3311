"""sqloo: tagged-template SQL and small CRUD helpers over SQLite and PostgreSQL."""

from .config import (
    DatabaseOptions,
    EmbeddedOptions,
    RemoteOptions,
    options_from_env,
    resolve_options,
)
from .core import (
    OperationResult,
    ShapeMismatchError,
    Statement,
    Template,
    build_insert,
    build_select,
    build_update,
    parameterize,
)
from .facade import SqlooDatabase, TableHandle, get_database
from .ports import (
    Dialect,
    PostgresAdapter,
    PostgresDialect,
    SQLiteAdapter,
    SQLiteDialect,
)

__all__ = [
    "DatabaseOptions",
    "EmbeddedOptions",
    "RemoteOptions",
    "options_from_env",
    "resolve_options",
    "OperationResult",
    "ShapeMismatchError",
    "Statement",
    "Template",
    "build_insert",
    "build_select",
    "build_update",
    "parameterize",
    "SqlooDatabase",
    "TableHandle",
    "get_database",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "SQLiteAdapter",
    "PostgresAdapter",
]
