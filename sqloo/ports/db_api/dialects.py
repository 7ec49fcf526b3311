"""Concrete SQL dialect implementations for the driver adapters."""

from __future__ import annotations


class Dialect:
    """Base dialect that defines placeholder behavior."""

    name: str = "generic"
    paramstyle: str = "qmark"

    def placeholder(self, index: int) -> str:
        """Return the placeholder for the 0-based bound position `index`."""

        if index < 0:
            raise ValueError("placeholder index must be >= 0.")
        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle == "numeric_dollar":
            return f"${index + 1}"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")


class SQLiteDialect(Dialect):
    """SQLite dialect (`?` positional parameters)."""

    name = "sqlite"
    paramstyle = "qmark"


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`$1..$n` numbered parameters, as used by asyncpg)."""

    name = "postgres"
    paramstyle = "numeric_dollar"
