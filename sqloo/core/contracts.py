"""Core port contracts implemented by dialects and driver adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from .types import MaybeRow, RowSet

if TYPE_CHECKING:
    from .template import Statement


class DialectPort(Protocol):
    """Placeholder strategy used by template and statement compilation."""

    name: str
    paramstyle: str

    def placeholder(self, index: int) -> str: ...


class AdapterPort(Protocol):
    """Driver adapter behavior required by the facade."""

    dialect: DialectPort
    client: Any

    async def pluck(self, stmt: Statement) -> Any: ...

    async def single(self, stmt: Statement) -> MaybeRow: ...

    async def many(self, stmt: Statement) -> RowSet: ...

    async def execute(self, stmt: Statement) -> Any: ...

    async def write(self, stmt: Statement) -> int: ...

    async def close(self) -> None: ...
