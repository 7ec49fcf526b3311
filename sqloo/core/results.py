"""Result value objects returned by write operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Operation = Literal["insert", "update"]


@dataclass(frozen=True)
class OperationResult:
    """Outcome of an `insert`/`update` call.

    Attributes:
        operation: Which write produced the result.
        affected: Backend-reported number of rows written.
    """

    operation: Operation
    affected: int
