"""Shared core type aliases used across builders, adapters, and the facade."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

Row = Dict[str, Any]
RowSet = List[Row]
MaybeRow = Optional[Row]

WhereClause = Mapping[str, Any]
UpdateData = Mapping[str, Any]
InsertData = Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]
