"""Public core API for template parameterization and statement building."""

from .errors import ShapeMismatchError
from .results import OperationResult
from .statements import build_insert, build_select, build_update
from .template import Statement, Template, parameterize

__all__ = [
    "OperationResult",
    "ShapeMismatchError",
    "Statement",
    "Template",
    "build_insert",
    "build_select",
    "build_update",
    "parameterize",
]
