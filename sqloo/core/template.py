"""Template parameterization: literal SQL fragments plus bound values.

A template is the Python shape of a tagged SQL literal: an ordered tuple of
literal fragments interleaved with interpolated values. Every interpolation
becomes one bound parameter using the dialect's placeholder style, so
interpolated positions can only ever carry values, never identifiers.
"""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from .contracts import DialectPort


@dataclass(frozen=True)
class Statement:
    """Compiled SQL text with positional parameters.

    `sql` contains exactly one placeholder per entry in `values`, in the same
    left-to-right order.
    """

    sql: str
    values: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class Template:
    """Literal SQL fragments interleaved with interpolated values.

    Attributes:
        strings: Literal fragments, one more than `values`.
        values: Values bound between consecutive fragments.
    """

    strings: Tuple[str, ...]
    values: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if len(self.strings) != len(self.values) + 1:
            raise ValueError(
                "Template needs exactly one more literal fragment than values; "
                f"got {len(self.strings)} fragments and {len(self.values)} values."
            )
        for fragment in self.strings:
            if not isinstance(fragment, str):
                raise TypeError("Template fragments must be str.")

    @classmethod
    def of(cls, strings: Template | str | Sequence[str], *values: Any) -> Template:
        """Normalize the accepted query call shapes into a `Template`.

        Args:
            strings: An existing template, a SQL string without interpolations,
                or a sequence of literal fragments.
            *values: Interpolated values when `strings` is a fragment sequence.

        Returns:
            Template instance.
        """

        if isinstance(strings, Template):
            if values:
                raise TypeError("Cannot pass extra values with a Template instance.")
            return strings
        if isinstance(strings, str):
            if values:
                raise TypeError(
                    "A plain SQL string takes no values; pass literal fragments "
                    'instead, e.g. (["... WHERE id = ", ""], id).'
                )
            return cls((strings,))
        if isinstance(strings, SequenceABC) and not isinstance(strings, (bytes, bytearray)):
            return cls(tuple(strings), tuple(values))
        raise TypeError(f"Unsupported template input: {type(strings).__name__}")


class _PlaceholderCounter:
    """Hands out placeholders left to right for one statement."""

    def __init__(self, dialect: DialectPort) -> None:
        self._dialect = dialect
        self._index = 0

    def next(self) -> str:
        """Return the placeholder for the next bound position."""

        token = self._dialect.placeholder(self._index)
        self._index += 1
        return token


def parameterize(template: Template, dialect: DialectPort) -> Statement:
    """Compile a template into SQL text and positional values.

    Args:
        template: Literal fragments and interpolated values.
        dialect: Placeholder strategy for the active backend.

    Returns:
        Statement whose placeholder count equals `len(template.values)`.
    """

    counter = _PlaceholderCounter(dialect)
    parts = [template.strings[0]]
    for fragment in template.strings[1:]:
        parts.append(counter.next())
        parts.append(fragment)
    return Statement("".join(parts), tuple(template.values))
