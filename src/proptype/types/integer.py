"""Integer properties with an optional inclusive range."""

from __future__ import annotations

from typing import Any

from proptype.errors import ConstraintError
from proptype.ranges import normalize_range
from proptype.result import Failure, Result, Success
from proptype.types.base import Type

__all__ = ['IntegerType']


class IntegerType(Type):
    """A property holding an int within ``range``.

    ``range`` accepts anything :func:`~proptype.ranges.normalize_range` does
    and is stored in canonical inclusive form; either bound may be None.
    ``bool`` values are rejected even though ``bool`` subclasses ``int``.

    Examples:
        >>> age = IntegerType('age', range=IntRange(0, 125))
        >>> age.parse(11)
        Success(11)
        >>> IntegerType('version', range=(1, 10)).parse(11)
        Failure('must be within 1..10, but was: 11')

    Raises:
        ConstraintError: If the range can never be satisfied.
    """

    def __init__(self, name: str, *, range: Any = None, **options: Any) -> None:  # noqa: A002
        normalized = normalize_range(range)
        if normalized.is_empty():
            msg = f'range cannot be empty, but was: {normalized}'
            raise ConstraintError(msg)

        self.range = normalized
        super().__init__(name, **options)

    @property
    def min_range(self) -> int | None:
        """The lower bound, or None when unbounded."""
        return self.range.begin

    @property
    def max_range(self) -> int | None:
        """The upper bound, or None when unbounded."""
        return self.range.end

    def parse(self, value: Any) -> Result[Any, str]:
        """Check ``includes``, then the kind, then the range."""
        return super().parse(value).and_then(self._parse_kind).and_then(self._parse_range)

    def _parse_kind(self, value: Any) -> Result[int, str]:
        if isinstance(value, int) and not isinstance(value, bool):
            return Success(value)
        return Failure(f'must be an Integer, but was: {type(value).__name__}')

    def _parse_range(self, value: int) -> Result[int, str]:
        if value in self.range:
            return Success(value)
        return Failure(f'must be within {self.range}, but was: {value}')


IntegerType.declare_kind(int)
