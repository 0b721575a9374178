"""String properties with an inclusive length constraint."""

from __future__ import annotations

from typing import Any

from proptype.errors import ConstraintError
from proptype.ranges import IntRange, normalize_range
from proptype.result import Failure, Result, Success
from proptype.types.base import Type

__all__ = ['StringType']


class StringType(Type):
    """A property holding a str whose length falls within ``length``.

    The minimum length defaults to 0 and the maximum to unbounded.

    Examples:
        >>> name = StringType('name', length=(2, 10))
        >>> name.length
        IntRange(begin=2, end=10, exclusive=False)
        >>> name.parse('a')
        Failure('must have a length within 2..10, but was: 1')

    Raises:
        ConstraintError: If the minimum is negative or the maximum is below it.
    """

    def __init__(self, name: str, *, length: Any = None, **options: Any) -> None:
        normalized = normalize_range(length)
        minimum = 0 if normalized.begin is None else normalized.begin
        maximum = normalized.end

        if minimum < 0:
            msg = f'length minimum must be greater than or equal to 0, but was: {minimum}'
            raise ConstraintError(msg)
        if maximum is not None and maximum < minimum:
            msg = f'length cannot be empty, but was: {IntRange(minimum, maximum)}'
            raise ConstraintError(msg)

        self.length = IntRange(minimum, maximum)
        super().__init__(name, **options)

    @property
    def min_length(self) -> int:
        return self.length.begin  # type: ignore[return-value]

    @property
    def max_length(self) -> int | None:
        return self.length.end

    def parse(self, value: Any) -> Result[Any, str]:
        """Check ``includes``, then the kind, then the length."""
        return super().parse(value).and_then(self._parse_kind).and_then(self._parse_length)

    def _parse_kind(self, value: Any) -> Result[str, str]:
        if isinstance(value, str):
            return Success(value)
        return Failure(f'must be a String, but was: {type(value).__name__}')

    def _parse_length(self, value: str) -> Result[str, str]:
        if len(value) in self.length:
            return Success(value)
        return Failure(f'must have a length within {self.length}, but was: {len(value)}')


StringType.declare_kind(str)
