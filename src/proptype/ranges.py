"""Integer ranges with optional bounds and their canonical inclusive form."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = ['IntRange', 'normalize_range']


class IntRange(msgspec.Struct, frozen=True, gc=False):
    """An integer interval whose bounds may be open (``None``).

    ``exclusive`` marks an end bound that is not part of the range, as in
    Python's ``range``. Use :func:`normalize_range` to obtain the canonical
    inclusive form stored by Type descriptors.

    Examples:
        >>> str(IntRange(1, 10))
        '1..10'
        >>> str(IntRange(None, 10, exclusive=True))
        '...10'
        >>> 5 in IntRange(1, None)
        True
    """

    begin: int | None = None
    end: int | None = None
    exclusive: bool = False

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        if self.begin is not None and value < self.begin:
            return False
        if self.end is None:
            return True
        return value < self.end if self.exclusive else value <= self.end

    def __str__(self) -> str:
        begin = '' if self.begin is None else str(self.begin)
        end = '' if self.end is None else str(self.end)
        return f'{begin}{"..." if self.exclusive else ".."}{end}'

    def is_empty(self) -> bool:
        """Return True if no integer can ever fall within the range."""
        canonical = normalize_range(self)
        return canonical.begin is not None and canonical.end is not None and canonical.end < canonical.begin


def normalize_range(value: Any) -> IntRange:
    """Return the canonical inclusive ``IntRange`` for ``value``.

    Accepts an ``IntRange``, a step-1 ``range`` (exclusive end), a
    ``(begin, end)`` pair (inclusive) or ``None`` (unbounded). An exclusive end
    is decremented by one; an absent end stays absent. Normalizing a canonical
    range returns an equal range.

    Raises:
        TypeError: If ``value`` cannot describe an integer range.

    Examples:
        >>> normalize_range(IntRange(1, 10, exclusive=True))
        IntRange(begin=1, end=9, exclusive=False)
        >>> normalize_range(range(0, 5))
        IntRange(begin=0, end=4, exclusive=False)
    """
    match value:
        case None:
            return IntRange()
        case IntRange(begin=begin, end=end, exclusive=True):
            return IntRange(begin, None if end is None else end - 1)
        case IntRange():
            return value
        case range(step=1):
            return IntRange(value.start, value.stop - 1)
        case (begin, end) if not isinstance(value, range):
            return normalize_range(IntRange(_bound(begin), _bound(end)))
        case _:
            msg = f'expected an IntRange, a range with step 1 or a (begin, end) pair, but was: {value!r}'
            raise TypeError(msg)


def _bound(value: Any) -> int | None:
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    msg = f'range bounds must be integers or None, but was: {value!r}'
    raise TypeError(msg)
