"""Structural equality shared by Type descriptors, records and results.

Two comparisons are offered, mirroring the split between value equality and
strict identity of kinds:

* ``a == b`` holds when ``b`` is an instance of ``a``'s class (subclasses
  included) and both states compare equal with ordinary, coercing ``==``.
* ``a.eql(b)`` holds only when both have exactly the same class and the states
  match under :func:`strict_equal`, which also requires identical value types.

``hash`` is derived from the exact class and the state, so it is consistent with
``eql``. Instances of a class and its subclass may be ``==`` yet hash
differently.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from typing import Any

__all__ = ['Equality', 'hash_key', 'strict_equal']


class Equality:
    """Mixin giving structural ``==``, ``eql`` and ``hash`` over ``object_state()``."""

    __slots__ = ()

    def object_state(self) -> Mapping[str, Any]:
        """Return the state compared by equality; defaults to the instance dict."""
        return vars(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return dict(self.object_state()) == dict(other.object_state())

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def eql(self, other: object) -> bool:
        """Return True if ``other`` has exactly this class and a strictly equal state."""
        if type(other) is not type(self):
            return False
        return strict_equal(self.object_state(), other.object_state())  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(type(self)) ^ hash(hash_key(self.object_state()))

    def deconstruct_keys(self, keys: Iterable[str] | None = None) -> dict[str, Any]:
        """Return the state restricted to ``keys``; unknown keys are dropped.

        Examples:
            >>> person.deconstruct_keys(['name', 'nickname'])
            {'name': 'Dan'}
        """
        state = self.object_state()
        if keys is None:
            return dict(state)
        return {key: state[key] for key in keys if key in state}

    def deconstruct(self) -> tuple[Any, ...]:
        """Return the state values in declaration order."""
        return tuple(self.object_state().values())


def strict_equal(left: Any, right: Any) -> bool:
    """Compare without coercion: types must match at every level.

    Examples:
        >>> strict_equal(1, 1.0)
        False
        >>> strict_equal({'a': [1]}, {'a': [1]})
        True
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, Equality):
        return left.eql(right)
    if isinstance(left, Mapping):
        if left.keys() != right.keys():
            return False
        return all(strict_equal(value, right[key]) for key, value in left.items())
    if isinstance(left, list | tuple):
        return len(left) == len(right) and all(strict_equal(a, b) for a, b in zip(left, right, strict=True))
    if isinstance(left, Set):
        # Sets hold hashable members, so coercing membership is the best available check.
        return left == right and all(any(strict_equal(a, b) for b in right) for a in left)
    return bool(left == right)


def hash_key(value: Any) -> Any:
    """Build a hashable stand-in for ``value`` that agrees with ``strict_equal``.

    Mappings hash as frozensets of their items and sequences as tuples, so
    read-only mapping proxies and tuples produced by ``deep_freeze`` can take
    part in hashing.
    """
    if isinstance(value, Mapping):
        return frozenset((key, hash_key(item)) for key, item in value.items())
    if isinstance(value, list | tuple):
        return (type(value), *(hash_key(item) for item in value))
    if isinstance(value, Set) and not isinstance(value, frozenset):
        return frozenset(hash_key(item) for item in value)
    return value
