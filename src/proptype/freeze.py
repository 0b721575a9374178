"""Ownership-transferring copies: deep-copy a value and make every container read-only."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import msgspec

__all__ = ['FrozenList', 'deep_freeze', 'is_frozen']

_IMMUTABLE_SCALARS = (type(None), bool, int, float, complex, str, bytes, range, type)


class FrozenList(tuple):
    """The frozen form of a list: a tuple that still compares equal to the list it came from.

    Examples:
        >>> FrozenList([1, 2]) == [1, 2]
        True
        >>> FrozenList([1, 2]) == (1, 2)
        True
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, list):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other, strict=True))
        return tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = tuple.__hash__

    def __repr__(self) -> str:
        return f'FrozenList({list(self)!r})'


def is_frozen(value: Any) -> bool:
    """Return True if the value reports itself as frozen (records, types, results)."""
    return getattr(value, 'frozen', False) is True


def deep_freeze(value: Any) -> Any:
    """Return a frozen deep copy of ``value``.

    Mappings become read-only mapping proxies over a private copy, lists become
    FrozenList (still equal to the source list), tuples stay tuples, sets become
    frozensets and bytearrays become bytes.
    Values that are already immutable are shared rather than copied: scalars,
    frozen msgspec structs, anything whose ``frozen`` attribute is True, and
    exceptions (which carry tracebacks and are handed over as-is).

    Examples:
        >>> frozen = deep_freeze({'tags': ['a', 'b']})
        >>> frozen['tags'] == ['a', 'b']
        True
    """
    if isinstance(value, _IMMUTABLE_SCALARS) or is_frozen(value):
        return value
    if isinstance(value, BaseException):
        return value
    if isinstance(value, msgspec.Struct) and type(value).__struct_config__.frozen:
        return value
    if isinstance(value, Mapping):
        return MappingProxyType({key: deep_freeze(item) for key, item in value.items()})
    if type(value) in (list, FrozenList):
        return FrozenList(deep_freeze(item) for item in value)
    if type(value) is tuple:
        return tuple(deep_freeze(item) for item in value)
    if isinstance(value, set | frozenset):
        return frozenset(deep_freeze(item) for item in value)
    if isinstance(value, bytearray):
        return bytes(value)
    return copy.deepcopy(value)
