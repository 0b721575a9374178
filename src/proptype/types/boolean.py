"""Boolean properties."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from proptype.types.object import ObjectType

__all__ = ['BooleanType']


class BooleanType(ObjectType):
    """A property whose value is exactly True or False.

    Besides the reader, ``add_methods`` installs an ``is_<name>`` query that
    is True only when the stored value is the ``True`` singleton.

    Examples:
        >>> admin = BooleanType('admin')
        >>> admin.includes
        (True, False)
        >>> admin.parse('yes')
        Failure("must be one of (True, False), but was 'yes'")
    """

    def __init__(self, name: str, *, includes: Iterable[bool] = (True, False), **options: Any) -> None:
        super().__init__(name, includes=includes, **options)

    def accessor_names(self) -> tuple[str, ...]:
        return (*super().accessor_names(), f'is_{self.name}')

    def _add_reader(self, descendant: type) -> None:
        get = self.get
        setattr(descendant, f'is_{self.name}', property(lambda target: get(target) is True))
        super()._add_reader(descendant)


BooleanType.declare_kind(bool)
