"""Generic object properties, optionally validated by a nested schema."""

from __future__ import annotations

import types
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Self

from proptype.result import Failure, Result, Success
from proptype.types.base import Type

if TYPE_CHECKING:
    from proptype.record import Record

__all__ = ['ObjectType']


class ObjectType(Type):
    """A property holding any value, or a record of a nested schema.

    Without a schema only the ``includes`` check applies. With one, values
    that already are schema instances pass, mappings are parsed into a new
    instance through ``schema.parse``, and anything else fails.

    A schema is either an existing Record subclass (``schema=Address``, or the
    kind given to ``Record.prop``) or built once, at declaration time, by a
    ``build`` callback that receives a fresh Record subclass named after the
    property and declares its properties::

        Person.prop('address', object, build=lambda address: address.prop('city', str))

    Attributes:
        schema: The nested Record subclass, or None.
    """

    def __init__(
        self,
        name: str,
        *,
        schema: type[Record] | None = None,
        build: Callable[[type[Record]], Any] | None = None,
        **options: Any,
    ) -> None:
        if build is not None:
            schema = _build_schema(name, build, schema, type(self).registry)
        self.schema = schema
        super().__init__(name, **options)

    @classmethod
    def from_kind(cls, name: str, kind: Any, **options: Any) -> Self:
        from proptype.record import Record

        if isinstance(kind, type) and issubclass(kind, Record) and kind is not Record:
            options.setdefault('schema', kind)
        return cls(name, **options)

    def parse(self, value: Any) -> Result[Any, Any]:
        """Check ``includes``, then coerce mappings through the nested schema."""
        return super().parse(value).and_then(self._parse_schema)

    def _parse_schema(self, value: Any) -> Result[Any, Any]:
        if self.schema is None or isinstance(value, self.schema):
            return Success(value)
        if isinstance(value, Mapping):
            return self.schema.parse(value)
        return Failure(f'must be a {self.schema.__name__} or a mapping, but was: {type(value).__name__}')


def _build_schema(
    name: str,
    build: Callable[[type[Record]], Any],
    base: type[Record] | None,
    registry: Any,
) -> type[Record]:
    from proptype.record import Record

    class_name = ''.join(part.capitalize() for part in name.split('_') if part) or 'Nested'
    schema = types.new_class(
        class_name,
        (base or Record,),
        {'registry': registry},
        lambda namespace: namespace.update(__module__=__name__),
    )
    build(schema)
    return schema.finalize()


ObjectType.declare_kind(object)
