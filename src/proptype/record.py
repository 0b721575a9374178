"""Records: classes declared as a set of typed properties.

Example:
    ```python
    from proptype import Record

    class Person(Record):
        pass

    Person.prop('name', str, length=(1, 50))
    Person.prop('age', int, range=(0, 125), required=False)
    Person.prop('admin', bool, default=False)
    Person.finalize()

    dan = Person(name='Dan', age=42)
    dan.name        # 'Dan'
    dan.is_admin    # False
    Person.parse({'name': ''})  # Failure(InvalidObjectError(...))
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Self

from proptype._logging import get_logger
from proptype.equality import Equality
from proptype.errors import (
    ConstraintError,
    FrozenSchemaError,
    InvalidObjectError,
    UnknownAttributeError,
)
from proptype.registry import TypeRegistry
from proptype.result import Failure, Result, Success
from proptype.types import ObjectType, Type, default_registry

__all__ = ['Record']

log = get_logger(__name__)


class Record(Equality):
    """Base class for records built from a property registry.

    Each subclass owns its property map. Subclassing copies the parent's map,
    so properties added to the child never reach the parent, and inherits the
    parent's TypeRegistry handle unless another is given::

        class Employee(Person, registry=hr_registry): ...

    ``finalize()`` installs the accessors and freezes the schema. Instances are
    immutable once constructed.

    Attributes:
        type_registry: The registry used to resolve kinds passed to ``prop``.
    """

    type_registry: ClassVar[TypeRegistry] = default_registry
    _properties: ClassVar[Mapping[str, Type]] = MappingProxyType({})
    _finalized: ClassVar[bool] = False
    _frozen_schema: ClassVar[bool] = False

    def __init_subclass__(cls, registry: TypeRegistry | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._properties = dict(cls._properties)
        cls._finalized = False
        cls._frozen_schema = False
        if registry is not None:
            cls.type_registry = registry

    # --- Schema declaration ---

    @classmethod
    def properties(cls) -> Mapping[str, Type]:
        """Return a read-only view of the property map, in declaration order."""
        return MappingProxyType(dict(cls._properties))

    @classmethod
    def prop(cls, name: str, kind: Any, *, required: bool = True, **options: Any) -> type[Self]:
        """Declare a property.

        ``kind`` is resolved to a Type class through ``type_registry``; the
        remaining options are passed to that class (``default``, ``includes``,
        ``range``, ``length``, ``schema``, ``build``...).

        Returns:
            The record class, so declarations can be chained.

        Raises:
            FrozenSchemaError: If the schema has been frozen.
            ConstraintError: If the name is private or reserved, or a constraint is invalid.
        """
        if cls is Record:
            msg = 'properties must be declared on a Record subclass'
            raise TypeError(msg)
        if cls._frozen_schema:
            raise FrozenSchemaError(cls.__qualname__, name)
        if name.startswith('_'):
            msg = f'{name!r} starts with an underscore and cannot be a property name'
            raise ConstraintError(msg)
        if hasattr(Record, name):
            msg = f'{name!r} is reserved by Record and cannot be a property name'
            raise ConstraintError(msg)

        type_class = cls.type_registry.lookup(kind)
        cls._properties[name] = type_class.from_kind(name, kind, required=required, **options)  # type: ignore[index]
        return cls

    @classmethod
    def finalize(cls) -> type[Self]:
        """Install accessors for every property, then freeze the schema.

        Idempotent, and also valid after a bare ``freeze()``.

        Raises:
            ConstraintError: If two properties would install the same accessor,
                e.g. a boolean ``admin`` and a property named ``is_admin``.
        """
        if cls._finalized:
            return cls

        _check_accessors(cls._properties)
        for type_ in cls._properties.values():
            type_.add_methods(cls).finalize()
        cls.__match_args__ = tuple(cls._properties)
        cls._finalized = True

        log.debug('schema.finalized', schema=cls.__qualname__, properties=list(cls._properties))
        return cls.freeze()

    @classmethod
    def freeze(cls) -> type[Self]:
        """Make the property map and every Type in it read-only.

        Accessors are not installed; ``finalize()`` still can be called later.
        """
        for type_ in cls._properties.values():
            type_.freeze()
        cls._properties = MappingProxyType(dict(cls._properties))
        cls._frozen_schema = True
        return cls

    # --- Construction ---

    @classmethod
    def parse(cls, attributes: Mapping[str, Any]) -> Result[Self, InvalidObjectError]:
        """Build a record without raising, collecting every problem found.

        Returns:
            Success(record), or Failure(InvalidObjectError) whose ``errors``
            maps each offending property to its messages. Nested schema errors
            are reported under dotted names (``address.city``).
        """
        errors: dict[str, list[str]] = {}

        for key in attributes:
            if key not in cls._properties:
                errors.setdefault(str(key), []).append('is not a known attribute')

        for name, type_ in cls._properties.items():
            if name not in attributes:
                if type_.required and not type_.has_default:
                    errors.setdefault(name, []).append('is required')
                continue

            value = attributes[name]
            if value is None and not type_.required:
                continue

            result = type_.parse(value)
            if result.is_failure():
                _collect_errors(errors, name, result.unwrap_failure())

        if errors:
            log.debug('record.invalid', schema=cls.__qualname__, errors=errors)
            return Failure(InvalidObjectError(cls.__qualname__, attributes, errors))
        return Success(cls(**attributes))

    def __init__(self, **attributes: Any) -> None:
        """Validate ``attributes`` and populate every property.

        Raises:
            UnknownAttributeError: If a key is not a declared property.
            MissingPropertyError: If a required property has no value or default.
            UnwrapError: If a value fails its property's validation.
        """
        properties = type(self)._properties

        unknown = [key for key in attributes if key not in properties]
        if unknown:
            raise UnknownAttributeError(unknown)

        for type_ in properties.values():
            type_.init(self, attributes)

        vars(self)['_frozen'] = True

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f'{type(self).__qualname__} is immutable; cannot set {name!r}'
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f'{type(self).__qualname__} is immutable; cannot delete {name!r}'
        raise AttributeError(msg)

    @property
    def frozen(self) -> bool:
        return vars(self).get('_frozen', False)

    # --- Equality ---

    def object_state(self) -> Mapping[str, Any]:
        fields = vars(self)
        return {name: fields.get(name) for name in type(self)._properties}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            coerced = type(self).parse(other)
            return coerced.is_success() and self == coerced.unwrap()
        return super().__eq__(other)

    __hash__ = Equality.__hash__

    def __repr__(self) -> str:
        fields = ', '.join(f'{name}={value!r}' for name, value in self.object_state().items())
        return f'{type(self).__qualname__}({fields})'


# Record subclasses given as a kind are nested schemas.
default_registry.register(Record, ObjectType)


def _check_accessors(properties: Mapping[str, Type]) -> None:
    owners: dict[str, str] = {}
    for name, type_ in properties.items():
        for accessor in type_.accessor_names():
            if accessor in owners:
                msg = f'{name!r} and {owners[accessor]!r} would both install {accessor!r}'
                raise ConstraintError(msg)
            if hasattr(Record, accessor):
                msg = f'{accessor!r} from {name!r} is reserved by Record'
                raise ConstraintError(msg)
            owners[accessor] = name

def _collect_errors(errors: dict[str, list[str]], name: str, error: Any) -> None:
    if isinstance(error, InvalidObjectError):
        for nested, messages in error.errors.items():
            errors.setdefault(f'{name}.{nested}', []).extend(messages)
    else:
        errors.setdefault(name, []).append(str(error))
